from .shared_fns import polyeval, convert_to_numpy, process_output
