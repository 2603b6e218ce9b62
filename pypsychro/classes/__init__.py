from .classes import phase, ef_method, class_dic, ConvergenceError, SolverResult
