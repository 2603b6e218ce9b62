from pypsychro.classes import class_dic

def validate_methods(names, variables):
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                options = [e.name for e in class_dic[method]]
                raise ValueError(f"An incorrect {method} was specified: '{variables[m]}'. Choose from {options}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables

def validate_state(degk, p, xv=None):
    """ Checks a state point: temperature (K) and pressure (Pa) positive, vapor mole fraction within [0, 1] """
    if not degk > 0:
        raise ValueError(f"Temperature must be positive (K), got {degk}")
    if not p > 0:
        raise ValueError(f"Pressure must be positive (Pa), got {p}")
    if xv is not None and not 0 <= xv <= 1:
        raise ValueError(f"Vapor mole fraction must lie within [0, 1], got {xv}")
