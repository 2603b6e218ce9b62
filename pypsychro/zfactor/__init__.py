from .zfactor import solve_z, calcz, reduced_virial
