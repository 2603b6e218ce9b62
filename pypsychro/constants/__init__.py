from .constants import (R, Ma, Mv, P_ATM, DEGC2K, T_TRIPLE, T_BOIL, XO2_AIR, XN2_AIR, T_MIN, T_MAX,
                        Z_TOL, Z_MAXITER, EF_TOL, EF_MAXITER, EF_STEP, XV_MIN)
