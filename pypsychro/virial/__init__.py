from .virial import (Baa, dBaa, Caaa, dCaaa, Baw, dBaw, Caaw, dCaaw, Caww, dCaww, Bww, dBww, Cwww, dCwww,
                     Bm, dBm, Cm, dCm, kappa_l, kappa_s, kappa_f, henryk_O2, henryk_N2, henryk)
