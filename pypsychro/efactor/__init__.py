from .efactor import (CondensedPhase, condensed_phase, lnf, lnf2, solve_efactor, solve_efactor2,
                      efactor, efactor2, enhancement_factor)
