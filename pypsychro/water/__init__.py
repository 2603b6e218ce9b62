"""
Properties of pure water used by the moist air formulation: saturation pressure over
liquid and ice, condensed phase specific volumes and pure vapor virial coefficients.
"""

from .water import phase_of, Pws, Pws_l, Pws_s, Tws, volumewater, volumeice, Blin, dBlin, Clin, dClin
