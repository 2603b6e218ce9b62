#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyPsychro - Real-gas properties of dry and moist air
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""


# Physical constants
R = 8.314459848  # Universal gas constant, J/(mol.K)
Ma = 0.0289635  # Molar mass of dry air, kg/mol
Mv = 0.01801528  # Molar mass of water, kg/mol
P_ATM = 101325.0  # Standard atmosphere (Pa), entropy reference pressure
DEGC2K = 273.15  # Offset to convert degrees C to K
T_TRIPLE = 273.16  # Triple point of water (K). Liquid / ice phase boundary
T_BOIL = 373.15  # Normal boiling point of water (K)

# Composition of dissolved air used for Henry's constant
XO2_AIR = 0.22
XN2_AIR = 0.78

# Validity range of the saturation pressure formulations (K)
T_MIN = 173.15
T_MAX = 473.15

# Solver defaults
Z_TOL = 1e-15  # Compressibility factor successive substitution tolerance
Z_MAXITER = 100
EF_TOL = 1e-8  # Enhancement factor tolerance
EF_MAXITER = 200
EF_STEP = 1e-8  # Forward difference step for the Newton derivative
XV_MIN = 1e-8  # Vapor mole fractions at or below this drop out of the mixing entropy
