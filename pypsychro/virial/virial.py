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

# Virial coefficients of dry air, water vapor and their cross interactions, with exact temperature
# derivatives. Wexler, A. and Hyland, R. W. (1983), "Formulations for the thermodynamic properties
# of dry air from 173.15 K to 473.15 K, and of saturated moist air from 173.15 K to 372.15 K,
# at pressures to 5 MPa", ASHRAE Transactions 89(2A). Equation numbers below refer to that paper.
#
# No range checking is done here. Temperatures outside the fitted range are extrapolated.

from math import exp, sqrt

from pypsychro.classes import phase
from pypsychro.constants import R, DEGC2K, P_ATM, XO2_AIR, XN2_AIR
from pypsychro.water import phase_of, Blin, dBlin, Clin, dClin

# =============================================================================
# Pure and cross coefficients. Units m3/mol (B) and m6/mol2 (C), derivatives per K
# =============================================================================
def Baa(degk: float) -> float:
    """ Returns second virial coefficient of dry air (m3/mol), Eq 10 """
    return 0.349568e-4 + (1.0 / degk) * (-0.668772e-2 + (1.0 / degk) * (-0.210141e1 + 0.924746e2 / degk))

def dBaa(degk: float) -> float:
    return 1.0 / (degk * degk) * (0.668772e-2 + (1.0 / degk) * (0.420282e1 - 2.774238e2 / degk))

def Caaa(degk: float) -> float:
    """ Returns third virial coefficient of dry air (m6/mol2), Eq 11 """
    return 0.125975e-8 + 1.0 / degk * (-0.190905e-6 + 0.632467e-4 / degk)

def dCaaa(degk: float) -> float:
    return 1.0 / (degk * degk) * (0.190905e-6 - 1.264934e-4 / degk)

def Baw(degk: float) -> float:
    """ Returns air-water cross second virial coefficient (m3/mol), Eq 15 """
    return 0.32366097e-4 + 1.0 / degk * (-0.141138e-1 + 1.0 / degk * (-0.1244535e1 - 0.2348789e4 / (degk * degk)))

def dBaw(degk: float) -> float:
    return 1.0 / (degk * degk) * (0.141138e-1 + 1.0 / degk * (0.248907e1 + 0.93951568e4 / (degk * degk)))

def Caaw(degk: float) -> float:
    """ Returns air-air-water cross third virial coefficient (m6/mol2), Eq 16 """
    return 0.482737e-9 + 1.0 / degk * (0.105678e-6 + 1.0 / degk * (-0.656394e-4 + 1.0 / degk * (0.294442e-1 - 0.319317e1 / degk)))

def dCaaw(degk: float) -> float:
    return 1.0 / (degk * degk) * (-0.105678e-6 + 1.0 / degk * (1.312788e-4 + 1.0 / degk * (-0.883326e-1 + 1.277268e1 / degk)))

def Caww(degk: float) -> float:
    """ Returns air-water-water cross third virial coefficient (m6/mol2), Eq 17 """
    return -1e-6 * exp(-0.10728876e2 + 1.0 / degk * (0.347802e4 + 1.0 / degk * (-0.383383e6 + 0.33406e8 / degk)))

def dCaww(degk: float) -> float:
    return 1.0 / (degk * degk) * (-0.347802e4 + 1.0 / degk * (2 * 0.383383e6 - 3 * 0.33406e8 / degk)) * Caww(degk)

def Bww(degk: float) -> float:
    """ Returns second virial coefficient of water vapor (m3/mol), Eq 19 """
    return R * degk * Blin(degk)

def dBww(degk: float) -> float:
    return R * (degk * dBlin(degk) + Blin(degk))

def Cwww(degk: float) -> float:
    """ Returns third virial coefficient of water vapor (m6/mol2), Eq 20 """
    return R * R * degk * degk * (Clin(degk) + Blin(degk) ** 2)

def dCwww(degk: float) -> float:
    return R * degk * R * degk * (dClin(degk) + 2 * Blin(degk) * dBlin(degk)) + (2 * R * R * degk) * (Clin(degk) + Blin(degk) ** 2)

# =============================================================================
# Mixture coefficients. Mole fractions are held constant in the derivatives
# =============================================================================
def Bm(degk: float, xv: float) -> float:
    """ Returns second virial coefficient of moist air (m3/mol), Eq 2
        degk: Temperature (K)
        xv: Mole fraction of water vapor
    """
    xa = 1 - xv
    return xa * xa * Baa(degk) + 2 * xa * xv * Baw(degk) + xv * xv * Bww(degk)

def dBm(degk: float, xv: float) -> float:
    xa = 1.0 - xv
    return xa * xa * dBaa(degk) + 2 * xa * xv * dBaw(degk) + xv * xv * dBww(degk)

def Cm(degk: float, xv: float) -> float:
    """ Returns third virial coefficient of moist air (m6/mol2), Eq 3
        degk: Temperature (K)
        xv: Mole fraction of water vapor
    """
    xa = 1 - xv
    return xa * xa * xa * Caaa(degk) + 3 * xa * xa * xv * Caaw(degk) + 3 * xa * xv * xv * Caww(degk) + xv * xv * xv * Cwww(degk)

def dCm(degk: float, xv: float) -> float:
    xa = 1 - xv
    return xa * xa * xa * dCaaa(degk) + 3 * xa * xa * xv * dCaaw(degk) + 3 * xa * xv * xv * dCaww(degk) + xv * xv * xv * dCwww(degk)

# =============================================================================
# Condensed phase compressibility and air solubility
# =============================================================================
def kappa_l(degk: float) -> float:
    """ Returns isothermal compressibility of saturated liquid water (1/Pa), Eq 21
        Fitted over 0 - 150 degC, usable to 200 degC. Separate fits below and above 100 degC
    """
    degc = degk - DEGC2K
    if degc < 100.0:
        k = (50.88496 + degc * (0.6163813 + degc * (1.459187e-3 + degc * (20.08438e-6 + degc * (-58.47727e-9 + degc * 0.4104110e-9))))) / (1.0 + 0.1967348e-1 * degc)
    else:
        k = (50.884917 + degc * (0.62590623 + degc * (1.3848668e-3 + degc * (21.603427e-6 + degc * (-0.72087667e-7 + degc * 0.46545054e-9))))) / (1.0 + 0.1967348e-1 * degc)
    return k * 1e-11

def kappa_s(degk: float) -> float:
    """ Returns isothermal compressibility of ice (1/Pa), Eq 22 """
    return (8.875 + 0.0165 * degk) * 1e-11

def kappa_f(degk: float, branch: phase = None) -> float:
    """ Returns isothermal compressibility of the condensed phase (1/Pa)
        degk: Temperature (K)
        branch: Condensed phase. Determined from degk if not specified
    """
    if branch is None:
        branch = phase_of(degk)
    if branch is phase.ICE:
        return kappa_s(degk)
    return kappa_l(degk)

def _henryk_quadratic(degk, alpha, beta, gamma, delta, epsilon):
    # log10(k) is the root of a2*y^2 + a1*y + a0 = 0, Eq 23
    tau = 1000.0 / degk
    a2 = alpha
    a1 = gamma * tau + delta
    a0 = beta * tau * tau + epsilon * tau - 1.0
    disc = a1 * a1 - 4.0 * a2 * a0
    if disc < 0:
        raise ValueError(f"Henry's constant has no real solution at {degk} K (discriminant = {disc})")
    return 10 ** ((-a1 - sqrt(disc)) / (2.0 * a2))

def henryk_O2(degk: float) -> float:
    """ Returns Henry's constant of O2 in water (atm per mole fraction x 1e-4), Eq 23. Valid 273.15 - 500 K """
    return _henryk_quadratic(degk, -0.0005943, -0.1470, -0.05120, -0.1076, 0.8447)

def henryk_N2(degk: float) -> float:
    """ Returns Henry's constant of N2 in water (atm per mole fraction x 1e-4), Eq 23. Valid 273.15 - 500 K """
    return _henryk_quadratic(degk, -0.1021, -0.1482, -0.019, -0.03741, 0.851)

def henryk(degk: float) -> float:
    """ Returns the inverse Henry's constant of air in water (1/Pa), Eqs 24-25, as used by the enhancement factor.
        Mole fraction weighted harmonic mean of the O2 and N2 constants
        degk: Temperature (K)
    """
    k = 1.0 / (XO2_AIR / henryk_O2(degk) + XN2_AIR / henryk_N2(degk))
    return 1e-4 / k * 1.0 / P_ATM
