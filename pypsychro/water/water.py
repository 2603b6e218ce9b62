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

# Saturation pressure, condensed phase volume and pure vapor virial correlations for water
# from Hyland, R. W. and Wexler, A. (1983), "Formulations for the thermodynamic properties
# of the saturated phases of H2O from 173.15 K to 473.15 K", ASHRAE Transactions 89(2A).

from math import exp, log
from scipy.optimize import brentq

from pypsychro.classes import phase
from pypsychro.constants import T_TRIPLE, T_MIN, T_MAX

def phase_of(degk: float) -> phase:
    """ Returns the condensed phase branch at temperature degk (K). Ice below the triple point, liquid at and above it """
    if degk < T_TRIPLE:
        return phase.ICE
    return phase.LIQUID

def Pws_l(degk: float) -> float:
    """ Returns saturation vapor pressure over liquid water (Pa). Valid 273.15 - 473.15 K
        degk: Temperature (K)
    """
    g = (-0.58002206e4, 0.13914993e1, -0.48640239e-1, 0.41764768e-4, -0.14452093e-7, 0.65459673e1)
    return exp(g[0] / degk + g[1] + degk * (g[2] + degk * (g[3] + g[4] * degk)) + g[5] * log(degk))

def Pws_s(degk: float) -> float:
    """ Returns saturation vapor pressure over ice (Pa). Valid 173.15 - 273.16 K
        degk: Temperature (K)
    """
    m = (-0.56745359e4, 0.63925247e1, -0.9677843e-2, 0.62215701e-6, 0.20747825e-8, -0.9484024e-12, 0.41635019e1)
    return exp(m[0] / degk + m[1] + degk * (m[2] + degk * (m[3] + degk * (m[4] + m[5] * degk)))
               + m[6] * log(degk))

def Pws(degk: float) -> float:
    """ Returns saturation vapor pressure of water (Pa), over ice below the triple point and over liquid above it
        degk: Temperature (K)
    """
    if phase_of(degk) is phase.ICE:
        return Pws_s(degk)
    return Pws_l(degk)

def Tws(p: float) -> float:
    """ Returns the saturation temperature (K) at which Pws equals p. Solved with Brent's method over 173.15 - 473.15 K
        p: Vapor pressure (Pa)
    """
    plo, phi = Pws(T_MIN), Pws(T_MAX)
    if not plo <= p <= phi:
        raise ValueError(f"Vapor pressure {p} Pa outside saturation range {plo:.6g} - {phi:.6g} Pa")
    lnp = log(p)

    def err(degk):
        return log(Pws(degk)) - lnp

    return brentq(err, T_MIN, T_MAX, xtol=1e-12)

def volumewater(degk: float) -> float:
    """ Returns specific volume of saturated liquid water (m3/kg)
        degk: Temperature (K)
    """
    a = (-0.2403360201e4, -0.140758895e1, 0.1068287657e0, -0.2914492351e-3, 0.373497936e-6, -0.21203787e-9)
    b = (-0.3424442728e1, 0.1619785e-1)
    rho = (a[0] + degk * (a[1] + degk * (a[2] + degk * (a[3] + degk * (a[4] + a[5] * degk))))) / (b[0] + b[1] * degk)
    return 1.0 / rho

def volumeice(degk: float) -> float:
    """ Returns specific volume of ice (m3/kg)
        degk: Temperature (K)
    """
    return 0.1070003e-2 + degk * (-0.249936e-7 + 0.371611e-9 * degk)

# Second and third virial coefficients of pure water vapor in the pressure series
# Z = 1 + B'P + C'P^2, Hyland & Wexler (1983)
def Blin(degk: float) -> float:
    """ Returns B' of water vapor (1/Pa) """
    return 0.70e-8 - 0.147184e-8 * exp(1734.29 / degk)

def dBlin(degk: float) -> float:
    """ Returns dB'/dT of water vapor (1/Pa/K) """
    return 0.147184e-8 * 1734.29 / (degk * degk) * exp(1734.29 / degk)

def Clin(degk: float) -> float:
    """ Returns C' of water vapor (1/Pa2) """
    return 0.104e-14 - 0.335297e-17 * exp(3645.09 / degk)

def dClin(degk: float) -> float:
    """ Returns dC'/dT of water vapor (1/Pa2/K) """
    return 0.335297e-17 * 3645.09 / (degk * degk) * exp(3645.09 / degk)
