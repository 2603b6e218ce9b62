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

# Real gas properties of dry air and moist air from the virial equation of state of
# Wexler & Hyland (1983). Molar quantities are per mole of mixture, specific quantities
# are per kg of dry air. Enthalpy and entropy share the zero points of the ASHRAE tables.

from math import log

import numpy as np
import numpy.typing as npt
import pandas as pd
from scipy.optimize import brentq

from pypsychro.constants import R, Ma, P_ATM, T_MIN, T_MAX, XV_MIN, EF_TOL, EF_MAXITER
from pypsychro.efactor import efactor
from pypsychro.shared_fns import polyeval, convert_to_numpy, process_output
from pypsychro.validate import validate_state
from pypsychro.virial import Baa, dBaa, Caaa, dCaaa, Bm, dBm, Cm, dCm
from pypsychro.water import Pws, Tws
from pypsychro.zfactor import calcz, reduced_virial

# Ideal gas enthalpy (J/mol) and entropy (J/mol/K) polynomials in T
_H_AIR = (-0.79078691e4, 0.28709015e2, 0.26431805e-2, -0.10405863e-4, 0.18660410e-7, -0.97843331e-11)
_S_AIR = (-0.16175159e3, 0.52863609e-2, -0.15608795e-4, 0.24880547e-7, -0.12230416e-10, 0.28709015e2)  # Last term multiplies ln(T)

_H_MOIST_A = (0.63290874e1, 0.28709015e2, 0.26431805e-2, -0.10405863e-4, 0.18660410e-7, -0.97843331e-11)
_H_MOIST_W = (-0.5008e-2, 0.32491829e2, 0.65576345e-2, -0.26442147e-4, 0.51751789e-7, -0.31541624e-10)
_S_MOIST_A = (0.34373874e2, 0.52863609e-2, -0.15608795e-4, 0.24880547e-7, -0.12230416e-10, 0.28709015e2)  # Last term multiplies ln(T)
_S_MOIST_W = (0.2196603e1, 0.19743819e-1, -0.70128225e-4, 0.14866252e-6, -0.14524437e-9, 0.55663583e-13, 0.32284652e2)  # Last term multiplies ln(T)


# =============================================================================
# Dry air
# =============================================================================
def Zair(degk: float, p: float) -> float:
    """ Returns compressibility factor of dry air
        degk: Temperature (K)
        p: Pressure (Pa)
    """
    validate_state(degk, p)
    b0, c0 = reduced_virial(degk, p, Baa(degk), Caaa(degk))
    return calcz(b0, c0)

def molarvolumeair(degk: float, p: float) -> float:
    """ Returns molar volume of dry air (m3/mol), Eq 12. Requires iteration for Z
        degk: Temperature (K)
        p: Pressure (Pa)
    """
    return Zair(degk, p) * (R * degk / p)

def volumeair(degk: float, p: float) -> float:
    """ Returns specific volume of dry air (m3/kg) """
    return molarvolumeair(degk, p) / Ma

def molarenthalpyair(degk: float, p: float) -> float:
    """ Returns molar enthalpy of dry air (J/mol), Eq 13
        degk: Temperature (K)
        p: Pressure (Pa)
    """
    h1 = polyeval(degk, _H_AIR)
    va = molarvolumeair(degk, p)
    h2 = R * degk / va * ((Baa(degk) - degk * dBaa(degk)) + (Caaa(degk) - 0.5 * degk * dCaaa(degk)) / va)
    return h1 + h2

def enthalpyair(degk: float, p: float) -> float:
    """ Returns specific enthalpy of dry air (J/kg) """
    return molarenthalpyair(degk, p) / Ma

def molarentropyair(degk: float, p: float) -> float:
    """ Returns molar entropy of dry air (J/mol/K), Eq 14
        degk: Temperature (K)
        p: Pressure (Pa)
    """
    s1 = polyeval(degk, _S_AIR, 5) + _S_AIR[5] * log(degk) - R * log(p / P_ATM)
    va = molarvolumeair(degk, p)
    s2 = R * log(p * va / R / degk) - R / va * ((Baa(degk) + degk * dBaa(degk)) + 0.5 / va * (Caaa(degk) + degk * dCaaa(degk)))
    return s1 + s2

def entropyair(degk: float, p: float) -> float:
    """ Returns specific entropy of dry air (J/kg/K) """
    return molarentropyair(degk, p) / Ma


# =============================================================================
# Moist air at a given vapor mole fraction
# =============================================================================
def Zmoist(degk: float, p: float, xv: float) -> float:
    """ Returns compressibility factor of moist air
        degk: Temperature (K)
        p: Pressure (Pa)
        xv: Mole fraction of water vapor
    """
    validate_state(degk, p, xv)
    b0, c0 = reduced_virial(degk, p, Bm(degk, xv), Cm(degk, xv))
    return calcz(b0, c0)

def molarvolumemoist(degk: float, p: float, xv: float) -> float:
    """ Returns molar volume of moist air (m3/mol) """
    return Zmoist(degk, p, xv) * R * degk / p

def _dry_air_fraction(xv):
    xa = 1.0 - xv
    if xa <= 0:
        raise ValueError("Properties per unit dry air are undefined for pure water vapor (xv = 1)")
    return xa

def volumemoist(degk: float, p: float, xv: float) -> float:
    """ Returns specific volume of moist air (m3/kg of dry air) """
    return molarvolumemoist(degk, p, xv) / (Ma * _dry_air_fraction(xv))

def molarenthalpymoist(degk: float, p: float, xv: float) -> float:
    """ Returns molar enthalpy of moist air (J/mol), Eq 29 of Hyland & Wexler
        degk: Temperature (K)
        p: Pressure (Pa)
        xv: Mole fraction of water vapor
    """
    xa = 1.0 - xv
    h1 = xa * (polyeval(degk, _H_MOIST_A) - 7914.1982)
    h2 = xv * (polyeval(degk, _H_MOIST_W) + 35994.17)
    vm = molarvolumemoist(degk, p, xv)
    h3 = R * degk / vm * (Bm(degk, xv) - degk * dBm(degk, xv) + 1 / vm * (Cm(degk, xv) - 0.5 * degk * dCm(degk, xv)))
    return h1 + h2 + h3

def enthalpymoist(degk: float, p: float, xv: float) -> float:
    """ Returns specific enthalpy of moist air (J/kg of dry air) """
    return molarenthalpymoist(degk, p, xv) / (_dry_air_fraction(xv) * Ma)

def molarentropymoist(degk: float, p: float, xv: float) -> float:
    """ Returns molar entropy of moist air (J/mol/K), including the ideal mixing term.
        The vapor mixing term is omitted for xv <= 1e-8
        degk: Temperature (K)
        p: Pressure (Pa)
        xv: Mole fraction of water vapor
    """
    xa = _dry_air_fraction(xv)
    s1 = polyeval(degk, _S_MOIST_A, 5) + _S_MOIST_A[5] * log(degk) - 196.125465
    s2 = polyeval(degk, _S_MOIST_W, 6) + _S_MOIST_W[6] * log(degk) - 63.31449

    z = Zmoist(degk, p, xv)
    vm = z * R * degk / p

    s3 = -R * log(p / P_ATM) + xa * R * log(z / xa)
    if xv > XV_MIN:
        s3 = s3 + xv * R * log(z / xv)

    s4 = -R / vm * ((Bm(degk, xv) + degk * dBm(degk, xv)) + 0.5 / vm * (Cm(degk, xv) + degk * dCm(degk, xv)))
    return xa * s1 + xv * s2 + s3 + s4

def entropymoist(degk: float, p: float, xv: float) -> float:
    """ Returns specific entropy of moist air (J/kg of dry air/K) """
    return molarentropymoist(degk, p, xv) / (_dry_air_fraction(xv) * Ma)


# =============================================================================
# Saturated moist air
# =============================================================================
def molarfracmoist_sat(degk: float, p: float, relax: float = 1.0, tol: float = EF_TOL, maxiter: int = EF_MAXITER) -> float:
    """ Returns mole fraction of water vapor in saturated moist air, f * Pws / p
        degk: Temperature (K)
        p: Pressure (Pa)
        relax, tol, maxiter: Enhancement factor solver controls
    """
    validate_state(degk, p)
    return efactor(degk, p, relax=relax, tol=tol, maxiter=maxiter) * Pws(degk) / p

def tdew(xv: float, p: float) -> float:
    """ Returns dew point (frost point below the triple point) temperature (K) of moist air,
        the temperature at which xv equals the saturated vapor mole fraction. Solved with Brent's method
        xv: Mole fraction of water vapor
        p: Pressure (Pa)
    """
    validate_state(T_MIN, p, xv)
    thi = Tws(p) if p <= Pws(T_MAX) else T_MAX

    def err(degk):
        return molarfracmoist_sat(degk, p) - xv

    if err(T_MIN) > 0 or err(thi) < 0:
        raise ValueError(f"Vapor mole fraction {xv} at {p} Pa has no dew point within {T_MIN} - {thi:.6g} K")
    return brentq(err, T_MIN, thi, xtol=1e-10)


# =============================================================================
# Array interfaces
# =============================================================================
def air_props(degk: npt.ArrayLike, p: npt.ArrayLike) -> dict:
    """ Returns dictionary of dry air properties. Temperatures and pressures may be single values or arrays that
        broadcast together, with single floats returned for single inputs
        'Z': Compressibility factor
        'v': Specific volume (m3/kg)
        'h': Specific enthalpy (J/kg)
        's': Specific entropy (J/kg/K)
        degk: Temperature (K)
        p: Pressure (Pa)
    """
    degks, ps = np.broadcast_arrays(convert_to_numpy(degk)[0], convert_to_numpy(p)[0])
    is_list = degks.size > 1
    states = list(zip(degks, ps))
    return {
        "Z": process_output([Zair(t, pp) for t, pp in states], is_list),
        "v": process_output([volumeair(t, pp) for t, pp in states], is_list),
        "h": process_output([enthalpyair(t, pp) for t, pp in states], is_list),
        "s": process_output([entropyair(t, pp) for t, pp in states], is_list),
    }

def moist_air_props(degk: npt.ArrayLike, p: npt.ArrayLike, xv: npt.ArrayLike) -> dict:
    """ Returns dictionary of moist air properties per kg of dry air, with the same keys and conventions as air_props
        degk: Temperature (K)
        p: Pressure (Pa)
        xv: Mole fraction of water vapor
    """
    degks, ps, xvs = np.broadcast_arrays(convert_to_numpy(degk)[0], convert_to_numpy(p)[0], convert_to_numpy(xv)[0])
    is_list = degks.size > 1
    states = list(zip(degks, ps, xvs))
    return {
        "Z": process_output([Zmoist(t, pp, x) for t, pp, x in states], is_list),
        "v": process_output([volumemoist(t, pp, x) for t, pp, x in states], is_list),
        "h": process_output([enthalpymoist(t, pp, x) for t, pp, x in states], is_list),
        "s": process_output([entropymoist(t, pp, x) for t, pp, x in states], is_list),
    }

def sat_table(degks: npt.ArrayLike, p: float = P_ATM) -> pd.DataFrame:
    """ Returns a DataFrame of saturated moist air properties at pressure p (Pa) for each temperature in degks (K).
        Specific properties are per kg of dry air
    """
    degks, _ = convert_to_numpy(degks)
    pws, fs, xvs = [], [], []
    for t in degks:
        pws.append(Pws(t))
        fs.append(efactor(t, p))
        xvs.append(fs[-1] * pws[-1] / p)

    df = pd.DataFrame()
    df["T (K)"] = degks
    df["Pws (Pa)"] = pws
    df["f"] = fs
    df["xvs"] = xvs
    df["Z"] = [Zmoist(t, p, x) for t, x in zip(degks, xvs)]
    df["v (m3/kg)"] = [volumemoist(t, p, x) for t, x in zip(degks, xvs)]
    df["h (J/kg)"] = [enthalpymoist(t, p, x) for t, x in zip(degks, xvs)]
    df["s (J/kg/K)"] = [entropymoist(t, p, x) for t, x in zip(degks, xvs)]
    return df
