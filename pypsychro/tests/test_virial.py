#!/usr/bin/env python3
"""
Validation tests for virial module.
Run with: python3 -m pytest pypsychro/tests/ -v
Or standalone: python3 pypsychro/tests/run_all_tests.py
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pypsychro.virial as virial
from pypsychro.classes import phase

RTOL_GOLD = 1e-12  # Values from the reference formulation tables
RTOL_DERIV = 1e-7  # Analytic vs central difference derivatives
TEMPS = [175.0, 200.0, 250.0, 273.16, 300.0, 350.0, 400.0, 470.0]

# =============================================================================
# Reference values at 300 K
# =============================================================================

GOLDEN_300 = {
    'Baa': -7.259614814814822e-6,
    'dBaa': 1.9571814814814817e-7,
    'Caaa': 1.326141111111111e-9,
    'dCaaa': -2.5637740740740747e-12,
    'Baw': -2.8798043617283956e-5,
    'dBaw': 2.5287409744855964e-7,
    'Caaw': 8.019777407407409e-10,
    'dCaaw': -1.9610345679012353e-12,
    'Caww': -1.1555278368039328e-7,
    'dCaww': 2.61363277754134e-9,
}

def test_pure_and_cross_coefficients_300K():
    """Pure air and cross coefficients reproduce the reference values"""
    for name, expected in GOLDEN_300.items():
        value = getattr(virial, name)(300)
        assert abs(value - expected) <= RTOL_GOLD * abs(expected), f"{name}(300) = {value}, expected {expected}"

def test_mixture_second_coefficient():
    """Bm(300, 0.01) matches the reference value"""
    bm = virial.Bm(300, 0.01)
    assert abs(bm - -7.8025792841398e-6) < RTOL_GOLD * 7.8025792841398e-6, f"Bm = {bm}"

def test_mixture_third_coefficient():
    cm = virial.Cm(300, 0.01)
    assert abs(cm - 1.2734495937889647e-9) < 1e-12 * 1.2734495937889647e-9, f"Cm = {cm}"

def test_mixture_derivatives_near_reference():
    """dBm and dCm agree with the tabulated reference values"""
    dbm = virial.dBm(300, 0.01)
    dcm = virial.dCm(300, 0.01)
    assert abs(dbm - 1.9873214515110309e-7) / 1.9873214515110309e-7 < 1e-9, f"dBm = {dbm}"
    assert abs(dcm - -1.680079338778261e-12) / 1.680079338778261e-12 < 1e-7, f"dCm = {dcm}"

def test_mixture_limits():
    """Mixture coefficients collapse to the pure coefficients at xv = 0 and xv = 1"""
    for t in TEMPS:
        assert virial.Bm(t, 0.0) == virial.Baa(t)
        assert virial.Cm(t, 0.0) == virial.Caaa(t)
        assert abs(virial.Bm(t, 1.0) - virial.Bww(t)) <= 1e-15 * abs(virial.Bww(t))
        assert abs(virial.Cm(t, 1.0) - virial.Cwww(t)) <= 1e-15 * abs(virial.Cwww(t))

def test_water_vapor_coefficients():
    """Bww is strongly negative near ambient, around -1170 cm3/mol at 300 K"""
    bww = virial.Bww(300)
    assert -1.2e-3 < bww < -1.1e-3, f"Bww(300) = {bww}"
    assert virial.Cwww(300) < 0

# =============================================================================
# Derivative consistency
# =============================================================================

PAIRS = [
    ('Baa', 'dBaa'), ('Caaa', 'dCaaa'), ('Baw', 'dBaw'), ('Caaw', 'dCaaw'),
    ('Caww', 'dCaww'), ('Bww', 'dBww'), ('Cwww', 'dCwww'),
]

def central_difference(fn, t, h=1e-3):
    return (fn(t + h) - fn(t - h)) / (2 * h)

@pytest.mark.parametrize("name,dname", PAIRS)
def test_derivatives_match_central_difference(name, dname):
    fn, dfn = getattr(virial, name), getattr(virial, dname)
    for t in TEMPS:
        analytic = dfn(t)
        numeric = central_difference(fn, t)
        scale = abs(fn(t)) / t
        assert abs(analytic - numeric) <= RTOL_DERIV * max(abs(numeric), scale), \
            f"{dname}({t}) = {analytic}, numerical derivative {numeric}"

@pytest.mark.parametrize("xv", [0.0, 0.01, 0.1, 0.5])
def test_mixture_derivatives_match_central_difference(xv):
    for t in TEMPS:
        for fn, dfn in [(virial.Bm, virial.dBm), (virial.Cm, virial.dCm)]:
            analytic = dfn(t, xv)
            numeric = central_difference(lambda x: fn(x, xv), t)
            scale = abs(fn(t, xv)) / t
            assert abs(analytic - numeric) <= RTOL_DERIV * max(abs(numeric), scale), \
                f"{dfn.__name__}({t}, {xv}) = {analytic}, numerical derivative {numeric}"

# =============================================================================
# Compressibility and Henry's constant
# =============================================================================

def test_kappa_f_switches_at_triple_point():
    """Ice compressibility below 273.16 K, liquid at and above it"""
    assert virial.kappa_f(273.16) == virial.kappa_l(273.16)
    assert virial.kappa_f(273.1599) == virial.kappa_s(273.1599)
    assert virial.kappa_f(273.16, phase.ICE) == virial.kappa_s(273.16)
    assert virial.kappa_f(250.0, phase.LIQUID) == virial.kappa_l(250.0)

def test_kappa_l_continuous_at_100C():
    """The two liquid fits meet closely at 373.15 K"""
    below = virial.kappa_l(373.15 - 1e-7)
    above = virial.kappa_l(373.15)
    assert abs(above - below) / above < 0.01, f"kappa_l jumps from {below} to {above}"

def test_kappa_magnitudes():
    """Liquid water about 4.5e-10 1/Pa at 25 degC, ice about 1.3e-10 1/Pa"""
    assert 4.0e-10 < virial.kappa_l(298.15) < 5.0e-10
    assert 1.2e-10 < virial.kappa_s(263.15) < 1.4e-10

def test_henryk_positive_over_liquid_range():
    for t in [273.16, 300.0, 350.0, 373.15, 450.0]:
        k = virial.henryk(t)
        assert 0 < k < 1e-8, f"henryk({t}) = {k}"

def test_henryk_weighted_harmonic_mean():
    t = 300.0
    k = 1.0 / (0.22 / virial.henryk_O2(t) + 0.78 / virial.henryk_N2(t))
    assert abs(virial.henryk(t) - 1e-4 / k / 101325.0) <= 1e-15 * virial.henryk(t)

def test_henryk_negative_discriminant_raises():
    """No real root for the N2 correlation well below its validity range"""
    with pytest.raises(ValueError):
        virial.henryk_N2(200.0)
    with pytest.raises(ValueError):
        virial.henryk(200.0)
