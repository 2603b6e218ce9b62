#!/usr/bin/env python3
"""
Validation tests for water module.
Run with: python3 -m pytest pypsychro/tests/ -v
Or standalone: python3 pypsychro/tests/run_all_tests.py
"""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pypsychro.water as water
from pypsychro.classes import phase

def test_phase_of():
    assert water.phase_of(273.16) is phase.LIQUID
    assert water.phase_of(273.1599) is phase.ICE
    assert water.phase_of(400.0) is phase.LIQUID

def test_saturation_pressure_reference_points():
    """Triple point 611.657 Pa, normal boiling point about 101.418 kPa"""
    assert abs(water.Pws(273.16) - 611.657) < 0.01, f"Pws(273.16) = {water.Pws(273.16)}"
    assert abs(water.Pws_l(373.15) - 101418.0) < 5.0, f"Pws_l(373.15) = {water.Pws_l(373.15)}"
    assert abs(water.Pws(300) - 3536.0) < 1.0

def test_saturation_pressure_continuous_at_triple_point():
    below = water.Pws(273.16 - 1e-9)
    above = water.Pws(273.16)
    assert abs(above - below) / above < 1e-6
    assert water.Pws(273.1599) == water.Pws_s(273.1599)
    assert water.Pws(273.16) == water.Pws_l(273.16)

def test_ice_pressure_below_supercooled_liquid():
    """Vapor pressure over ice is lower than over supercooled water"""
    for t in [230.0, 250.0, 270.0]:
        assert water.Pws_s(t) < water.Pws_l(t)

def test_saturation_temperature_inverse():
    for t in [200.0, 260.0, 273.16, 300.0, 373.15, 450.0]:
        assert abs(water.Tws(water.Pws(t)) - t) < 1e-8, f"Tws(Pws({t})) = {water.Tws(water.Pws(t))}"

def test_saturation_temperature_out_of_range():
    with pytest.raises(ValueError):
        water.Tws(1e-5)
    with pytest.raises(ValueError):
        water.Tws(5e6)

def test_condensed_volumes():
    """Liquid water about 1.0035e-3 m3/kg at 300 K, ice about 1.0909e-3 m3/kg at 0 degC"""
    assert abs(water.volumewater(300) - 1.0035e-3) < 1e-6
    assert abs(water.volumewater(277.13) - 1.0000e-3) < 1e-6
    assert abs(water.volumeice(273.15) - 1.0909e-3) < 1e-6

def test_pure_vapor_coefficient_derivatives():
    h = 1e-3
    for t in [200.0, 300.0, 450.0]:
        for fn, dfn in [(water.Blin, water.dBlin), (water.Clin, water.dClin)]:
            numeric = (fn(t + h) - fn(t - h)) / (2 * h)
            assert abs(dfn(t) - numeric) < 1e-7 * abs(numeric)
