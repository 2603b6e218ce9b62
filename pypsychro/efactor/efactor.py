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

# Enhancement factor of saturated moist air, Eq 18 of Wexler & Hyland (1983).
# ln(f) is equated to a second order virial expansion of the chemical potential equality between
# water in the condensed phase (liquid water with dissolved air, or ice) and water vapor in moist air.

import logging
from dataclasses import dataclass
from math import exp, isfinite, log

from pypsychro.classes import phase, ef_method, SolverResult
from pypsychro.constants import R, Mv, EF_TOL, EF_MAXITER, EF_STEP
from pypsychro.validate import validate_methods
from pypsychro.virial import Baa, Baw, Bww, Caaa, Caaw, Caww, Cwww, kappa_f, henryk
from pypsychro.water import phase_of, Pws, Pws_l, Pws_s, volumewater, volumeice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CondensedPhase:
    """Condensed phase inputs to the enhancement factor at one temperature."""
    branch: phase
    vc: float     # Molar volume of the condensed phase (m3/mol)
    p: float      # Saturation vapor pressure over the condensed phase (Pa)
    k: float      # Inverse Henry's constant of air (1/Pa). Zero for ice
    kappa: float  # Isothermal compressibility (1/Pa)


def condensed_phase(degk: float) -> CondensedPhase:
    """ Gathers the condensed phase properties at degk (K), selecting ice below the triple point and liquid water otherwise """
    branch = phase_of(degk)
    if branch is phase.ICE:
        vc = volumeice(degk) * Mv
        p = Pws_s(degk)
        k = 0.0  # Air does not dissolve in ice
    else:
        vc = volumewater(degk) * Mv
        p = Pws_l(degk)
        k = henryk(degk)
    return CondensedPhase(branch, vc, p, k, kappa_f(degk, branch))


def lnf(f, P, p, k, kappa, vc, RT, baa, baw, bww, caaa, caaw, caww, cwww):
    """ Returns the right hand side of Eq 18 for enhancement factor f.
        P: Total pressure (Pa)
        p: Saturation vapor pressure (Pa)
        k: Inverse Henry's constant (1/Pa)
        kappa: Isothermal compressibility of the condensed phase (1/Pa)
        vc: Molar volume of the condensed phase (m3/mol)
        RT: Gas constant times temperature (J/mol)
        baa ... cwww: Virial coefficients at the temperature
    """
    xas = (P - f * p) / P
    return _lnf_terms(xas, P, p, k, kappa, vc, RT, baa, baw, bww, caaa, caaw, caww, cwww)


def lnf2(degk, P, xas):
    """ Returns the right hand side of Eq 18 at temperature degk (K), total pressure P (Pa)
        and apparent dry air mole fraction xas, gathering the condensed phase and virial inputs itself
    """
    cp = condensed_phase(degk)
    return _lnf_terms(xas, P, cp.p, cp.k, cp.kappa, cp.vc, R * degk,
                      Baa(degk), Baw(degk), Bww(degk), Caaa(degk), Caaw(degk), Caww(degk), Cwww(degk))


def _lnf_terms(xas, P, p, k, kappa, vc, RT, baa, baw, bww, caaa, caaw, caww, cwww):
    P2 = P * P
    p2 = p * p
    xas2 = xas * xas
    RT2 = RT * RT

    t1 = vc / RT * ((1 + kappa * p) * (P - p) - 0.5 * kappa * (P2 - p2))
    t2 = log(1.0 - k * xas * P) + (xas2 * P / RT) * baa - (2 * xas2 * P / RT) * baw
    t3 = -(P - p - xas2 * P) / RT * bww + xas2 * xas * P * P / RT2 * caaa
    t4 = 3 * xas2 * (1 - 2 * xas) * P2 / (2 * RT2) * caaw - (3 * xas2 * (1 - xas) * P2) / RT2 * caww
    t5 = -((1 + 2 * xas) * (1 - xas) ** 2 * P2 - p2) / (2 * RT2) * cwww - (xas2 * (1 - 3 * xas) * (1 - xas) * P2) / RT2 * baa * bww
    t6 = -(2 * xas2 * xas * (2 - 3 * xas) * P2) / RT2 * baa * baw + (6 * xas2 * (1 - xas) ** 2 * P2) / RT2 * bww * baw
    t7 = -3 * xas2 * xas2 * P2 / (2 * RT2) * baa * baa - (2 * xas2 * (1 - xas) * (1 - 3 * xas) * P2) / RT2 * baw * baw
    t8 = -(p2 - (1 + 3 * xas) * (1 - xas) ** 3 * P2) / (2 * RT2) * bww * bww

    return t1 + t2 + t3 + t4 + t5 + t6 + t7 + t8


def solve_efactor(degk: float, P: float, relax: float = 1.0, tol: float = EF_TOL,
                  maxiter: int = EF_MAXITER, step: float = EF_STEP) -> SolverResult:
    """ Newton-Raphson solution of ln(f) = lnf(f) using a forward difference derivative. Returns a SolverResult.
        The result is not converged if the iteration cap is exhausted, the residual slope vanishes or an estimate drops to zero or below
        degk: Temperature (K)
        P: Total pressure (Pa)
        relax: Damping applied to the Newton step, 0 < relax <= 1
        tol: Converged once the undamped Newton step is smaller than tol. That full step is then applied
        maxiter: Iteration cap
        step: Forward difference step used to estimate the derivative
    """
    cp = condensed_phase(degk)
    RT = R * degk
    coefs = (Baa(degk), Baw(degk), Bww(degk), Caaa(degk), Caaw(degk), Caww(degk), Cwww(degk))

    def res(f):
        return log(f) - lnf(f, P, cp.p, cp.k, cp.kappa, cp.vc, RT, *coefs)

    f = 1.0
    df = 0.0
    for i in range(1, maxiter + 1):
        g = res(f)
        dg = (res(f + step) - g) / step
        if dg == 0.0 or not isfinite(dg):
            logger.warning("Enhancement factor (Newton) did not converge, residual slope %r at f = %r after %d iterations at %r K, %r Pa", dg, f, i, degk, P)
            return SolverResult(f, False, i, abs(df), maxiter, "Enhancement factor calculation did not converge!")
        df = -g / dg

        if abs(df) < tol:
            f = max(f + df, 1.0)
            logger.debug("Enhancement factor %r after %d Newton iterations at %r K, %r Pa", f, i, degk, P)
            return SolverResult(f, True, i, abs(df), maxiter)

        f = f + relax * df
        if f <= 0.0:
            logger.warning("Enhancement factor (Newton) did not converge, estimate became %r after %d iterations at %r K, %r Pa", f, i, degk, P)
            return SolverResult(f, False, i, abs(df), maxiter, "Enhancement factor calculation did not converge!")

    logger.warning("Enhancement factor (Newton) did not converge in %d iterations at %r K, %r Pa", maxiter, degk, P)
    return SolverResult(f, False, maxiter, abs(df), maxiter, "Enhancement factor calculation did not converge!")


def solve_efactor2(degk: float, P: float, tol: float = EF_TOL, maxiter: int = EF_MAXITER) -> SolverResult:
    """ Fixed point solution of f = exp(lnf2) starting from f = 1. Returns a SolverResult.
        degk: Temperature (K)
        P: Total pressure (Pa)
        tol: Converged once successive estimates differ by less than tol
        maxiter: Iteration cap
    """
    pws = Pws(degk)
    f = 1.0
    fnew = 1.0
    err = 0.0
    for i in range(1, maxiter + 1):
        xas = (P - f * pws) / P
        fnew = exp(lnf2(degk, P, xas))
        err = abs(fnew - f)

        if err < tol:
            fnew = max(fnew, 1.0)
            logger.debug("Enhancement factor %r after %d fixed point iterations at %r K, %r Pa", fnew, i, degk, P)
            return SolverResult(fnew, True, i, err, maxiter)

        f = fnew

    logger.warning("Enhancement factor (fixed point) did not converge in %d iterations at %r K, %r Pa", maxiter, degk, P)
    return SolverResult(max(fnew, 1.0), False, maxiter, err, maxiter, "Enhancement factor calculation did not converge!")


def efactor(degk: float, P: float, relax: float = 1.0, tol: float = EF_TOL,
            maxiter: int = EF_MAXITER, step: float = EF_STEP) -> float:
    """ Returns the enhancement factor of moist air (>= 1), solved by Newton-Raphson.
        Raises ConvergenceError if the iteration cap is exhausted. See solve_efactor for arguments
    """
    return solve_efactor(degk, P, relax, tol, maxiter, step).unwrap()


def efactor2(degk: float, P: float, tol: float = EF_TOL, maxiter: int = EF_MAXITER) -> float:
    """ Returns the enhancement factor of moist air (>= 1), solved by fixed point substitution.
        Raises ConvergenceError if the iteration cap is exhausted. See solve_efactor2 for arguments
    """
    return solve_efactor2(degk, P, tol, maxiter).unwrap()


def enhancement_factor(degk: float, P: float, efmethod: ef_method = ef_method.NR, relax: float = 1.0,
                       tol: float = EF_TOL, maxiter: int = EF_MAXITER, step: float = EF_STEP) -> float:
    """ Returns the enhancement factor of moist air with a selectable solution strategy
        degk: Temperature (K)
        P: Total pressure (Pa)
        efmethod: 'NR' Newton-Raphson with forward difference derivative (default)
                  'FP' Fixed point substitution. relax and step are not used
        relax, tol, maxiter, step: Solver controls, see solve_efactor
    """
    efmethod = validate_methods(["efmethod"], [efmethod])
    if efmethod is ef_method.FP:
        return efactor2(degk, P, tol, maxiter)
    return efactor(degk, P, relax, tol, maxiter, step)
