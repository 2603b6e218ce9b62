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

import logging
from math import isfinite

from pypsychro.classes import SolverResult
from pypsychro.constants import R, Z_TOL, Z_MAXITER

logger = logging.getLogger(__name__)

def solve_z(b0: float, c0: float, tol: float = Z_TOL, maxiter: int = Z_MAXITER) -> SolverResult:
    """ Solves the truncated virial equation in density form, Z = 1 + b0/Z + c0/Z^2, by successive substitution from Z = 1.
        Returns a SolverResult, which is not converged if the iteration cap is exhausted or an estimate reaches zero or overflows.
        b0: B/v0, second virial coefficient over the ideal gas molar volume v0 = RT/P
        c0: C/v0^2, third virial coefficient over the square of v0
        tol: Converged when successive estimates differ by less than tol
        maxiter: Iteration cap
    """
    z = 1.0
    err = 0.0
    for i in range(1, maxiter + 1):
        if z == 0.0 or not isfinite(z):
            logger.warning("Compressibility factor did not converge, estimate became %r after %d iterations (b0 = %r, c0 = %r)", z, i - 1, b0, c0)
            return SolverResult(z, False, i - 1, err, maxiter, "Compressibility factor calculation did not converge!")
        znew = 1.0 + b0 / z + c0 / (z * z)
        err = abs(znew - z)
        z = znew
        if err < tol:
            logger.debug("Z = %r after %d iterations (b0 = %r, c0 = %r)", z, i, b0, c0)
            return SolverResult(z, True, i, err, maxiter)

    logger.warning("Compressibility factor did not converge in %d iterations (b0 = %r, c0 = %r, err = %r)", maxiter, b0, c0, err)
    return SolverResult(z, False, maxiter, err, maxiter, "Compressibility factor calculation did not converge!")

def calcz(b0: float, c0: float, tol: float = Z_TOL, maxiter: int = Z_MAXITER) -> float:
    """ Returns compressibility factor Z from the reduced virial terms b0 = B/v0 and c0 = C/v0^2, v0 = RT/P.
        Raises ConvergenceError if the iteration cap is exhausted or an estimate reaches zero or overflows. See solve_z
    """
    return solve_z(b0, c0, tol, maxiter).unwrap()

def reduced_virial(degk: float, p: float, b: float, c: float):
    """ Returns the reduced virial terms (b0, c0) for virial coefficients b (m3/mol) and c (m6/mol2) at degk (K) and p (Pa) """
    vm0 = R * degk / p
    return b / vm0, c / (vm0 * vm0)
