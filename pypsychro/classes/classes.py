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

from enum import Enum
from dataclasses import dataclass

class phase(Enum):  # Condensed phase in equilibrium with the vapor
    LIQUID = 0
    ICE = 1

class ef_method(Enum):  # Enhancement factor solution strategy
    NR = 0  # Newton-Raphson with forward difference derivative
    FP = 1  # Fixed point substitution

class_dic = {
    "phase": phase,
    "efmethod": ef_method,
}


class ConvergenceError(ArithmeticError):
    """ Raised when an iterative solver exhausts its iteration cap
        msg: Description of the failure
        value: Last computed estimate
        maxiter: Iteration cap that was used
        err: Final residual or step magnitude
    """
    def __init__(self, msg: str, value: float, maxiter: int, err: float):
        super().__init__(msg)
        self.msg = msg
        self.value = value
        self.maxiter = maxiter
        self.err = err

    def __str__(self):
        return f"{self.msg} (last estimate = {self.value}, maxiter = {self.maxiter}, error = {self.err})"


@dataclass(frozen=True)
class SolverResult:
    """Outcome of an iterative solve. unwrap() returns the value or raises ConvergenceError."""
    value: float
    converged: bool
    niter: int
    err: float
    maxiter: int
    msg: str = ""

    def unwrap(self) -> float:
        if not self.converged:
            raise ConvergenceError(self.msg, self.value, self.maxiter, self.err)
        return self.value
