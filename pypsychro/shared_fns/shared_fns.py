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

import numpy as np
import numpy.typing as npt
from typing import Sequence, Tuple

def polyeval(x: float, coefs: Sequence[float], n: int = None) -> float:
    """ Evaluates sum(coefs[i] * x**i) over the first n coefficients using Horner's scheme
        x: Independent variable
        coefs: Polynomial coefficients, lowest order first
        n: Number of terms used. Defaults to all coefficients
    """
    if n is None:
        n = len(coefs)
    y = coefs[n - 1]
    for i in range(n - 2, -1, -1):
        y = coefs[i] + x * y
    return y

def convert_to_numpy(input_data: npt.ArrayLike) -> Tuple[np.ndarray, bool]:
    # Returns input as a float numpy array (always sizeable), and flags whether more than one value was supplied
    arr = np.atleast_1d(np.asarray(input_data, dtype=float))
    return arr, arr.size > 1

def process_output(values, is_list: bool):
    # Return a single float for scalar inputs, otherwise a numpy array
    values = np.asarray(values, dtype=float)
    if is_list:
        return values
    return float(values.ravel()[0])
