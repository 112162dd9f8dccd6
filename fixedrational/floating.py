#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Exact decomposition of binary floating point values into fractions

A finite floating point value is written as significand * 2**exponent with
0.5 <= |significand| < 1 (frexp). Scaling the significand by 2**digits gives
an exact integer, so the value equals an integer numerator over a power of two.
No decimal rounding takes place: 0.1 becomes 3602879701896397/36028797018963968.
"""

import logging
import math
from typing import Tuple

import numpy as np

from .errors import DomainError
from .integral import float_limits, trunc_div
from .names import NOT_FINITE, UNDERFLOW

LOG = logging.getLogger(__name__)


def decompose(value) -> Tuple[int, int]:
    """Return the exact (numerator, denominator) pair of a floating point value.

    The pair is reduced by its common power of two, the denominator is a
    positive power of two. Raises DomainError for infinite and NaN values and
    for values too small to survive the scaling below the exponent ceiling.

    Args:
        value: (float or numpy.floating)
            The value to convert. Python floats are treated as numpy.float64.

    Returns:
        (Tuple[int, int]):
            Numerator and denominator as Python integers.
    """
    ftype = type(value) if isinstance(value, np.floating) else np.float64
    value = ftype(value)
    if not np.isfinite(value):
        raise DomainError(NOT_FINITE)

    digits, max_exponent = float_limits(ftype)
    significand, exponent = np.frexp(value)
    numerator = int(np.ldexp(significand, digits))
    denominator = 1
    exponent = int(exponent) - digits

    if exponent > 0:
        numerator *= 2**exponent
    elif exponent < 0:
        exponent = -exponent
        ceiling = max_exponent - 1
        if exponent >= ceiling:
            # scale the numerator down by the excess, the denominator stays at 2**ceiling
            excess = 2**(exponent - ceiling)
            scaled = trunc_div(numerator, excess)
            if scaled == 0:
                raise DomainError(UNDERFLOW)
            if scaled * excess != numerator:
                LOG.warning("Conversion of %r discards bits below 2**-%d.", value, ceiling)
            numerator = scaled
            denominator = 2**ceiling
        else:
            denominator = 2**exponent

    common = math.gcd(numerator, denominator)
    numerator //= common
    denominator //= common
    LOG.debug("Decomposed %r into %d/%d.", value, numerator, denominator)
    return numerator, denominator
