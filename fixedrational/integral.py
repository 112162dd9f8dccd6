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
"""Classification and primitive operations for the numeric base types

A base type (dtype) is either one of numpy's fixed-width integer scalar types
(numpy.int8 ... numpy.uint64) or Python's int. All arithmetic on numerator and
denominator is carried out in the base type, so overflow behaves exactly as
the base type's own arithmetic does.
"""

import math
import operator
from typing import Tuple

import numpy as np


def is_integral(tp) -> bool:
    """True for Python int and numpy integer scalar types (bool excluded)"""
    if tp is int:
        return True
    return isinstance(tp, type) and issubclass(tp, np.integer)


def is_floating(tp) -> bool:
    """True for Python float and numpy floating scalar types"""
    if tp is float:
        return True
    return isinstance(tp, type) and issubclass(tp, np.floating)


def is_arithmetic(tp) -> bool:
    return is_integral(tp) or is_floating(tp)


def is_integral_value(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def is_floating_value(value) -> bool:
    return isinstance(value, (float, np.floating))


def check_dtype(dtype):
    """Return dtype if it can serve as a base type, raise TypeError otherwise."""
    if not is_integral(dtype):
        raise TypeError(f"Base type must be an integral type, got {dtype!r}.")
    return dtype


def dtype_name(dtype) -> str:
    if dtype is int:
        return 'int'
    return np.dtype(dtype).name


def coerce(value, dtype):
    """Convert an integral value into the base type.

    Values of a different width pass through Python int, so a value that does
    not fit raises numpy's OverflowError instead of silently wrapping around.
    """
    if type(value) is dtype:
        return value
    if not is_integral_value(value):
        raise TypeError(f"Expected an integral value, got {type(value).__name__}.")
    if dtype is int:
        return operator.index(value)
    return dtype(operator.index(value))


def gcd(a, b):
    """Greatest common divisor of two values of the same base type (gcd(0, b) == |b|)."""
    dtype = type(a)
    if dtype is int:
        return math.gcd(a, b)
    return dtype(np.gcd(a, b))


def ipow(base, exponent: int):
    """base ** exponent for a non-negative integer exponent by repeated squaring.

    Every multiplication happens in the base type of `base`.
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative.")
    result = type(base)(1)
    while exponent:
        if exponent & 1:
            result = result * base
        exponent >>= 1
        if exponent:
            base = base * base
    return result


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, as C integer division does"""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def float_limits(ftype) -> Tuple[int, int]:
    """Return (mantissa digits, maximum binary exponent) of a floating type.

    The digits include the implicit leading bit (53 for IEEE double), the
    maximum exponent is the one frexp can return for the largest finite value
    (1024 for IEEE double).
    """
    info = np.finfo(ftype)
    return info.nmant + 1, info.maxexp
