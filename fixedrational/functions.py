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
"""Free functions treating rationals and plain arithmetic values uniformly"""

from .integral import check_dtype, is_arithmetic, is_floating_value, is_integral_value
from .rational import Rational


def rational_cast(value, target):
    """Convert between Rational and arithmetic types.

    A Rational is evaluated as target (float, numpy.float32, int, ...). An
    integral or floating point value is converted into a Rational with base
    type target, floating point values exactly.

    Args:
        value: (Rational, int, float, numpy.integer or numpy.floating)
            Value to convert.
        target: (type)
            Result type if value is a Rational, base type otherwise.

    Returns:
        (target or Rational):
            The converted value.
    """
    if isinstance(value, Rational):
        return value.evaluate(target)
    if is_integral_value(value) or is_floating_value(value):
        return Rational(value, dtype=check_dtype(target))
    raise TypeError(f"Can not convert {type(value).__name__} to or from Rational.")


def numerator(value):
    """Numerator of a Rational, the value itself for plain arithmetic values"""
    if isinstance(value, Rational):
        return value.numerator
    if not is_arithmetic(type(value)):
        raise TypeError(f"Expected a Rational or an arithmetic value, got {type(value).__name__}.")
    return value


def denominator(value):
    """Denominator of a Rational, 1 of the value's own type for plain arithmetic values"""
    if isinstance(value, Rational):
        return value.denominator
    if not is_arithmetic(type(value)):
        raise TypeError(f"Expected a Rational or an arithmetic value, got {type(value).__name__}.")
    return type(value)(1)


def absolute(value: Rational) -> Rational:
    return abs(value)


def power(value: Rational, exponent) -> Rational:
    """value ** exponent, computed exactly in the base type of value"""
    result = value.__pow__(exponent)
    if result is NotImplemented:
        raise TypeError(f"Exponent must be integral, got {type(exponent).__name__}.")
    return result
