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
"""Conversion between Rational and other exact rational types

Supported counterparts are Python's fractions.Fraction, sympy.Rational and,
if python-flint is installed, flint.fmpq.
"""

from fractions import Fraction

from sympy import Rational as SympyRational

from .names import DEFAULT_DTYPE
from .rational import Rational

try:
    from flint import fmpq
    FLINT_AVAILABLE = True
except ImportError:
    FLINT_AVAILABLE = False
    fmpq = None


class RationalInterop:
    """Utility class for converting rationals from and to other libraries."""

    @staticmethod
    def to_fraction(value: Rational) -> Fraction:
        """
        Convert a Rational to a Fraction.

        Args:
            value: Rational to convert

        Returns:
            Fraction with the same numerator and denominator
        """
        return Fraction(int(value.numerator), int(value.denominator))

    @staticmethod
    def from_fraction(value: Fraction, dtype=DEFAULT_DTYPE) -> Rational:
        """
        Convert a Fraction to a Rational.

        Args:
            value: Fraction to convert
            dtype: Base type of the result

        Returns:
            Rational with base type dtype, OverflowError if the fields do not fit
        """
        return Rational(value.numerator, value.denominator, dtype=dtype)

    @staticmethod
    def to_sympy(value: Rational) -> SympyRational:
        """
        Convert a Rational to a sympy Rational.

        Args:
            value: Rational to convert

        Returns:
            sympy.Rational representation
        """
        return SympyRational(int(value.numerator), int(value.denominator))

    @staticmethod
    def from_sympy(value: SympyRational, dtype=DEFAULT_DTYPE) -> Rational:
        """
        Convert a sympy Rational (or Integer) to a Rational.

        Args:
            value: sympy rational number
            dtype: Base type of the result

        Returns:
            Rational with base type dtype
        """
        if not isinstance(value, SympyRational):
            raise TypeError(f"Cannot convert {type(value)} to Rational")
        return Rational(int(value.p), int(value.q), dtype=dtype)

    @staticmethod
    def to_fmpq(value: Rational) -> 'fmpq':
        """Convert a Rational to a python-flint fmpq"""
        if not FLINT_AVAILABLE:
            raise RuntimeError("python-flint is not available")
        return fmpq(int(value.numerator), int(value.denominator))

    @staticmethod
    def from_fmpq(value: 'fmpq', dtype=DEFAULT_DTYPE) -> Rational:
        """Convert a python-flint fmpq to a Rational"""
        if not FLINT_AVAILABLE:
            raise RuntimeError("python-flint is not available")
        return Rational(int(value.p), int(value.q), dtype=dtype)


to_fraction = RationalInterop.to_fraction
from_fraction = RationalInterop.from_fraction
to_sympy = RationalInterop.to_sympy
from_sympy = RationalInterop.from_sympy
to_fmpq = RationalInterop.to_fmpq
from_fmpq = RationalInterop.from_fmpq
