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
"""Exact rational numbers over a fixed-width integral base type

Numerator and denominator are stored as values of the base type (dtype) and
every arithmetic step is carried out in that type. Values are always kept in
canonical form:

    - numerator and denominator are coprime (zero is stored as 0/1),
    - the denominator is greater than zero.

Overflow of the base type is not detected, it behaves like the base type's
own arithmetic (numpy wraps around and issues a RuntimeWarning).
"""

from fractions import Fraction

import numpy as np

from .errors import DomainError
from .floating import decompose
from .integral import (check_dtype, coerce, dtype_name, gcd, ipow, is_arithmetic, is_floating_value, is_integral,
                       is_integral_value, trunc_div)
from .names import DEFAULT_DTYPE, DIVISION_BY_ZERO, ZERO_DENOMINATOR


def _infer_dtype(*values):
    for value in values:
        if isinstance(value, np.integer):
            return type(value)
    return DEFAULT_DTYPE


class Rational:
    """
    Rational number with numerator and denominator of an integral base type.

    Rational(8, 6) is stored as 4/3, Rational(1, -2) as -1/2. The numerator
    defaults to 0 and the denominator to 1, so Rational(3) == 3 and
    Rational() == 0. A floating point argument is converted exactly,
    Rational(0.75) == Rational(3, 4). Passing another Rational copies it.

    The base type is given by the dtype keyword, otherwise taken from a numpy
    integer argument, otherwise numpy.int64. Python's int may be used as base
    type for unbounded numerator and denominator.

    Rationals are mutable: the in-place operators (+=, -=, *=, /=), the
    numerator/denominator setters, assign(), increment() and decrement()
    modify the value and keep it canonical. For this reason they are not
    hashable. A modification that would break the invariants raises
    DomainError before any field is changed.

    Example:
        r = Rational(1, 3, dtype=numpy.int32) + Rational(1, 6, dtype=numpy.int32)

    Args:
        numerator: (int, numpy.integer, float, numpy.floating or Rational)
            Numerator, value to be converted, or Rational to be copied.
        denominator: (int or numpy.integer)
            Denominator (default 1). Must be nonzero.
        dtype: (type)
            Base type, int or one of numpy's integer scalar types.
    """

    __slots__ = ('_numerator', '_denominator', '_dtype')

    # numpy scalars on the left hand side defer to the reflected operators
    __array_ufunc__ = None

    __hash__ = None

    def __init__(self, numerator=0, denominator=None, *, dtype=None):
        if isinstance(numerator, Rational):
            if denominator is not None:
                raise TypeError("A Rational can not be copied with a denominator.")
            self._dtype = numerator._dtype if dtype is None else check_dtype(dtype)
            self._numerator = coerce(numerator._numerator, self._dtype)
            self._denominator = coerce(numerator._denominator, self._dtype)
            return
        self._dtype = check_dtype(_infer_dtype(numerator, denominator) if dtype is None else dtype)
        self.assign(numerator, denominator)

    # Canonical form implies that numerator and denominator are coprime and the denominator is positive.
    @staticmethod
    def _canonize(numerator, denominator):
        divisor = gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        return numerator, denominator

    def _set(self, numerator, denominator):
        self._numerator, self._denominator = self._canonize(numerator, denominator)

    def _fields_of(self, other):
        if other._dtype is not self._dtype:
            raise TypeError(f"Can not combine Rational of base type {dtype_name(self._dtype)} "
                            f"with Rational of base type {dtype_name(other._dtype)}.")
        return other._numerator, other._denominator

    def assign(self, numerator, denominator=None) -> 'Rational':
        """
        Set the value from a numerator/denominator pair or a floating point value.

        Floating point values are decomposed exactly (see floating.decompose)
        and the resulting pair is assigned like any other pair.
        """
        if is_floating_value(numerator):
            if denominator is not None:
                raise TypeError("A floating point value can not be combined with a denominator.")
            numerator, denominator = decompose(numerator)
        elif denominator is None:
            denominator = 1
        numerator = coerce(numerator, self._dtype)
        denominator = coerce(denominator, self._dtype)
        if denominator == 0:
            raise DomainError(ZERO_DENOMINATOR)
        self._set(numerator, denominator)
        return self

    @property
    def dtype(self):
        """Base type of numerator and denominator"""
        return self._dtype

    @property
    def numerator(self):
        return self._numerator

    @numerator.setter
    def numerator(self, value):
        self._set(coerce(value, self._dtype), self._denominator)

    @property
    def denominator(self):
        return self._denominator

    @denominator.setter
    def denominator(self, value):
        value = coerce(value, self._dtype)
        if value == 0:
            raise DomainError(ZERO_DENOMINATOR)
        self._set(self._numerator, value)

    def copy(self) -> 'Rational':
        return Rational(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def evaluate(self, result_type=float):
        """
        Return numerator / denominator as a value of result_type.

        For floating result types both fields are converted first and then
        divided. For integral result types the quotient is truncated toward
        zero.
        """
        if not is_arithmetic(result_type):
            raise TypeError(f"Result type must be an arithmetic type, got {result_type!r}.")
        if is_integral(result_type):
            return coerce(trunc_div(int(self._numerator), int(self._denominator)), result_type)
        return result_type(self._numerator) / result_type(self._denominator)

    # Comparison

    def __eq__(self, other):
        if isinstance(other, Rational):
            return bool(self._numerator == other._numerator and self._denominator == other._denominator)
        if is_integral_value(other):
            return bool(self._denominator == 1 and self._numerator == other)
        return NotImplemented

    def compare_to(self, other) -> int:
        """Three-way comparison: -1 if less, 0 if equal, 1 if greater"""
        if isinstance(other, Rational):
            numerator, denominator = self._fields_of(other)
            if self == other:
                return 0
            # a/b < c/d iff ad < bc, both denominators are positive
            lhs = self._numerator * denominator
            rhs = self._denominator * numerator
        elif is_integral_value(other):
            try:
                value = coerce(other, self._dtype)
            except OverflowError:
                # outside the range of the base type, compare exactly in Python integers
                lhs = int(self._numerator)
                rhs = int(self._denominator) * int(other)
            else:
                if self == value:
                    return 0
                # a/b < c iff a < bc
                lhs = self._numerator
                rhs = self._denominator * value
        else:
            raise TypeError(f"Can not compare Rational with {type(other).__name__}.")
        return int(lhs > rhs) - int(lhs < rhs)

    def _comparable(self, other):
        return isinstance(other, Rational) or is_integral_value(other)

    def __lt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    # Unary operators

    def __pos__(self):
        return self.copy()

    def __neg__(self):
        return Rational(-self._numerator, self._denominator, dtype=self._dtype)

    def invert(self) -> 'Rational':
        """Return the reciprocal, raises DomainError for zero"""
        if self._numerator == 0:
            raise DomainError(DIVISION_BY_ZERO)
        return Rational(self._denominator, self._numerator, dtype=self._dtype)

    def __invert__(self):
        return self.invert()

    def __abs__(self):
        return Rational(abs(self._numerator), self._denominator, dtype=self._dtype)

    # In-place arithmetic, the binary operators delegate to these

    def __iadd__(self, other):
        if isinstance(other, Rational):
            # a/b + c/d = (ad + bc)/bd
            numerator, denominator = self._fields_of(other)
            self._set(self._numerator * denominator + self._denominator * numerator,
                      self._denominator * denominator)
        elif is_integral_value(other):
            # a/b + c = (a + bc)/b
            value = coerce(other, self._dtype)
            self._set(self._numerator + value * self._denominator, self._denominator)
        else:
            return NotImplemented
        return self

    def __isub__(self, other):
        if isinstance(other, Rational):
            # a/b - c/d = (ad - bc)/bd
            numerator, denominator = self._fields_of(other)
            self._set(self._numerator * denominator - self._denominator * numerator,
                      self._denominator * denominator)
        elif is_integral_value(other):
            # a/b - c = (a - bc)/b
            value = coerce(other, self._dtype)
            self._set(self._numerator - value * self._denominator, self._denominator)
        else:
            return NotImplemented
        return self

    def __imul__(self, other):
        if isinstance(other, Rational):
            # a/b * c/d = ac/bd
            numerator, denominator = self._fields_of(other)
            self._set(self._numerator * numerator, self._denominator * denominator)
        elif is_integral_value(other):
            value = coerce(other, self._dtype)
            self._set(self._numerator * value, self._denominator)
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other):
        if isinstance(other, Rational):
            # a/b / c/d = ad/bc
            numerator, denominator = self._fields_of(other)
            if numerator == 0:
                raise DomainError(DIVISION_BY_ZERO)
            self._set(self._numerator * denominator, self._denominator * numerator)
        elif is_integral_value(other):
            # a/b / c = a/bc
            value = coerce(other, self._dtype)
            if value == 0:
                raise DomainError(DIVISION_BY_ZERO)
            self._set(self._numerator, self._denominator * value)
        else:
            return NotImplemented
        return self

    def __add__(self, other):
        return self.copy().__iadd__(other)

    def __sub__(self, other):
        return self.copy().__isub__(other)

    def __mul__(self, other):
        return self.copy().__imul__(other)

    def __truediv__(self, other):
        return self.copy().__itruediv__(other)

    def __radd__(self, other):
        return self.copy().__iadd__(other)

    def __rsub__(self, other):
        if not is_integral_value(other):
            return NotImplemented
        return Rational(other, dtype=self._dtype).__isub__(self)

    def __rmul__(self, other):
        return self.copy().__imul__(other)

    def __rtruediv__(self, other):
        if not is_integral_value(other):
            return NotImplemented
        return Rational(other, dtype=self._dtype).__itruediv__(self)

    def __pow__(self, exponent, modulo=None):
        """
        Raise numerator and denominator to an integral power.

        Exponentiation by squaring in the base type, a negative exponent
        raises the reciprocal.
        """
        if modulo is not None or not is_integral_value(exponent):
            return NotImplemented
        exponent = int(exponent)
        base = self
        if exponent < 0:
            base = self.invert()
            exponent = -exponent
        return Rational(ipow(base._numerator, exponent), ipow(base._denominator, exponent), dtype=self._dtype)

    # Increment and decrement move the value by one whole unit

    def increment(self) -> 'Rational':
        self._set(self._numerator + self._denominator, self._denominator)
        return self

    def decrement(self) -> 'Rational':
        self._set(self._numerator - self._denominator, self._denominator)
        return self

    def post_increment(self) -> 'Rational':
        """Increment in place and return the previous value"""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> 'Rational':
        """Decrement in place and return the previous value"""
        previous = self.copy()
        self.decrement()
        return previous

    # Numeric protocol

    def __bool__(self):
        return bool(self._numerator != 0)

    def __float__(self):
        return self.evaluate(float)

    def __int__(self):
        return self.evaluate(int)

    def __trunc__(self):
        return self.evaluate(int)

    def __floor__(self):
        return int(self._numerator) // int(self._denominator)

    def __ceil__(self):
        return -(-int(self._numerator) // int(self._denominator))

    def __round__(self, ndigits=None):
        rounded = round(Fraction(int(self._numerator), int(self._denominator)), ndigits)
        if ndigits is None:
            return rounded
        return Rational(rounded.numerator, rounded.denominator, dtype=self._dtype)

    def __str__(self):
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self):
        return f"Rational({self._numerator}, {self._denominator}, dtype={dtype_name(self._dtype)})"
