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
"""Named factories standing in for integer literal suffixes

r(5) corresponds to a rational over C int, ullr(5) to one over C unsigned
long long, and so on.
"""

from .integral import is_integral_value
from .names import LITERAL_DTYPES, R, LR, LLR, UR, ULR, ULLR
from .rational import Rational


def _factory(suffix):
    dtype = LITERAL_DTYPES[suffix]

    def make(value) -> Rational:
        if not is_integral_value(value):
            raise TypeError(f"Literal value must be integral, got {type(value).__name__}.")
        return Rational(value, dtype=dtype)

    make.__name__ = suffix
    make.__qualname__ = suffix
    make.__doc__ = f"Rational with base type {dtype.__name__} and denominator 1"
    return make


r = _factory(R)
lr = _factory(LR)
llr = _factory(LLR)
ur = _factory(UR)
ulr = _factory(ULR)
ullr = _factory(ULLR)
