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
"""Static names used in the fixedrational package

    Base types

        DEFAULT_DTYPE = numpy.int64

        SIGNED_DTYPES = (numpy.int8, numpy.int16, numpy.int32, numpy.int64)

        UNSIGNED_DTYPES = (numpy.uint8, numpy.uint16, numpy.uint32, numpy.uint64)

    Literal suffixes

        R = 'r'

        LR = 'lr'

        LLR = 'llr'

        UR = 'ur'

        ULR = 'ulr'

        ULLR = 'ullr'

        LITERAL_DTYPES = {suffix: base type}

    Error messages

        ZERO_DENOMINATOR = 'Denominator can not be zero.'

        DIVISION_BY_ZERO = 'Division by zero.'

        NOT_FINITE = 'Value can not be infinite or NaN.'

        UNDERFLOW = 'Value evaluates to zero due to being too small.'
"""

import numpy as np

DEFAULT_DTYPE = np.int64
SIGNED_DTYPES = (np.int8, np.int16, np.int32, np.int64)
UNSIGNED_DTYPES = (np.uint8, np.uint16, np.uint32, np.uint64)

R = 'r'
LR = 'lr'
LLR = 'llr'
UR = 'ur'
ULR = 'ulr'
ULLR = 'ullr'

# C int, long and long long, then their unsigned counterparts
LITERAL_DTYPES = {
    R: np.intc,
    LR: np.dtype('l').type,
    LLR: np.longlong,
    UR: np.uintc,
    ULR: np.dtype('L').type,
    ULLR: np.ulonglong,
}

ZERO_DENOMINATOR = 'Denominator can not be zero.'
DIVISION_BY_ZERO = 'Division by zero.'
NOT_FINITE = 'Value can not be infinite or NaN.'
UNDERFLOW = 'Value evaluates to zero due to being too small.'
