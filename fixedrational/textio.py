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
"""Text serialization of rationals as "<numerator>/<denominator>"

The reader is tolerant in the way stream extraction usually is: leading
whitespace is skipped, and if the '/' separator or the denominator is missing
or malformed, the value read so far is kept with denominator 1 and the stream
is left positioned right after the numerator.
"""

import io
import logging

from .names import DEFAULT_DTYPE
from .rational import Rational

LOG = logging.getLogger(__name__)

_SIGN = '+-'
_DIGITS = '0123456789'


def _skip_whitespace(stream):
    while True:
        mark = stream.tell()
        char = stream.read(1)
        if not char.isspace():
            stream.seek(mark)
            return


def _read_integer(stream):
    """Read an optionally signed decimal integer, None (and no input consumed) if there is none."""
    start = stream.tell()
    _skip_whitespace(stream)
    text = ''
    mark = stream.tell()
    char = stream.read(1)
    if char and char in _SIGN:
        text = char
        mark = stream.tell()
        char = stream.read(1)
    while char and char in _DIGITS:
        text += char
        mark = stream.tell()
        char = stream.read(1)
    stream.seek(mark)
    if not text.lstrip(_SIGN):
        stream.seek(start)
        return None
    return int(text)


def read_rational(stream, dtype=DEFAULT_DTYPE) -> Rational:
    """
    Read a rational from a seekable text stream.

    Args:
        stream: (io.TextIOBase)
            Stream positioned before the value.
        dtype: (type)
            Base type of the result.

    Returns:
        (Rational):
            The value read. The stream is positioned after the last character
            that belongs to it.
    """
    numerator = _read_integer(stream)
    if numerator is None:
        raise ValueError("Invalid literal for Rational: expected an integer numerator.")
    denominator = 1
    mark = stream.tell()
    _skip_whitespace(stream)
    if stream.read(1) == '/':
        value = _read_integer(stream)
        if value is None:
            LOG.debug("No denominator after '/', using 1.")
            stream.seek(mark)
        else:
            denominator = value
    else:
        stream.seek(mark)
    return Rational(numerator, denominator, dtype=dtype)


def write_rational(stream, value: Rational):
    """Write value as "<numerator>/<denominator>" and return the stream"""
    stream.write(format_rational(value))
    return stream


def parse_rational(text: str, dtype=DEFAULT_DTYPE) -> Rational:
    return read_rational(io.StringIO(text), dtype)


def format_rational(value: Rational) -> str:
    return f"{value.numerator}/{value.denominator}"
