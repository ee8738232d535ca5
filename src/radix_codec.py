#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Radix Codec: Arbitrary-Base Byte Encoding
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/radix_codec.py

"""
Encodes and decodes byte data in any base from 2 to 62.

The whole byte sequence is read as one big-endian unsigned integer and written
out as digits of the requested base, most-significant digit first. Python's
built-in `int` supplies the arbitrary precision.

The digit alphabet is `0-9`, then `a-z`, then `A-Z`. It is not compatible with
any standard base32/base58/base64 scheme.

-   For bases up to 36 only `0-9a-z` are produced, and `A-Z` is accepted on
    decode as an alias for `a-z`.
-   Above base 36 the digits are case-sensitive: `a` is 10, `A` is 36.

Errors are raised as `InvalidBaseError` (a bad base, raised before any work)
and `InvalidDigitError` (a character that is not a digit of the base). Both
derive from `RadixError`, which is a `ValueError`.

Usage:
    from radix_codec import encode, decode, InvalidDigitError

    token = encode(b"\\xff\\xff", 62)     # 'h31'
    data = decode(token, 62)            # b'\\xff\\xff'
"""

import logging
import math

logger = logging.getLogger(__name__)

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
MIN_BASE = 2
MAX_BASE = len(DIGITS)

# Output digits per input byte for each base, rounded up so the buffer
# estimate never falls short. Indices 0 and 1 are unused.
GROWTH_FACTORS = (0.0, 0.0) + tuple(
    math.ceil(8 / math.log2(b) * 1000) / 1000 for b in range(MIN_BASE, MAX_BASE + 1)
)


class RadixError(ValueError):
    """Base class for all codec errors."""


class InvalidBaseError(RadixError):
    """Raised when the requested base is outside [2, 62]."""

    def __init__(self, base):
        self.base = base
        super().__init__(
            f"Illegal base {base!r}: must be an integer between {MIN_BASE} and {MAX_BASE}."
        )


class InvalidDigitError(RadixError):
    """Raised by decode() when a character is not a valid digit for the base."""

    def __init__(self, char, position: int, base: int):
        self.char = char
        self.position = position
        self.base = base
        super().__init__(
            f"Illegal character {char!r} at position {position} for base {base}."
        )


def _check_base(base) -> None:
    # bool is an int subclass but never a meaningful base
    if not isinstance(base, int) or isinstance(base, bool):
        raise InvalidBaseError(base)
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBaseError(base)


def _digit_value(char: str, base: int):
    """Returns the numeric value of one digit character, or None if unmapped."""
    if '0' <= char <= '9':
        return ord(char) - ord('0')
    if 'a' <= char <= 'z':
        return ord(char) - ord('a') + 10
    if 'A' <= char <= 'Z':
        if base <= 36:
            return ord(char) - ord('A') + 10
        return ord(char) - ord('A') + 36
    return None


def encoded_length_hint(byte_length: int, base: int) -> int:
    """
    Estimates the number of digits needed to encode `byte_length` bytes.

    The estimate is an upper bound on the length of the encoded output and is
    only used to pre-size the output buffer.

    Args:
        byte_length (int): Number of significant bytes in the input.
        base (int): Target base, 2 to 62.

    Returns:
        int: Buffer capacity in digits.
    """
    _check_base(base)
    return int(byte_length * GROWTH_FACTORS[base]) + 1


def encode(data, base: int) -> str:
    """
    Encodes bytes as a string of digits in the given base.

    Args:
        data (bytes-like): Big-endian unsigned magnitude. Not modified.
        base (int): Target base, 2 to 62.

    Returns:
        str: Digits, most significant first. Zero (including empty input)
             encodes as "0".

    Raises:
        InvalidBaseError: If `base` is not an integer in [2, 62].
        TypeError: If `data` is not a bytes-like object.
    """
    _check_base(base)
    if isinstance(data, str):
        raise TypeError("encode() expects a bytes-like object, not 'str'.")

    num = int.from_bytes(data, "big")
    capacity = encoded_length_hint((num.bit_length() + 7) // 8, base)
    buf = bytearray(capacity)

    # Fill from the end so the most significant digit ends up first.
    i = capacity
    while num >= base:
        num, remainder = divmod(num, base)
        i -= 1
        buf[i] = ord(DIGITS[remainder])

    # Last digit once num < base; also covers zero.
    i -= 1
    buf[i] = ord(DIGITS[num])

    return buf[i:].decode("ascii")


def decode(text, base: int) -> bytes:
    """
    Decodes a string of base-N digits back into bytes.

    Args:
        text (str or bytes-like): Digits, most significant first. A bytes-like
            value is read as ASCII.
        base (int): Base the digits are written in, 2 to 62. Above 36 the
            digits are case-sensitive.

    Returns:
        bytes: The minimal big-endian representation of the value. Zero
               (including empty input) decodes to b"".

    Raises:
        InvalidBaseError: If `base` is not an integer in [2, 62].
        InvalidDigitError: If any character is not a digit of `base`.
    """
    _check_base(base)
    if not isinstance(text, str):
        # latin-1 maps every byte to one character, so positions line up and
        # non-ASCII bytes fall through to InvalidDigitError below.
        text = memoryview(text).tobytes().decode("latin-1")

    num = 0
    for position, char in enumerate(text):
        value = _digit_value(char, base)
        if value is None or value >= base:
            logger.debug(f"Rejecting {char!r} at position {position} for base {base}")
            raise InvalidDigitError(char, position, base)
        num = num * base + value

    return num.to_bytes((num.bit_length() + 7) // 8, "big")

# === End of src/radix_codec.py ===
