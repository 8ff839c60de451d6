#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Byte-to-digit classification

Maps a single ASCII byte to its digit value under a given radix.  The
mapping is case-insensitive::

    '0'..'9'  ->  0..9
    'a'..'z'  -> 10..35
    'A'..'Z'  -> 10..35

Any other byte, and any digit not below the radix, has no value.  Every
byte in 0..255 is classified by integer comparison alone, so arbitrary
binary input is safe.
"""

from __future__ import annotations

from btoi.utils.constants import (
    ASCII_LOWER_A,
    ASCII_LOWER_Z,
    ASCII_NINE,
    ASCII_UPPER_A,
    ASCII_UPPER_Z,
    ASCII_ZERO,
    LETTER_DIGIT_OFFSET,
)


def digit_value(byte: int, radix: int) -> int | None:
    """Return the digit value of *byte* under *radix*, or ``None``

    The radix is assumed to be valid; entry points check it once per
    call before any byte is classified.

    Parameters
    ----------
    byte : int
        Byte value in the range 0..255.
    radix : int
        Radix in the range 2..36.

    Returns
    -------
    int | None
        The digit, guaranteed to satisfy ``0 <= digit < radix``, or
        ``None`` when *byte* is not a digit of this radix.

    Examples
    --------
    >>> digit_value(ord("7"), 10)
    7
    >>> digit_value(ord("F"), 16)
    15
    >>> digit_value(ord("8"), 8) is None
    True
    """
    if ASCII_ZERO <= byte <= ASCII_NINE:
        digit = byte - ASCII_ZERO
    elif ASCII_LOWER_A <= byte <= ASCII_LOWER_Z:
        digit = byte - ASCII_LOWER_A + LETTER_DIGIT_OFFSET
    elif ASCII_UPPER_A <= byte <= ASCII_UPPER_Z:
        digit = byte - ASCII_UPPER_A + LETTER_DIGIT_OFFSET
    else:
        return None
    return digit if digit < radix else None
