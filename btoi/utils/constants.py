#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Constants shared by the btoi parsers

Radix bounds, ASCII code points used by digit classification, default
target widths, and the human-readable messages attached to each
:class:`~btoi.exceptions.ParseErrorKind`.
"""

from __future__ import annotations

import numpy as np

# ---------------------------------------------------------------------------
# Radix
# ---------------------------------------------------------------------------

MIN_RADIX: int = 2
"""Smallest supported radix (binary)."""

MAX_RADIX: int = 36
"""Largest supported radix (``0-9`` followed by ``a-z``)."""

DEFAULT_RADIX: int = 10
"""Radix used by the entry points that do not take one."""

# ---------------------------------------------------------------------------
# ASCII code points
# ---------------------------------------------------------------------------

ASCII_ZERO: int = ord("0")
ASCII_NINE: int = ord("9")
ASCII_LOWER_A: int = ord("a")
ASCII_LOWER_Z: int = ord("z")
ASCII_UPPER_A: int = ord("A")
ASCII_UPPER_Z: int = ord("Z")
ASCII_PLUS: int = ord("+")
ASCII_MINUS: int = ord("-")

LETTER_DIGIT_OFFSET: int = 10
"""Digit value of ``'a'`` / ``'A'``."""

# ---------------------------------------------------------------------------
# Target widths
# ---------------------------------------------------------------------------

DEFAULT_SIGNED_DTYPE: np.dtype = np.dtype(np.intp)
"""Signed result type when no ``dtype`` is given (platform word size)."""

DEFAULT_UNSIGNED_DTYPE: np.dtype = np.dtype(np.uintp)
"""Unsigned result type when no ``dtype`` is given (platform word size)."""

# ---------------------------------------------------------------------------
# Error messages
# ---------------------------------------------------------------------------

MSG_EMPTY: str = "cannot parse integer from empty string"
MSG_INVALID_DIGIT: str = "invalid digit found in string"
MSG_POS_OVERFLOW: str = "number too large to fit in target type"
MSG_NEG_OVERFLOW: str = "number too small to fit in target type"
