#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
btoi - parse integers directly from ASCII byte sequences

Convert ``bytes``, ``bytearray``, ``memoryview`` or ``uint8`` NumPy
buffers into fixed-width NumPy integers without decoding them to
``str`` first.  Radices 2 through 36 are supported, with either a
checked (raise on overflow) or saturating (clamp on overflow) policy.

Pipeline
--------
1. **Validate** radix, target dtype and input buffer once per call.
2. **Strip sign** (signed entry points only).
3. **Accumulate** the unsigned magnitude with overflow checks.
4. **Map** the magnitude into the signed range, or clamp.

Modules
-------
api
    Public entry points (``btoi``, ``btou``, ``*_radix``, ``*_saturating``,
    ``*_from_string``, ``*_array``).
parsers
    Signed and unsigned parsing cores.
utils
    Constants, digit classification, and argument validation.
cli
    Command-line front end.

Examples
--------
>>> from btoi import btoi, btou_radix
>>> int(btoi(b"-42"))
-42
>>> int(btou_radix(b"zz", 36))
1295
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from btoi.api import (
    btoi,
    btoi_radix,
    btoi_saturating,
    btoi_saturating_radix,
    btou,
    btou_radix,
    btou_saturating,
    btou_saturating_radix,
    btoi_from_string,
    btou_from_string,
    btoi_saturating_from_string,
    btou_saturating_from_string,
    btoi_array,
    btou_array,
)
from btoi.exceptions import (
    BtoiError,
    ParseError,
    ParseErrorKind,
    InvalidRadixError,
)

__all__ = [
    # Version
    "__version__",
    # Signed
    "btoi",
    "btoi_radix",
    "btoi_saturating",
    "btoi_saturating_radix",
    # Unsigned
    "btou",
    "btou_radix",
    "btou_saturating",
    "btou_saturating_radix",
    # Text adapters
    "btoi_from_string",
    "btou_from_string",
    "btoi_saturating_from_string",
    "btou_saturating_from_string",
    # Batch
    "btoi_array",
    "btou_array",
    # Exceptions
    "BtoiError",
    "ParseError",
    "ParseErrorKind",
    "InvalidRadixError",
]
