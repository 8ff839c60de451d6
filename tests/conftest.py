#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for btoi tests

Provides the fixed-width integer types under test, a reference
formatter for building digit strings in any radix, and a seeded sample
of values for property-style checks.
"""

from __future__ import annotations

import numpy as np
import pytest

SIGNED_DTYPES = [np.int8, np.int16, np.int32, np.int64]
UNSIGNED_DTYPES = [np.uint8, np.uint16, np.uint32, np.uint64]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _format_radix(value: int, radix: int, upper: bool = False) -> bytes:
    """Format *value* in *radix* as ASCII bytes (test reference only)"""
    if value == 0:
        return b"0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    out = []
    while value:
        value, digit = divmod(value, radix)
        out.append(_DIGITS[digit])
    text = sign + "".join(reversed(out))
    return (text.upper() if upper else text).encode("ascii")


@pytest.fixture(params=SIGNED_DTYPES, ids=lambda t: np.dtype(t).name)
def signed_dtype(request) -> np.dtype:
    """Each signed target width in turn"""
    return np.dtype(request.param)


@pytest.fixture(params=UNSIGNED_DTYPES, ids=lambda t: np.dtype(t).name)
def unsigned_dtype(request) -> np.dtype:
    """Each unsigned target width in turn"""
    return np.dtype(request.param)


@pytest.fixture
def format_radix():
    """Reference integer-to-bytes formatter for round-trip checks"""
    return _format_radix


@pytest.fixture
def int32_samples() -> list[int]:
    """Boundary and random values spanning the int32 range"""
    info = np.iinfo(np.int32)
    rng = np.random.default_rng(20260101)
    random_values = rng.integers(int(info.min), int(info.max), size=64, endpoint=True)
    return [
        int(info.min), int(info.min) + 1, -1, 0, 1,
        int(info.max) - 1, int(info.max),
    ] + [int(v) for v in random_values]
