#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Argument preconditions for the btoi entry points

Every function here guards against *caller* mistakes rather than bad
input data, and raises standard ``TypeError`` / ``ValueError`` subclasses
instead of :class:`~btoi.exceptions.ParseError`.  Entry points call them
once per call, before any byte is scanned.

Checked Preconditions
---------------------
* Radix is an integer in the range 2 ≤ radix ≤ 36.
* Target dtype is a NumPy integer type of the expected signedness.
* Input exports a one-dimensional buffer of single-byte items.

Design Note
-----------
These helpers accept plain values and return plain values (``int``,
``numpy.dtype``, ``memoryview``), so that the parser layer does not depend
on the facade.  The import graph stays acyclic::

    utils ← parsers ← api ← cli
"""

from __future__ import annotations

import operator

import numpy as np

from btoi.exceptions import InvalidRadixError
from btoi.utils.constants import (
    DEFAULT_SIGNED_DTYPE,
    DEFAULT_UNSIGNED_DTYPE,
    MAX_RADIX,
    MIN_RADIX,
)


# ---------------------------------------------------------------------------
# Radix
# ---------------------------------------------------------------------------

def validate_radix(radix: int) -> int:
    """Verify that *radix* lies in [2, 36] and return it as an ``int``

    Parameters
    ----------
    radix : int
        Radix to validate.  Any object implementing ``__index__`` is
        accepted, including NumPy integer scalars.

    Returns
    -------
    int
        The radix as a Python ``int``.

    Raises
    ------
    TypeError
        If *radix* is not an integer.
    InvalidRadixError
        If *radix* is outside the range [2, 36].

    Examples
    --------
    >>> validate_radix(16)
    16
    >>> validate_radix(37)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    btoi.exceptions.InvalidRadixError: ...
    """
    try:
        value = operator.index(radix)
    except TypeError as exc:
        raise TypeError(
            f"radix must be an integer, got {type(radix).__name__}"
        ) from exc
    if not (MIN_RADIX <= value <= MAX_RADIX):
        raise InvalidRadixError(value)
    return value


# ---------------------------------------------------------------------------
# Target dtype
# ---------------------------------------------------------------------------

def resolve_dtype(dtype, *, signed: bool) -> np.dtype:
    """Normalise *dtype* and check its signedness

    Parameters
    ----------
    dtype : numpy.dtype-like or None
        Requested target type (``np.int32``, ``"uint16"``, ...).  ``None``
        selects the platform word size.
    signed : bool
        Whether a signed (``int*``) or unsigned (``uint*``) type is
        expected.

    Returns
    -------
    numpy.dtype
        The resolved integer dtype.

    Raises
    ------
    TypeError
        If *dtype* is not understood by NumPy, is not an integer type, or
        has the wrong signedness.
    """
    if dtype is None:
        return DEFAULT_SIGNED_DTYPE if signed else DEFAULT_UNSIGNED_DTYPE
    resolved = np.dtype(dtype)
    expected_kind = "i" if signed else "u"
    if resolved.kind != expected_kind:
        raise TypeError(
            f"expected a {'signed' if signed else 'unsigned'} integer dtype, "
            f"got {resolved}"
        )
    return resolved


def dtype_limits(dtype: np.dtype) -> tuple[int, int]:
    """Return ``(min, max)`` of an integer dtype as Python ints"""
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


# ---------------------------------------------------------------------------
# Input buffers
# ---------------------------------------------------------------------------

def as_byte_view(data) -> memoryview:
    """Return a read-only, one-byte-per-item view of *data*

    Parameters
    ----------
    data : bytes-like
        ``bytes``, ``bytearray``, ``memoryview``, ``array.array`` or a
        one-dimensional NumPy array whose items are one byte wide.

    Returns
    -------
    memoryview
        View with format ``"B"``; iterating it yields ints in 0..255.
        No data is copied.

    Raises
    ------
    TypeError
        If *data* is ``str``, does not support the buffer protocol, or
        is not a one-dimensional buffer of single-byte items.
    """
    if isinstance(data, str):
        raise TypeError(
            "expected a bytes-like object, got str; "
            "use the *_from_string functions for text input"
        )
    try:
        view = memoryview(data)
    except TypeError as exc:
        raise TypeError(
            f"expected a bytes-like object, got {type(data).__name__}"
        ) from exc
    if view.ndim != 1 or view.itemsize != 1:
        raise TypeError(
            f"expected a one-dimensional buffer of single bytes, got "
            f"ndim={view.ndim}, itemsize={view.itemsize}"
        )
    if view.format != "B":
        view = view.cast("B")
    return view.toreadonly()
