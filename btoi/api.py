#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Public parsing API

Thin entry points over :mod:`btoi.parsers`.  Each one validates its
arguments once, then hands a zero-copy byte view to the parser and wraps
the result in the requested NumPy scalar type.

Entry Points
------------
==========================  ========  ========  ===========
Function                    Signed    Radix     On overflow
==========================  ========  ========  ===========
``btoi``                    yes       10        raise
``btoi_radix``              yes       given     raise
``btoi_saturating``         yes       10        clamp
``btoi_saturating_radix``   yes       given     clamp
``btou``                    no        10        raise
``btou_radix``              no        given     raise
``btou_saturating``         no        10        clamp
``btou_saturating_radix``   no        given     clamp
==========================  ========  ========  ===========

Every entry point accepts a keyword-only ``dtype`` selecting the target
width (default: platform word size, ``numpy.intp`` / ``numpy.uintp``).
``*_from_string`` variants encode text as UTF-8 and delegate; the
``*_array`` variants parse many fields into one NumPy array.

Error Contract
--------------
* Bad input bytes raise :class:`~btoi.exceptions.ParseError`.
* Saturating variants never raise an overflow kind, but still raise
  ``EMPTY`` and ``INVALID_DIGIT``.
* A radix outside [2, 36] raises
  :class:`~btoi.exceptions.InvalidRadixError` in every variant.

Examples
--------
>>> import numpy as np
>>> btou_radix(b"ff", 16)
np.uint64(255)
>>> btoi_radix(b"-101010", 2, dtype=np.int32)
np.int32(-42)
>>> btoi_saturating(b"-9999999999", dtype=np.int32)
np.int32(-2147483648)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from btoi.exceptions import ParseError, ParseErrorKind
from btoi.parsers.signed import parse_signed, split_sign
from btoi.parsers.unsigned import parse_unsigned
from btoi.utils.constants import DEFAULT_RADIX
from btoi.utils.validation import (
    as_byte_view,
    dtype_limits,
    resolve_dtype,
    validate_radix,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal dispatch
# ---------------------------------------------------------------------------

def _parse_signed(data, radix, dtype, saturating):
    radix = validate_radix(radix)
    resolved = resolve_dtype(dtype, signed=True)
    minimum, maximum = dtype_limits(resolved)
    value = parse_signed(
        as_byte_view(data), radix, minimum, maximum, saturating=saturating,
    )
    return resolved.type(value)


def _unsigned_view(data) -> memoryview:
    # A lone sign byte has no digits, same as the signed entry points.
    view = as_byte_view(data)
    _, digits = split_sign(view)
    if len(digits) == 0:
        raise ParseError(ParseErrorKind.EMPTY)
    return view


def _parse_unsigned(data, radix, dtype, saturating):
    radix = validate_radix(radix)
    resolved = resolve_dtype(dtype, signed=False)
    _, maximum = dtype_limits(resolved)
    value = parse_unsigned(_unsigned_view(data), radix, maximum, saturating=saturating)
    return resolved.type(value)


def _encode(text: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text.encode("utf-8")


# ---------------------------------------------------------------------------
# Signed, checked
# ---------------------------------------------------------------------------

def btoi(data, *, dtype=None) -> np.signedinteger:
    """Parse a signed decimal integer from a byte sequence

    Parameters
    ----------
    data : bytes-like
        ASCII digits with an optional leading ``+`` or ``-``.
    dtype : numpy.dtype-like, optional
        Signed target type; defaults to ``numpy.intp``.

    Returns
    -------
    numpy.signedinteger
        The parsed value as a scalar of *dtype*.

    Raises
    ------
    ParseError
        If *data* is empty, holds a non-digit, or does not fit *dtype*.

    Examples
    --------
    >>> int(btoi(b"-123"))
    -123
    """
    return _parse_signed(data, DEFAULT_RADIX, dtype, False)


def btoi_radix(data, radix: int, *, dtype=None) -> np.signedinteger:
    """Parse a signed integer in the given *radix* from a byte sequence

    Raises :class:`~btoi.exceptions.InvalidRadixError` when *radix* is
    outside [2, 36]; otherwise behaves like :func:`btoi`.
    """
    return _parse_signed(data, radix, dtype, False)


# ---------------------------------------------------------------------------
# Signed, saturating
# ---------------------------------------------------------------------------

def btoi_saturating(data, *, dtype=None) -> np.signedinteger:
    """Like :func:`btoi`, but clamp to the range of *dtype* on overflow"""
    return _parse_signed(data, DEFAULT_RADIX, dtype, True)


def btoi_saturating_radix(data, radix: int, *, dtype=None) -> np.signedinteger:
    """Like :func:`btoi_radix`, but clamp to the range of *dtype* on overflow

    Scanning stops at the overflow point, so bytes after it are not
    validated.

    Examples
    --------
    >>> int(btoi_saturating_radix(b"-ffffffffff", 16, dtype="int32"))
    -2147483648
    """
    return _parse_signed(data, radix, dtype, True)


# ---------------------------------------------------------------------------
# Unsigned, checked
# ---------------------------------------------------------------------------

def btou(data, *, dtype=None) -> np.unsignedinteger:
    """Parse an unsigned decimal integer from a byte sequence

    No sign byte is accepted: ``b"+1"`` and ``b"-1"`` raise
    ``INVALID_DIGIT``.  A lone ``b"+"`` or ``b"-"`` holds no digits and
    raises ``EMPTY``, as it does for :func:`btoi`.

    Parameters
    ----------
    data : bytes-like
        ASCII digits.
    dtype : numpy.dtype-like, optional
        Unsigned target type; defaults to ``numpy.uintp``.

    Returns
    -------
    numpy.unsignedinteger
        The parsed value as a scalar of *dtype*.

    Raises
    ------
    ParseError
        If *data* is empty, holds a non-digit, or does not fit *dtype*.
    """
    return _parse_unsigned(data, DEFAULT_RADIX, dtype, False)


def btou_radix(data, radix: int, *, dtype=None) -> np.unsignedinteger:
    """Parse an unsigned integer in the given *radix* from a byte sequence"""
    return _parse_unsigned(data, radix, dtype, False)


# ---------------------------------------------------------------------------
# Unsigned, saturating
# ---------------------------------------------------------------------------

def btou_saturating(data, *, dtype=None) -> np.unsignedinteger:
    """Like :func:`btou`, but clamp to the maximum of *dtype* on overflow"""
    return _parse_unsigned(data, DEFAULT_RADIX, dtype, True)


def btou_saturating_radix(data, radix: int, *, dtype=None) -> np.unsignedinteger:
    """Like :func:`btou_radix`, but clamp to the maximum of *dtype* on overflow"""
    return _parse_unsigned(data, radix, dtype, True)


# ---------------------------------------------------------------------------
# Text adapters
# ---------------------------------------------------------------------------

def btoi_from_string(text: str, radix: int = DEFAULT_RADIX, *, dtype=None):
    """Parse a signed integer from *text* via its UTF-8 bytes

    Non-ASCII characters encode to bytes >= 0x80 and are reported as
    ``INVALID_DIGIT``; no other semantics are added.
    """
    return btoi_radix(_encode(text), radix, dtype=dtype)


def btou_from_string(text: str, radix: int = DEFAULT_RADIX, *, dtype=None):
    """Parse an unsigned integer from *text* via its UTF-8 bytes"""
    return btou_radix(_encode(text), radix, dtype=dtype)


def btoi_saturating_from_string(text: str, radix: int = DEFAULT_RADIX, *, dtype=None):
    """Saturating counterpart of :func:`btoi_from_string`"""
    return btoi_saturating_radix(_encode(text), radix, dtype=dtype)


def btou_saturating_from_string(text: str, radix: int = DEFAULT_RADIX, *, dtype=None):
    """Saturating counterpart of :func:`btou_from_string`"""
    return btou_saturating_radix(_encode(text), radix, dtype=dtype)


# ---------------------------------------------------------------------------
# Batch parsing
# ---------------------------------------------------------------------------

def btoi_array(
    fields: Iterable,
    radix: int = DEFAULT_RADIX,
    *,
    dtype=None,
    saturating: bool = False,
) -> np.ndarray:
    """Parse many signed fields into a 1-D NumPy array

    Radix and dtype are validated once; the fields are then parsed in
    order.  The first failing field raises its
    :class:`~btoi.exceptions.ParseError` and no array is returned.

    Parameters
    ----------
    fields : iterable of bytes-like
        One byte sequence per output element (e.g. the columns of a
        split record).
    radix : int, optional
        Radix for every field (default 10).
    dtype : numpy.dtype-like, optional
        Signed element type; defaults to ``numpy.intp``.
    saturating : bool, optional
        Clamp overflowing fields instead of raising.

    Returns
    -------
    numpy.ndarray
        Array of shape ``(n_fields,)`` and the requested dtype.

    Examples
    --------
    >>> btoi_array([b"1", b"-2", b"+3"], dtype=np.int16)
    array([ 1, -2,  3], dtype=int16)
    """
    radix = validate_radix(radix)
    resolved = resolve_dtype(dtype, signed=True)
    minimum, maximum = dtype_limits(resolved)
    result = np.fromiter(
        (
            parse_signed(as_byte_view(f), radix, minimum, maximum, saturating=saturating)
            for f in fields
        ),
        dtype=resolved,
    )
    logger.debug("Parsed %d signed fields as %s.", result.size, resolved)
    return result


def btou_array(
    fields: Iterable,
    radix: int = DEFAULT_RADIX,
    *,
    dtype=None,
    saturating: bool = False,
) -> np.ndarray:
    """Parse many unsigned fields into a 1-D NumPy array

    See :func:`btoi_array`; the element type defaults to ``numpy.uintp``.
    """
    radix = validate_radix(radix)
    resolved = resolve_dtype(dtype, signed=False)
    _, maximum = dtype_limits(resolved)
    result = np.fromiter(
        (
            parse_unsigned(_unsigned_view(f), radix, maximum, saturating=saturating)
            for f in fields
        ),
        dtype=resolved,
    )
    logger.debug("Parsed %d unsigned fields as %s.", result.size, resolved)
    return result
