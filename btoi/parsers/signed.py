#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Signed integer parser

Strips an optional leading ``+`` or ``-``, parses the remaining bytes as
an unsigned magnitude of the same width, and maps that magnitude into
the signed range.

Two's-Complement Boundary
-------------------------
A signed range ``[minimum, maximum]`` satisfies
``-minimum == maximum + 1``.  The magnitude ``maximum + 1`` is therefore
valid only when negative, where it maps to ``minimum``::

    int8:  b"-128" -> -128    b"128" -> POS_OVERFLOW    b"-129" -> NEG_OVERFLOW

Overflow Classification
-----------------------
The unsigned parser only knows that a magnitude is too large.  This
module decides which way it overflowed: the non-negative branch reports
``POS_OVERFLOW`` and the negative branch ``NEG_OVERFLOW``.  ``EMPTY`` and
``INVALID_DIGIT`` pass through unchanged.
"""

from __future__ import annotations

import logging

from btoi.exceptions import ParseError, ParseErrorKind
from btoi.parsers.unsigned import parse_unsigned
from btoi.utils.constants import ASCII_MINUS, ASCII_PLUS

logger = logging.getLogger(__name__)

_OVERFLOW_KINDS = (ParseErrorKind.POS_OVERFLOW, ParseErrorKind.NEG_OVERFLOW)


def split_sign(data: memoryview) -> tuple[bool, memoryview]:
    """Split an optional leading sign byte from *data*

    Returns
    -------
    tuple[bool, memoryview]
        ``(negative, magnitude)`` where *magnitude* is a zero-copy slice
        of *data* with the sign byte removed.

    Examples
    --------
    >>> negative, rest = split_sign(memoryview(b"-42"))
    >>> negative, bytes(rest)
    (True, b'42')
    >>> negative, rest = split_sign(memoryview(b"42"))
    >>> negative, bytes(rest)
    (False, b'42')
    """
    if len(data) > 0:
        first = data[0]
        if first == ASCII_MINUS:
            return True, data[1:]
        if first == ASCII_PLUS:
            return False, data[1:]
    return False, data


def parse_signed(
    data: memoryview,
    radix: int,
    minimum: int,
    maximum: int,
    *,
    saturating: bool = False,
) -> int:
    """Parse a signed integer from *data*

    Parameters
    ----------
    data : memoryview
        Byte view (format ``"B"``), optionally starting with ``+``/``-``.
    radix : int
        Validated radix in the range 2..36.
    minimum, maximum : int
        Signed range of the target type, with ``-minimum == maximum + 1``.
    saturating : bool, optional
        If ``True``, overflow clamps to *maximum* (non-negative input) or
        *minimum* (negative input) instead of raising.

    Returns
    -------
    int
        The parsed value, ``minimum <= value <= maximum``.

    Raises
    ------
    ParseError
        ``EMPTY`` if no digits follow the optional sign, ``INVALID_DIGIT``
        at the first non-digit byte, ``POS_OVERFLOW`` / ``NEG_OVERFLOW``
        when the value does not fit and *saturating* is ``False``.

    Examples
    --------
    >>> parse_signed(memoryview(b"-101010"), 2, -128, 127)
    -42
    >>> parse_signed(memoryview(b"-128"), 10, -128, 127)
    -128
    >>> parse_signed(memoryview(b"-999"), 10, -128, 127, saturating=True)
    -128
    """
    negative, digits = split_sign(data)
    if len(digits) == 0:
        raise ParseError(ParseErrorKind.EMPTY)

    # Magnitude bound is the unsigned maximum of the same width.
    magnitude_max = 2 * maximum + 1
    try:
        magnitude = parse_unsigned(digits, radix, magnitude_max)
    except ParseError as exc:
        if exc.kind not in _OVERFLOW_KINDS:
            raise
        magnitude = None

    if not negative:
        if magnitude is not None and magnitude <= maximum:
            return magnitude
        return _overflow(ParseErrorKind.POS_OVERFLOW, maximum, saturating)

    if magnitude is not None:
        if magnitude == maximum + 1:
            return minimum
        if magnitude <= maximum:
            return -magnitude
    return _overflow(ParseErrorKind.NEG_OVERFLOW, minimum, saturating)


def _overflow(kind: ParseErrorKind, bound: int, saturating: bool) -> int:
    """Clamp to *bound* when saturating, otherwise raise *kind*."""
    if saturating:
        logger.debug("Signed value %s; clamped to %d.", kind.name, bound)
        return bound
    raise ParseError(kind)
