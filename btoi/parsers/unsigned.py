#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Unsigned magnitude parser

Scans a byte view left to right, accumulating ``value * radix + digit``
under an explicit upper bound.  Both arithmetic steps are checked
*before* they are performed, so the running value never exceeds the
bound even though Python integers could hold it.

Overflow Policies
-----------------
* **checked** (default) — overflow raises
  :class:`~btoi.exceptions.ParseError` with kind ``POS_OVERFLOW``.
* **saturating** — overflow returns the bound.

In both cases scanning stops at the overflow point.  Bytes after it are
never examined, so a saturating parse of ``b"99999999999999999999x"``
succeeds even though the trailing ``x`` is not a digit.
"""

from __future__ import annotations

import logging

from btoi.exceptions import ParseError, ParseErrorKind
from btoi.utils.digits import digit_value

logger = logging.getLogger(__name__)


def parse_unsigned(
    data: memoryview,
    radix: int,
    maximum: int,
    *,
    saturating: bool = False,
) -> int:
    """Parse an unsigned magnitude from *data*

    Parameters
    ----------
    data : memoryview
        Byte view (format ``"B"``) holding digits only; no sign byte.
    radix : int
        Validated radix in the range 2..36.
    maximum : int
        Largest representable result (e.g. ``2**32 - 1`` for ``uint32``).
    saturating : bool, optional
        If ``True``, overflow returns *maximum* instead of raising.

    Returns
    -------
    int
        The parsed magnitude, ``0 <= value <= maximum``.

    Raises
    ------
    ParseError
        ``EMPTY`` if *data* is empty, ``INVALID_DIGIT`` at the first byte
        that is not a digit of *radix*, ``POS_OVERFLOW`` if the value
        exceeds *maximum* and *saturating* is ``False``.

    Examples
    --------
    >>> parse_unsigned(memoryview(b"ff"), 16, 255)
    255
    >>> parse_unsigned(memoryview(b"256"), 10, 255, saturating=True)
    255
    """
    if len(data) == 0:
        raise ParseError(ParseErrorKind.EMPTY)

    mul_limit = maximum // radix
    value = 0
    for byte in data:
        digit = digit_value(byte, radix)
        if digit is None:
            raise ParseError(ParseErrorKind.INVALID_DIGIT)
        if value > mul_limit:
            break
        value *= radix
        if value > maximum - digit:
            break
        value += digit
    else:
        return value

    if saturating:
        logger.debug("Magnitude overflowed %d; clamped.", maximum)
        return maximum
    raise ParseError(ParseErrorKind.POS_OVERFLOW)
