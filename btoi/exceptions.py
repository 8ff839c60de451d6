#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the btoi package

Input-data failures raised by btoi inherit from :class:`BtoiError`, so a
single ``except`` clause catches every malformed or out-of-range buffer.
Programming errors are kept out of that tree on purpose: an out-of-range
radix raises :class:`InvalidRadixError`, a plain ``ValueError``.

Exception Hierarchy
-------------------
::

    BtoiError
    └── ParseError          # Empty, invalid digit, or overflow
                            #   (see ParseError.kind)

    ValueError
    └── InvalidRadixError   # Radix outside [2, 36]
"""

from __future__ import annotations

import enum

from btoi.utils.constants import (
    MAX_RADIX,
    MIN_RADIX,
    MSG_EMPTY,
    MSG_INVALID_DIGIT,
    MSG_NEG_OVERFLOW,
    MSG_POS_OVERFLOW,
)


class ParseErrorKind(enum.Enum):
    """Closed set of reasons a byte buffer fails to parse"""

    EMPTY = MSG_EMPTY
    INVALID_DIGIT = MSG_INVALID_DIGIT
    POS_OVERFLOW = MSG_POS_OVERFLOW
    NEG_OVERFLOW = MSG_NEG_OVERFLOW

    def __str__(self) -> str:
        return self.value


class BtoiError(Exception):
    """Base exception for all btoi input errors

    Catching ``BtoiError`` catches any failure caused by the bytes being
    parsed.  Misuse of the API (wrong argument types, unsupported radix)
    surfaces as standard ``TypeError`` / ``ValueError`` instead.
    """


class ParseError(BtoiError):
    """Raised when a byte buffer cannot be converted to an integer

    The error carries nothing but its :attr:`kind`; two errors with the
    same kind compare equal, which keeps assertions in calling code
    simple.

    Parameters
    ----------
    kind : ParseErrorKind
        Why parsing failed.

    Examples
    --------
    >>> err = ParseError(ParseErrorKind.EMPTY)
    >>> str(err)
    'cannot parse integer from empty string'
    >>> err == ParseError(ParseErrorKind.EMPTY)
    True
    """

    def __init__(self, kind: ParseErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name})"

    def __reduce__(self):
        return (type(self), (self.kind,))


class InvalidRadixError(ValueError):
    """Raised when a radix outside [2, 36] reaches a parse entry point

    This is a caller bug, not bad input data, and is deliberately not a
    :class:`BtoiError`: code that recovers from malformed buffers must not
    silently swallow it.

    Parameters
    ----------
    radix : int
        The rejected radix.
    """

    def __init__(self, radix: int) -> None:
        super().__init__(
            f"radix must lie in the range [{MIN_RADIX}, {MAX_RADIX}], got {radix}"
        )
        self.radix = radix
