#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the unsigned and signed parsing cores

Exercises the parsers directly with explicit bounds, covering
accumulation, overflow checks at every width, the two's-complement
boundary, overflow reclassification, and the saturation short-circuit.
"""

from __future__ import annotations

import pytest

from btoi.exceptions import ParseError, ParseErrorKind
from btoi.parsers.signed import parse_signed, split_sign
from btoi.parsers.unsigned import parse_unsigned

U8_MAX = 255
I8_MIN, I8_MAX = -128, 127


def _view(data: bytes) -> memoryview:
    return memoryview(data)


def _kind(excinfo) -> ParseErrorKind:
    return excinfo.value.kind


# -----------------------------------------------------------------------
# Unsigned
# -----------------------------------------------------------------------

class TestParseUnsigned:
    """Magnitude accumulation under an explicit bound"""

    def test_decimal(self) -> None:
        assert parse_unsigned(_view(b"123"), 10, U8_MAX) == 123

    def test_leading_zeros(self) -> None:
        assert parse_unsigned(_view(b"000000000000000042"), 10, U8_MAX) == 42

    def test_hex_mixed_case(self) -> None:
        assert parse_unsigned(_view(b"fF"), 16, U8_MAX) == 255

    def test_exact_maximum(self) -> None:
        assert parse_unsigned(_view(b"255"), 10, U8_MAX) == U8_MAX

    def test_overflow_on_add(self) -> None:
        # 25 * 10 fits, + 6 does not
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b"256"), 10, U8_MAX)
        assert _kind(excinfo) is ParseErrorKind.POS_OVERFLOW

    def test_overflow_on_multiply(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b"2600"), 10, U8_MAX)
        assert _kind(excinfo) is ParseErrorKind.POS_OVERFLOW

    def test_empty(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b""), 10, U8_MAX)
        assert _kind(excinfo) is ParseErrorKind.EMPTY

    def test_sign_is_not_a_digit(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b"+1"), 10, U8_MAX)
        assert _kind(excinfo) is ParseErrorKind.INVALID_DIGIT

    def test_first_invalid_byte_wins(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b"1x99999999999"), 10, U8_MAX)
        assert _kind(excinfo) is ParseErrorKind.INVALID_DIGIT

    def test_saturates(self) -> None:
        assert parse_unsigned(_view(b"99999"), 10, U8_MAX, saturating=True) == U8_MAX

    def test_saturating_keeps_invalid_digit(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b"12z"), 10, U8_MAX, saturating=True)
        assert _kind(excinfo) is ParseErrorKind.INVALID_DIGIT

    def test_saturating_keeps_empty(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b""), 10, U8_MAX, saturating=True)
        assert _kind(excinfo) is ParseErrorKind.EMPTY


class TestSaturationShortCircuit:
    """Bytes after the overflow point are never examined"""

    def test_trailing_garbage_ignored_when_saturating(self) -> None:
        assert parse_unsigned(_view(b"999x"), 10, U8_MAX, saturating=True) == U8_MAX

    def test_trailing_garbage_not_reached_when_checked(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b"999x"), 10, U8_MAX)
        assert _kind(excinfo) is ParseErrorKind.POS_OVERFLOW

    def test_garbage_before_overflow_still_reported(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_unsigned(_view(b"9x99"), 10, U8_MAX, saturating=True)
        assert _kind(excinfo) is ParseErrorKind.INVALID_DIGIT


# -----------------------------------------------------------------------
# Sign handling
# -----------------------------------------------------------------------

class TestSplitSign:
    """Optional leading sign detection"""

    @pytest.mark.parametrize(
        "data, negative, rest",
        [
            (b"-5", True, b"5"),
            (b"+5", False, b"5"),
            (b"5", False, b"5"),
            (b"-", True, b""),
            (b"+", False, b""),
            (b"", False, b""),
            (b"--5", True, b"-5"),
        ],
    )
    def test_split(self, data: bytes, negative: bool, rest: bytes) -> None:
        got_negative, got_rest = split_sign(_view(data))
        assert got_negative is negative
        assert bytes(got_rest) == rest


# -----------------------------------------------------------------------
# Signed
# -----------------------------------------------------------------------

class TestParseSigned:
    """Signed mapping over an int8 range"""

    def _parse(self, data: bytes, radix: int = 10, saturating: bool = False) -> int:
        return parse_signed(_view(data), radix, I8_MIN, I8_MAX, saturating=saturating)

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"0", 0),
            (b"-0", 0),
            (b"+0", 0),
            (b"42", 42),
            (b"+42", 42),
            (b"-42", -42),
            (b"127", I8_MAX),
            (b"-127", -127),
            (b"-128", I8_MIN),
        ],
    )
    def test_in_range(self, data: bytes, expected: int) -> None:
        assert self._parse(data) == expected

    def test_binary_negative(self) -> None:
        assert self._parse(b"-101010", radix=2) == -42

    @pytest.mark.parametrize("data", [b"", b"+", b"-"])
    def test_empty(self, data: bytes) -> None:
        with pytest.raises(ParseError) as excinfo:
            self._parse(data)
        assert _kind(excinfo) is ParseErrorKind.EMPTY

    def test_double_sign_is_invalid(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            self._parse(b"--1")
        assert _kind(excinfo) is ParseErrorKind.INVALID_DIGIT

    def test_one_past_maximum(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            self._parse(b"128")
        assert _kind(excinfo) is ParseErrorKind.POS_OVERFLOW

    def test_one_past_minimum(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            self._parse(b"-129")
        assert _kind(excinfo) is ParseErrorKind.NEG_OVERFLOW

    def test_unsigned_overflow_reclassified_positive(self) -> None:
        # 256 overflows the uint8 magnitude itself
        with pytest.raises(ParseError) as excinfo:
            self._parse(b"+256")
        assert _kind(excinfo) is ParseErrorKind.POS_OVERFLOW

    def test_unsigned_overflow_reclassified_negative(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            self._parse(b"-256")
        assert _kind(excinfo) is ParseErrorKind.NEG_OVERFLOW

    def test_invalid_digit_passes_through(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            self._parse(b"-1a")
        assert _kind(excinfo) is ParseErrorKind.INVALID_DIGIT

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"128", I8_MAX),
            (b"99999", I8_MAX),
            (b"-129", I8_MIN),
            (b"-99999", I8_MIN),
            (b"-128", I8_MIN),
            (b"5", 5),
        ],
    )
    def test_saturating(self, data: bytes, expected: int) -> None:
        assert self._parse(data, saturating=True) == expected

    def test_saturating_keeps_empty(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            self._parse(b"-", saturating=True)
        assert _kind(excinfo) is ParseErrorKind.EMPTY

    def test_saturating_short_circuit(self) -> None:
        assert self._parse(b"-9999!", saturating=True) == I8_MIN

    def test_saturating_scans_magnitude_within_unsigned_width(self) -> None:
        # 200 fits uint8, so the scan reaches the trailing byte
        with pytest.raises(ParseError) as excinfo:
            self._parse(b"200!", saturating=True)
        assert _kind(excinfo) is ParseErrorKind.INVALID_DIGIT
