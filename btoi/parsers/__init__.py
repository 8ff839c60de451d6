#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Core byte-sequence parsers

This sub-package holds the two parsing layers behind the public API:

* :func:`~btoi.parsers.unsigned.parse_unsigned` — magnitude accumulation
  with checked or saturating overflow.
* :func:`~btoi.parsers.signed.parse_signed` — sign detection and mapping of
  the magnitude into the signed range.

Both operate on pre-validated arguments (byte view, radix, bounds); the
facade in :mod:`btoi.api` performs validation.
"""

from __future__ import annotations

from btoi.parsers.unsigned import parse_unsigned
from btoi.parsers.signed import parse_signed, split_sign

__all__ = ["parse_unsigned", "parse_signed", "split_sign"]
