#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for digit classification and argument validation

This sub-package centralises constants, the byte-to-digit mapping, and
the precondition checks so that the signed and unsigned parsers share a
single definition of each.
"""

from __future__ import annotations
