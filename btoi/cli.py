#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
btoi command-line interface

Parses each command-line argument as raw bytes and prints one integer
per line.  Arguments are converted with :func:`os.fsencode`, so the
bytes seen by the parser are exactly the bytes the shell passed in.

Usage
-----
::

    # Signed decimal (default)
    python -m btoi.cli -- -42 17

    # Unsigned hexadecimal into 32 bits
    python -m btoi.cli --unsigned --radix 16 --dtype uint32 ff DEADBEEF

    # Clamp instead of failing on overflow
    python -m btoi.cli --saturating --dtype int8 300 -300

    # Keep going after a malformed value
    python -m btoi.cli --continue-on-error 1 x 3

Exit status is 0 when every value parsed, 1 otherwise.  Malformed values
are reported on stderr as ``VALUE: reason``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from btoi.api import (
    btoi_radix,
    btoi_saturating_radix,
    btou_radix,
    btou_saturating_radix,
)
from btoi.exceptions import ParseError
from btoi.utils.constants import DEFAULT_RADIX, MAX_RADIX, MIN_RADIX
from btoi.utils.validation import resolve_dtype, validate_radix

logger = logging.getLogger("btoi.cli")

# ---------------------------------------------------------------------------
# Mode configuration
# ---------------------------------------------------------------------------

PARSE_MODES = {
    # (signed, saturating) -> entry point
    (True, False): btoi_radix,
    (True, True): btoi_saturating_radix,
    (False, False): btou_radix,
    (False, True): btou_saturating_radix,
}


def _radix_arg(text: str) -> int:
    """argparse type for ``--radix``."""
    # int() and InvalidRadixError both raise ValueError
    try:
        return validate_radix(int(text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"must be an integer in [{MIN_RADIX}, {MAX_RADIX}], got {text!r}"
        ) from exc


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

def cmd_parse(args) -> int:
    """Parse every value in *args* and print the results."""
    signed = not args.unsigned
    parse = PARSE_MODES[(signed, args.saturating)]
    logger.debug(
        "Mode: %s %s, radix %d, dtype %s",
        "signed" if signed else "unsigned",
        "saturating" if args.saturating else "checked",
        args.radix,
        args.dtype,
    )

    failures = 0
    for value in args.values:
        try:
            result = parse(os.fsencode(value), args.radix, dtype=args.dtype)
        except ParseError as exc:
            print(f"{value}: {exc}", file=sys.stderr)
            failures += 1
            if not args.continue_on_error:
                return 1
            continue
        print(int(result))

    if failures:
        logger.info("%d of %d values failed to parse", failures, len(args.values))
    return 0 if failures == 0 else 1


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="btoi",
        description="Parse integers from raw command-line bytes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    btoi -- -42 17                                  # signed decimal
    btoi --unsigned --radix 16 --dtype uint32 ff    # unsigned hex, 32 bits
    btoi --saturating --dtype int8 300 -- -300      # clamp to [-128, 127]
    btoi --continue-on-error 1 x 3                  # report x, keep going
""",
    )

    parser.add_argument(
        "values",
        nargs="+",
        help="Values to parse",
    )
    parser.add_argument(
        "--radix", "-r",
        type=_radix_arg,
        default=DEFAULT_RADIX,
        help=f"Radix in [{MIN_RADIX}, {MAX_RADIX}] (default: {DEFAULT_RADIX})",
    )
    parser.add_argument(
        "--dtype", "-t",
        default=None,
        help="NumPy integer type of the result (default: platform word size)",
    )
    parser.add_argument(
        "--unsigned", "-u",
        action="store_true",
        help="Parse unsigned values (no sign byte allowed)",
    )
    parser.add_argument(
        "--saturating", "-s",
        action="store_true",
        help="Clamp overflowing values to the type's range instead of failing",
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Continue with the remaining values after a failure",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        args.dtype = resolve_dtype(args.dtype, signed=not args.unsigned)
    except TypeError as exc:
        parser.error(f"argument --dtype: {exc}")

    return cmd_parse(args)


if __name__ == "__main__":
    sys.exit(main())
