#!/usr/bin/env python3
"""Command-line entrypoint: print a taxed receipt for a basket file."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from salestax.application.receipt import ReceiptRequest, ReceiptResult, build_receipt, run_receipt
from salestax.runtime import get_logger, read_basket_stream, set_log_level

logger = get_logger(__name__)

STDIN_SOURCE = "-"


def _print_error(error: str) -> None:
    for line in error.splitlines():
        print(line, file=sys.stderr)


def _run_stdin() -> ReceiptResult:
    try:
        lines = read_basket_stream(sys.stdin)
    except (OSError, UnicodeDecodeError) as exc:
        return ReceiptResult(status="read_error", error=f"Failed to read standard input: {exc}")
    return build_receipt(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="salestax",
        description="Print a receipt with sales tax and import duty for a basket file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format, one purchase per line:
  <quantity> <name> at <price>

Example:
  2 book at 12.49
  1 imported bottle of perfume at 47.50
""",
    )
    parser.add_argument("input", help=f"Basket file to read ('{STDIN_SOURCE}' for standard input)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.input == STDIN_SOURCE:
        result = _run_stdin()
    else:
        result = run_receipt(ReceiptRequest(input_path=Path(args.input)))

    if result.status != "ok":
        assert result.error is not None
        logger.debug("Receipt failed with status %s", result.status)
        _print_error(result.error)
        return 1

    assert result.text is not None
    print(result.text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
