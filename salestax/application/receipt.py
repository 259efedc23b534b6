"""Receipt workflow orchestration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from salestax.domain.errors import BatchParseError
from salestax.domain.receipt import ReceiptTotals
from salestax.domain.tax_rules import STANDARD_TAX_RULES, TaxRules
from salestax.receipt.aggregator import aggregate
from salestax.receipt.formatter import render
from salestax.receipt.line_parser import parse_all
from salestax.receipt.tax_calculator import make_tax_calculator
from salestax.runtime import get_logger, read_basket_lines

logger = get_logger(__name__)

ReceiptStatus = Literal[
    "ok",
    "file_not_found",
    "read_error",
    "parse_error",
]


@dataclass(frozen=True)
class ReceiptRequest:
    """Inputs for running the receipt workflow."""

    input_path: Path
    rules: TaxRules = STANDARD_TAX_RULES


@dataclass(frozen=True)
class ReceiptResult:
    """Outcome from the receipt workflow."""

    status: ReceiptStatus
    totals: ReceiptTotals | None = None
    text: str | None = None
    error: str | None = None


def build_receipt(lines: Sequence[str], rules: TaxRules = STANDARD_TAX_RULES) -> ReceiptResult:
    """Run parse -> tax -> aggregate -> render over already-read basket lines."""
    try:
        items = parse_all(lines)
    except BatchParseError as exc:
        logger.debug("Rejected basket at line %d (%s)", exc.line_number, exc.reason.kind)
        return ReceiptResult(status="parse_error", error=str(exc))

    logger.info("Parsed %d items", len(items))
    totals = aggregate(items, make_tax_calculator(rules))
    for entry in totals.entries:
        logger.debug(
            "%d x %s: total=%d tax=%d",
            entry.quantity,
            entry.name,
            entry.total_cost_cents,
            entry.tax_amount_cents,
        )

    return ReceiptResult(status="ok", totals=totals, text=render(totals))


def run_receipt(request: ReceiptRequest) -> ReceiptResult:
    """Read the basket file named by ``request`` and build its receipt."""
    try:
        lines = read_basket_lines(request.input_path)
    except FileNotFoundError as exc:
        return ReceiptResult(status="file_not_found", error=str(exc))
    except (OSError, UnicodeDecodeError) as exc:
        return ReceiptResult(
            status="read_error",
            error=f"Failed to read basket file {request.input_path}: {exc}",
        )

    logger.info("Read %d lines from %s", len(lines), request.input_path)
    return build_receipt(lines, request.rules)
