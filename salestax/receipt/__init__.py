"""Receipt computation: line parsing, tax calculation, aggregation and rendering."""

from salestax.receipt.aggregator import aggregate
from salestax.receipt.formatter import format_cents, render
from salestax.receipt.line_parser import parse_all, parse_line
from salestax.receipt.tax_calculator import (
    calculate_tax,
    combined_rate_percent,
    make_tax_calculator,
    raw_tax_cents,
    round_up_to_unit,
    tax_amount,
)

__all__ = [
    "parse_line",
    "parse_all",
    "calculate_tax",
    "combined_rate_percent",
    "make_tax_calculator",
    "raw_tax_cents",
    "round_up_to_unit",
    "tax_amount",
    "aggregate",
    "format_cents",
    "render",
]
