"""Data models for computed receipts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReceiptEntry:
    """A single line on a receipt, already multiplied by quantity."""

    name: str
    quantity: int
    total_cost_cents: int
    tax_amount_cents: int


@dataclass(frozen=True)
class ReceiptTotals:
    """Aggregated receipt data, ready for rendering."""

    entries: tuple[ReceiptEntry, ...] = ()
    total_sales_taxes_cents: int = 0
    total_price_cents: int = 0
