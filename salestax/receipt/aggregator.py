"""Fold taxed items into receipt totals."""

from collections.abc import Callable, Iterable

from salestax.domain.item import Item
from salestax.domain.receipt import ReceiptEntry, ReceiptTotals


def aggregate(items: Iterable[Item], tax_fn: Callable[[Item], int]) -> ReceiptTotals:
    """
    Compute per-line and grand totals.

    ``tax_fn`` returns the per-unit price including tax; line totals and line
    taxes are multiplied by quantity. Entries keep the input order.
    """
    entries: list[ReceiptEntry] = []
    for item in items:
        taxed_price_cents = tax_fn(item)
        entries.append(
            ReceiptEntry(
                name=item.name,
                quantity=item.quantity,
                total_cost_cents=taxed_price_cents * item.quantity,
                tax_amount_cents=(taxed_price_cents - item.price_cents) * item.quantity,
            )
        )

    return ReceiptTotals(
        entries=tuple(entries),
        total_sales_taxes_cents=sum(entry.tax_amount_cents for entry in entries),
        total_price_cents=sum(entry.total_cost_cents for entry in entries),
    )
