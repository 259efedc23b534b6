"""Format receipt totals as plain text."""

from salestax.domain.receipt import ReceiptEntry, ReceiptTotals


def format_cents(cents: int) -> str:
    """Format an amount in cents with two decimal places (e.g. 1249 -> "12.49")."""
    sign = "-" if cents < 0 else ""
    units, fraction = divmod(abs(cents), 100)
    return f"{sign}{units}.{fraction:02d}"


def _format_entry(entry: ReceiptEntry) -> str:
    return f"{entry.quantity} {entry.name}: {format_cents(entry.total_cost_cents)}"


def render(totals: ReceiptTotals) -> str:
    """
    Render a receipt, one line per entry followed by the tax and grand totals.

    Example:
        1 book: 12.49
        1 music CD: 16.49
        Sales Taxes: 1.50
        Total: 28.98

    The returned text has no trailing newline.
    """
    lines = [_format_entry(entry) for entry in totals.entries]
    lines.append(f"Sales Taxes: {format_cents(totals.total_sales_taxes_cents)}")
    lines.append(f"Total: {format_cents(totals.total_price_cents)}")
    return "\n".join(lines)
