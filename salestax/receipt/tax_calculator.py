"""Sales tax and import duty calculation.

Business rules:
  - Basic sales tax: 10% on all goods except exempt items
  - Import duty: 5% on all imported goods, no exemptions
  - Taxes are rounded up to the nearest 0.05 (5 cents)

All arithmetic is done on integer cents. Rates are scaled to basis points
(hundredths of a percent) so the ceiling division stays exact.
"""

from collections.abc import Callable
from functools import partial

from salestax.domain.item import Item
from salestax.domain.tax_rules import STANDARD_TAX_RULES, TaxRules

PERCENT_BASE = 100
BASIS_POINTS = 10_000


def combined_rate_percent(item: Item, rules: TaxRules = STANDARD_TAX_RULES) -> int:
    """Return the summed tax rate for ``item`` in whole percentage points."""
    rate = 0
    if not item.is_exempt:
        rate += rules.basic_rate_percent
    if item.is_imported:
        rate += rules.import_duty_percent
    return rate


def raw_tax_cents(price_cents: int, rate_percent: int) -> int:
    """Return ``ceil(price_cents * rate_percent / 100)`` without floats.

    Example: 1212 cents at 15% is 1500 basis points, so
    (1212 * 1500 + 9999) // 10000 == 182.
    """
    rate_basis_points = rate_percent * PERCENT_BASE
    return (price_cents * rate_basis_points + BASIS_POINTS - 1) // BASIS_POINTS


def round_up_to_unit(amount_cents: int, unit_cents: int = STANDARD_TAX_RULES.rounding_unit_cents) -> int:
    """
    Round an amount in cents up to the next multiple of ``unit_cents``.

    Values that are already a multiple are returned unchanged:
        round_up_to_unit(712) == 715
        round_up_to_unit(718) == 720
        round_up_to_unit(715) == 715
    """
    remainder = amount_cents % unit_cents
    if remainder == 0:
        return amount_cents
    return amount_cents + (unit_cents - remainder)


def tax_amount(item: Item, rules: TaxRules = STANDARD_TAX_RULES) -> int:
    """Return the rounded per-unit tax for ``item`` in cents."""
    rate = combined_rate_percent(item, rules)
    if rate == 0:
        return 0
    return round_up_to_unit(raw_tax_cents(item.price_cents, rate), rules.rounding_unit_cents)


def calculate_tax(item: Item, rules: TaxRules = STANDARD_TAX_RULES) -> int:
    """Return the per-unit price of ``item`` including tax, in cents."""
    return item.price_cents + tax_amount(item, rules)


def make_tax_calculator(rules: TaxRules = STANDARD_TAX_RULES) -> Callable[[Item], int]:
    """Bind ``rules`` into a one-argument tax function for aggregation."""
    return partial(calculate_tax, rules=rules)
