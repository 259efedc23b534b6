"""Tax rate and rounding configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxRules:
    """Rates in whole percentage points and the rounding unit in cents.

    - Basic sales tax applies to all goods except exempt items.
    - Import duty applies to all imported goods, with no exemptions.
    - Tax amounts are rounded up to a multiple of ``rounding_unit_cents``.
    """

    basic_rate_percent: int = 10
    import_duty_percent: int = 5
    rounding_unit_cents: int = 5


STANDARD_TAX_RULES = TaxRules()
