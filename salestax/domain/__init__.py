"""Core domain models for salestax.

This module provides the core data models used throughout the project:
- Item: Validated basket purchase
- ReceiptEntry, ReceiptTotals: Computed receipt models
- TaxRules: Tax rate and rounding configuration
- Input error taxonomy

Usage:
    from salestax.domain import Item, ReceiptTotals, STANDARD_TAX_RULES
"""

from salestax.domain.errors import (
    BatchParseError,
    ItemValidationError,
    LineParseError,
    ReceiptInputError,
)
from salestax.domain.item import EXEMPT_KEYWORDS, IMPORTED_MARKER, Item
from salestax.domain.receipt import ReceiptEntry, ReceiptTotals
from salestax.domain.tax_rules import STANDARD_TAX_RULES, TaxRules

__all__ = [
    "Item",
    "EXEMPT_KEYWORDS",
    "IMPORTED_MARKER",
    "ReceiptEntry",
    "ReceiptTotals",
    "TaxRules",
    "STANDARD_TAX_RULES",
    "ReceiptInputError",
    "ItemValidationError",
    "LineParseError",
    "BatchParseError",
]
