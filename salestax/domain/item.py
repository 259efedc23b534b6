"""Item value object for a single basket purchase."""

from dataclasses import dataclass

from salestax.domain.errors import ItemValidationError

IMPORTED_MARKER = "imported"

# Books, food and medical products are exempt from basic sales tax.
EXEMPT_KEYWORDS = frozenset({"book", "chocolate", "chocolates", "pills", "food", "medicine"})


def _is_int(value: object) -> bool:
    # Money and counts are whole numbers; bool is excluded.
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Item:
    """A validated purchase: quantity, name and unit price in cents."""

    quantity: int
    name: str
    price_cents: int

    def __post_init__(self) -> None:
        if not _is_int(self.quantity) or self.quantity <= 0:
            raise ItemValidationError("Quantity must be positive")
        if not _is_int(self.price_cents) or self.price_cents < 0:
            raise ItemValidationError("Price must be non-negative")
        if self.name is None or not self.name.strip():
            raise ItemValidationError("Name cannot be blank")

    @property
    def is_imported(self) -> bool:
        return IMPORTED_MARKER in self.name

    @property
    def is_exempt(self) -> bool:
        return any(keyword in self.name for keyword in EXEMPT_KEYWORDS)
