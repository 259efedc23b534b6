"""Parse basket text lines into Item objects.

Parsing rules:
  - The first token is the quantity, a base-10 integer made of ASCII digits
    with an optional leading "-". A leading "+" is not accepted.
  - The first "at" token separates the item name from its price.
  - Prices become integer cents by dropping the decimal point, so
    "12.49" -> 1249. The digits are taken verbatim: "5" -> 5, "5.5" -> 55.
  - A quantity or price that is not such an integer, including one too long
    to convert, is rejected with a LineParseError.

Example input lines:
  "2 imported bottle of perfume at 47.50"
  "1 book at 12.49"
"""

import re
from collections.abc import Iterable

from salestax.domain.errors import BatchParseError, LineParseError, ReceiptInputError
from salestax.domain.item import Item

SEPARATOR_TOKEN = "at"

_INTEGER_RE = re.compile(r"-?[0-9]+")


def _to_int(text: str, error_message: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise LineParseError(error_message)
    try:
        return int(text)
    except ValueError as exc:
        # Over the interpreter's integer string conversion limit.
        raise LineParseError(error_message) from exc


def _parse_quantity(token: str) -> int:
    # Non-numeric quantities are rejected rather than coerced.
    return _to_int(token, f"Invalid quantity: '{token}'")


def _parse_price_cents(price_str: str) -> int:
    return _to_int(price_str.replace(".", ""), f"Invalid price: '{price_str}'")


def parse_line(line: str | None) -> Item:
    """
    Parse a single basket line such as ``"1 book at 12.49"``.

    Raises:
        LineParseError: the line is empty, lacks "at" or a price, or has a
            non-integer quantity or price.
        ItemValidationError: the parsed values violate an Item invariant.
    """
    if line is None or not line.strip():
        raise LineParseError("Line cannot be empty")

    tokens = line.split()
    quantity = _parse_quantity(tokens[0])
    rest = tokens[1:]

    if SEPARATOR_TOKEN not in rest:
        raise LineParseError(f"Missing '{SEPARATOR_TOKEN}' in line: {line}")
    at_index = rest.index(SEPARATOR_TOKEN)

    name = " ".join(rest[:at_index])
    price_str = " ".join(rest[at_index + 1 :])
    if not price_str:
        raise LineParseError(f"Missing price in line: {line}")

    return Item(quantity=quantity, name=name, price_cents=_parse_price_cents(price_str))


def parse_all(lines: Iterable[str]) -> list[Item]:
    """
    Parse basket lines in order, stopping at the first invalid one.

    Raises:
        BatchParseError: wraps the first failure with its 1-based line number
            and the original line text.
    """
    items: list[Item] = []
    for line_number, line in enumerate(lines, 1):
        try:
            items.append(parse_line(line))
        except ReceiptInputError as exc:
            raise BatchParseError(line_number, line, exc) from exc
    return items
