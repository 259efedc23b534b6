"""Errors raised for invalid basket input."""

from __future__ import annotations


class ReceiptInputError(ValueError):
    """Base class for basket input failures."""

    kind = "input"


class ItemValidationError(ReceiptInputError):
    """An item violates a quantity, price or name invariant."""

    kind = "validation"


class LineParseError(ReceiptInputError):
    """A basket line does not follow the ``<qty> <name> at <price>`` grammar."""

    kind = "parse"


class BatchParseError(ReceiptInputError):
    """A basket line failed to parse; carries its 1-based position and text."""

    kind = "batch_parse"

    def __init__(self, line_number: int, line: str | None, reason: ReceiptInputError) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f'Invalid input file at line {line_number}!\nReason: {reason}\nLine: "{line}"')
