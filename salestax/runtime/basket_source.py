"""Read basket lines from files and streams."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO


def read_basket_stream(stream: TextIO) -> list[str]:
    """Return the lines of a text stream without line terminators."""
    return stream.read().splitlines()


def read_basket_lines(path: Path) -> list[str]:
    """Return the lines of a UTF-8 basket file without line terminators.

    A trailing newline does not produce an extra empty line; blank lines in
    the middle of the file are kept so the parser can report them.
    """
    if not path.exists():
        raise FileNotFoundError(f"Basket file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return read_basket_stream(f)
