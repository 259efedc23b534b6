"""Shared pytest fixtures for salestax tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_basket(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Write basket lines to a file under tmp_path and return its path."""

    def _write(lines: list[str], name: str = "basket.txt") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
