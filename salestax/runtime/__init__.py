"""Runtime infrastructure for salestax.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Basket input reading via read_basket_lines(), read_basket_stream()

Usage:
    from salestax.runtime import get_logger, read_basket_lines

    logger = get_logger(__name__)
    lines = read_basket_lines(Path("basket.txt"))
"""

from salestax.runtime.basket_source import read_basket_lines, read_basket_stream
from salestax.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Input
    "read_basket_lines",
    "read_basket_stream",
]
