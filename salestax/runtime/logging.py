"""Centralized logging configuration for salestax.

Usage:
    from salestax.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Detailed debug info")
    logger.info("General info")

Environment variables:
    SALESTAX_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR). Default: WARNING
"""

import logging
import os
import sys

# Receipts go to stdout; keep stderr quiet unless asked.
DEFAULT_LOG_LEVEL = logging.WARNING

LOGGER_NAMESPACE = "salestax"

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

_logging_configured = False


def _level_from_env() -> int:
    env_level = os.environ.get("SALESTAX_LOG_LEVEL", "").upper()
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
    }
    return level_map.get(env_level, DEFAULT_LOG_LEVEL)


def configure_logging(level: int | None = None) -> None:
    """Configure the salestax namespace logger.

    Args:
        level: Log level to use. If None, reads from SALESTAX_LOG_LEVEL env var
               or uses DEFAULT_LOG_LEVEL.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = _level_from_env()

    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format))

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Module names already inside the package (``salestax.*``) are used as-is.
    """
    configure_logging()

    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the log level at runtime."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    for handler in logger.handlers:
        if level == logging.DEBUG:
            handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG))
        else:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
