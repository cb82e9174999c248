"""
Logging configuration for intervalset.

Usage:
    from intervalset.logging_config import get_logger
    logger = get_logger(__name__)
    logger.debug("Message")
"""

import logging
import sys


def setup_logging(level: int | str = logging.WARNING, force: bool = False) -> None:
    """
    Configure the ``intervalset`` package logger.

    Args:
        level: Logging level name or number (default: WARNING)
        force: If True, reconfigure even if already configured
    """
    package_logger = logging.getLogger("intervalset")

    if package_logger.handlers and not force:
        return

    if force:
        package_logger.handlers.clear()

    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name!r}")

    package_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger.addHandler(console_handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    setup_logging()

    if name.startswith("intervalset"):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"intervalset.{name}")
