"""Minimal logging utilities for inistream.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from inistream.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning settings.ini")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "inistream." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'inistream.mymodule'
    """
    if not (name == "inistream" or name.startswith("inistream.")):
        name = f"inistream.{name}"
    return logging.getLogger(name)
