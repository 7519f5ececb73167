"""Minimal logging utilities for monadparse.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from monadparse.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing token stream")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "monadparse." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'monadparse.mymodule'
    """
    # Ensure monadparse prefix for consistent namespacing
    if not (name == "monadparse" or name.startswith("monadparse.")):
        name = f"monadparse.{name}"
    return logging.getLogger(name)
