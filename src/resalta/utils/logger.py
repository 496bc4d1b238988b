"""Minimal logging utilities for Resalta.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from resalta.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiled %d patterns", 4)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "resalta." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'resalta.mymodule'
    """
    if not (name == "resalta" or name.startswith("resalta.")):
        name = f"resalta.{name}"
    return logging.getLogger(name)
