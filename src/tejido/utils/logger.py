"""Logging helper for Tejido.

Example:
    >>> from tejido.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the ``tejido`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'tejido.mymodule'
    """
    if not (name == "tejido" or name.startswith("tejido.")):
        name = f"tejido.{name}"
    return logging.getLogger(name)
