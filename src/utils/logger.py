"""
Logging setup for the quiz engine.

Modules log through ``logging.getLogger(__name__)``; this helper attaches a
console handler to the package logger once, using ``config.logging``.
"""

import logging
from typing import Optional

try:
    from ..config import config
except ImportError:
    from src.config import config


PACKAGE_LOGGER = __name__.split(".")[0]


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name (defaults to config.logging.log_level)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or config.logging.log_level).upper())

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(config.logging.log_format))
    logger.addHandler(console_handler)

    return logger
