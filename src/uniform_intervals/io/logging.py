"""Define utility functions to simplify logging to the console."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER_NAME = "uniform_intervals"
"""Name of the logger that is the parent of all loggers in this package."""

logger = logging.getLogger(__name__)
console = Console(stderr=True)


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Route the package's log messages to the console through a Rich handler.

    Repeated calls only update the logging level; the handler is installed once.

    :param level: Minimum level of messages that are output (default: INFO)
    :return: Package-level logger that was configured
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False))
    package_logger.setLevel(level)
    return package_logger


def log_info(message: str) -> None:
    """Log the given string at the INFO level."""
    logger.info(message)
