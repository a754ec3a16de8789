"""
Logging setup for the command-line tools.

Diagnostics go to stderr through a Rich handler; stdout is left for records.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "biolines"


def setup_logger(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the previous handler, so each CLI invocation
    (and each test) starts from a clean state.

    Args:
        level: Logging level for the ``biolines`` logger

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_biolines", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._biolines = True
    logger.addHandler(handler)
    return logger
