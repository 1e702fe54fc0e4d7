"""Logging setup for the lastmod command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from lastmod.config import LoggingSettings

PACKAGE_LOGGER = "lastmod"

stderr_console = Console(stderr=True)


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Route package diagnostics to stderr through Rich.

    Warnings are always shown; ``settings.verbose`` lowers the threshold to
    debug output.

    Args:
        settings: Logging options resolved from the configuration.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=stderr_console, show_path=False, show_time=settings.verbose)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if settings.verbose else logging.WARNING)
    return logger


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
