"""Logging configuration for deploy-details."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "deploy_details"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger to write diagnostics to stderr.

    Stdout is reserved for resolved addresses, so every record goes to a
    stderr console.

    Args:
        verbose: Log DEBUG records instead of warnings and errors only

    Returns:
        The configured package logger
    """
    log_level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.propagate = False

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger
