"""Logging setup for the command line tool."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """
    Route log records through rich on stderr.

    Args:
        level: Log level name used when not verbose
        verbose: Force DEBUG output
    """
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
