"""Logging configuration utilities."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """
    Configure standard logging with a Rich handler on stderr.

    Args:
        verbose: Log DEBUG messages instead of WARNING and above
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
