"""Logging setup for the Brixie command line."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "INFO", debug: bool = False, console: Optional[Console] = None) -> None:
    """
    Route the ``brixie`` loggers through a RichHandler on stderr.

    Args:
        level: Level name for the ``brixie`` logger
        debug: Force DEBUG, which also shows HTTP request/response lines
        console: Console to log to (defaults to a stderr console)
    """
    root = logging.getLogger("brixie")
    root.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.propagate = False
