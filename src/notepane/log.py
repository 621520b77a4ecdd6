"""Logging setup for notepane."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Route the ``notepane`` loggers through a rich handler.

    Safe to call more than once; the handler is only installed the first
    time.
    """
    logger = logging.getLogger("notepane")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        for handler in logger.handlers:
            handler.setLevel(logger.level)
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        markup=False,
        rich_tracebacks=verbose,
    )
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
