"""Shared consoles and logging setup."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)


def setup_logging(log_level: str = "warning", *, console: Console | None = None) -> None:
    """Configure the root logger to use Rich.

    Args:
        log_level: Logging level (debug, info, warning, error).
        console: Optional Rich console to log to (defaults to stderr).

    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    handler = RichHandler(
        console=console or err_console,
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
