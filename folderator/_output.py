"""Console output helpers."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.markup import escape

from folderator.constants import EXIT_USAGE
from folderator.core.utils import console, err_console


def _error(msg: str) -> NoReturn:
    """Print an error message and exit."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(msg)}")
    raise typer.Exit(EXIT_USAGE)


def _info(msg: str) -> None:
    """Print an info message."""
    console.print(f"[dim]→[/dim] {msg}")


def _warn(msg: str) -> None:
    """Print a warning message."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(msg)}")
