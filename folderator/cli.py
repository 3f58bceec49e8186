"""Command-line entry point for folderator."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from . import shells
from ._output import _error, _info
from .config import Settings, load_config
from .constants import DEFAULT_SHELL, EXIT_USAGE, ITERATE_FUNCTION
from .core.aliases import generate_bindings
from .core.errors import FolderatorError
from .core.folders import read_folder_lines
from .core.utils import console, setup_logging
from .session import run_session

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .core.aliases import AliasBinding

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="folderator",
    help="Quickly work in a subset of folders.",
    add_completion=False,
    rich_markup_mode="markdown",
)


def set_config_defaults(ctx: typer.Context, config_file: str | None) -> None:
    """Set the default values for the CLI based on the config file."""
    config = load_config(config_file)
    wildcard_config = config.get("defaults", {})
    command_name = ctx.command.name

    if not command_name:
        ctx.default_map = wildcard_config
        return

    command_config = config.get(command_name, {})
    ctx.default_map = {**wildcard_config, **command_config}


def _config_callback(ctx: typer.Context, value: str | None) -> str | None:
    if ctx.resilient_parsing:
        return value
    set_config_defaults(ctx, value)
    return value


def print_usage() -> None:
    """Print the short usage text shown when no folder list is given."""
    console.print("[bold blue]folderator: quickly work in a subset of folders[/bold blue]")
    console.print("[yellow]Usage: folderator <folder-list-file>[/yellow]")
    console.print(
        "[dim]    where folder-list-file : file containing list of folders (one per line)[/dim]",
    )
    console.print()
    console.print('[dim]    Use "name: /path/to/folder" for custom alias names[/dim]')
    console.print()


def print_available_commands(session_name: str, bindings: Sequence[AliasBinding]) -> None:
    """Show the aliases and helpers available in the session."""
    table = Table(title=f"📁 {escape(session_name)}", title_justify="left")
    table.add_column("Command", style="blue")
    table.add_column("Name", style="cyan")
    table.add_column("Target", style="dim", overflow="fold")

    for binding in bindings:
        name = f"({escape(binding.display_name)})" if binding.display_name else ""
        table.add_row(binding.alias, name, f"→ {escape(binding.resolved_path)}")
    table.add_row(
        f"[magenta]{ITERATE_FUNCTION}[/magenta]",
        "",
        "→ run commands across all folders",
    )

    console.print()
    console.print("[bold green]✨ Commands available:[/bold green]")
    console.print(table)
    console.print()


def _resolve_settings(shell: str | None, log_level: str, print_only: bool) -> Settings:
    if shell is None:
        detected = shells.detect_current_shell()
        shell = detected.name if detected else DEFAULT_SHELL
    try:
        return Settings(shell=shell, log_level=log_level, print_only=print_only)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        _error(f"Invalid options: {problems}")


@app.command(name="folderator")
def main(
    folders_file: Annotated[
        Path | None,
        typer.Argument(
            help="File containing list of folders (one per line, `name: /path` for custom names)",
            show_default=False,
        ),
    ] = None,
    shell: Annotated[
        str | None,
        typer.Option(
            "--shell",
            "-s",
            help="Shell to launch (zsh or bash). Defaults to the config file, then your login shell if supported, else zsh.",
            show_default=False,
        ),
    ] = None,
    print_only: Annotated[
        bool,
        typer.Option("--print", help="Print the generated shell config instead of starting a shell"),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (debug, info, warning, error)"),
    ] = "warning",
    config_file: Annotated[
        str | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file",
            is_eager=True,
            callback=_config_callback,
        ),
    ] = None,
) -> None:
    """Start a shell with a `go-<name>` alias for every listed folder.

    Inside the shell, `iterate <command>` runs a command in every folder and
    plain `iterate` opens a subshell in each one in turn.
    """
    if folders_file is None:
        print_usage()
        raise typer.Exit(EXIT_USAGE)

    settings = _resolve_settings(shell, log_level, print_only)
    setup_logging(settings.log_level)
    logger.debug("Config file: %s", config_file)

    adapter = shells.get_shell(settings.shell)
    if adapter is None:
        _error(f"Unsupported shell: {settings.shell}")
    session_name = folders_file.name

    try:
        lines = read_folder_lines(folders_file)
        bindings = generate_bindings(lines, Path.cwd())
    except FolderatorError as e:
        _error(str(e))

    if settings.print_only:
        typer.echo(adapter.render_rc(bindings, session_name), nl=False)
        return

    if not adapter.is_available():
        _error(f"{adapter.name} is not installed")

    print_available_commands(session_name, bindings)
    _info(f"Starting {adapter.name} (exit to return)")
    try:
        exit_code = run_session(adapter, bindings, session_name, os.environ)
    except FolderatorError as e:
        _error(str(e))

    if exit_code < 0:
        # Killed by a signal
        exit_code = 128 - exit_code
    if exit_code:
        raise typer.Exit(exit_code)


def run() -> None:
    """Console script entry point."""
    app()
