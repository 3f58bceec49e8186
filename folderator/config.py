"""Config file loading and the validated settings model."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, field_validator

from .core.utils import err_console

CONFIG_PATH = Path.home() / ".config" / "folderator" / "config.toml"
CONFIG_PATH_2 = Path("folderator-config.toml")


def _replace_dashed_keys_recursive(d: dict[str, Any]) -> dict[str, Any]:
    """Recursively replace dashed keys with underscores in a dictionary."""
    new_dict = {}
    for k, v in d.items():
        new_key = k.replace("-", "_")
        if isinstance(v, dict):
            new_dict[new_key] = _replace_dashed_keys_recursive(v)
        else:
            new_dict[new_key] = v
    return new_dict


def load_config(config_path_str: str | None = None) -> dict[str, Any]:
    """Load the TOML configuration file with dashed keys normalized."""
    if config_path_str:
        config_path = Path(config_path_str).expanduser()
    elif CONFIG_PATH.exists():
        config_path = CONFIG_PATH
    elif CONFIG_PATH_2.exists():
        config_path = CONFIG_PATH_2
    else:
        return {}

    if config_path.exists():
        try:
            with config_path.open("rb") as f:
                return _replace_dashed_keys_recursive(tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            err_console.print(
                f"[bold red]Error parsing config file {config_path}: {e}[/bold red]",
            )
            return {}

    # Report error only if an explicit path was given
    err_console.print(
        f"[bold red]Config file not found at {config_path_str}[/bold red]",
    )
    return {}


class Settings(BaseModel):
    """Validated options for one folderator run."""

    shell: Literal["zsh", "bash"]
    log_level: str = "warning"
    print_only: bool = False

    @field_validator("shell", "log_level", mode="before")
    @classmethod
    def _lowercase(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        if v not in {"debug", "info", "warning", "error", "critical"}:
            msg = f"unknown log level {v!r}"
            raise ValueError(msg)
        return v
