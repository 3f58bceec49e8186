"""Registry for shell adapters."""

from __future__ import annotations

from .base import Shell  # noqa: TC001
from .bash import Bash
from .zsh import Zsh

# All supported shells (zsh first: it is the default)
_SHELLS: list[type[Shell]] = [
    Zsh,
    Bash,
]

# Cache for shell instances
_shell_instances: dict[str, Shell] = {}


def get_all_shells() -> list[Shell]:
    """Get instances of all registered shells."""
    shells = []
    for shell_cls in _SHELLS:
        name = shell_cls.name
        if name not in _shell_instances:
            _shell_instances[name] = shell_cls()
        shells.append(_shell_instances[name])
    return shells


def detect_current_shell() -> Shell | None:
    """Detect which supported shell is the user's login shell."""
    for shell in get_all_shells():
        if shell.detect():
            return shell
    return None


def get_shell(name: str) -> Shell | None:
    """Get a shell by name."""
    name_lower = name.lower()
    for shell in get_all_shells():
        if shell.name.lower() == name_lower:
            return shell
    return None
