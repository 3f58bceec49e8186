"""Shell adapters that render the session rc file and launch the shell."""

from __future__ import annotations

from .registry import (
    detect_current_shell,
    get_all_shells,
    get_shell,
)

__all__ = [
    "detect_current_shell",
    "get_all_shells",
    "get_shell",
]
