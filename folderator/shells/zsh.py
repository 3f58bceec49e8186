"""zsh adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Shell

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


class Zsh(Shell):
    """zsh - loads the session rc through ``ZDOTDIR``."""

    name = "zsh"
    command = "zsh"
    rc_filename = ".zshrc"

    def subshell_command(self) -> str:
        """Start a nested zsh; ``ZDOTDIR`` is inherited so the aliases are loaded again."""
        return "zsh -i"

    def launch_command(self, session_dir: Path) -> list[str]:  # noqa: ARG002
        """Run zsh interactively."""
        return [self._require_executable(), "-i"]

    def launch_env(
        self,
        session_dir: Path,
        session_name: str,
        base_env: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Point ``ZDOTDIR`` at the session directory so zsh reads our .zshrc."""
        env = super().launch_env(session_dir, session_name, base_env)
        env["ZDOTDIR"] = str(session_dir)
        return env
