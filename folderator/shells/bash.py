"""bash adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import SESSION_DIR_VARIABLE, Shell

if TYPE_CHECKING:
    from pathlib import Path


class Bash(Shell):
    """bash - loads the session rc through ``--rcfile``."""

    name = "bash"
    command = "bash"
    rc_filename = ".bashrc"

    def subshell_command(self) -> str:
        """Start a nested bash with the session rc file."""
        return f'bash --rcfile "${SESSION_DIR_VARIABLE}/{self.rc_filename}" -i'

    def launch_command(self, session_dir: Path) -> list[str]:
        """Run bash interactively with the session rc file."""
        rc_file = session_dir / self.rc_filename
        return [self._require_executable(), "--rcfile", str(rc_file), "-i"]
