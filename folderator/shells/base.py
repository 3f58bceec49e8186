"""Base class for shell adapters."""

from __future__ import annotations

import os
import shlex
import shutil
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from folderator.constants import DIRS_VARIABLE, ITERATE_FUNCTION, PROMPT_VARIABLE

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from folderator.core.aliases import AliasBinding

# Exported to the session so nested shells can find the rc file again
SESSION_DIR_VARIABLE = "FOLDERATOR_SESSION_DIR"

_ITERATE_TEMPLATE = """\
{function}() {{
  local old_prompt="${prompt_var}"
  if (( $# == 0 )); then
    for d in "${{{dirs_var}[@]}}"; do
      export {prompt_var}={iterate_prompt}
      (cd "$d" && printf '\\033[1;34m📁 Iterating subshell in %s (exit to continue)\\033[0m\\n' "$d" && {subshell})
    done
  else
    local cmd="$*"
    for d in "${{{dirs_var}[@]}}"; do
      printf '\\033[1;34m=== %s ===\\033[0m\\n' "$d"
      (cd "$d" && eval "$cmd")
    done
  fi
  export {prompt_var}="$old_prompt"
}}
"""


class Shell(ABC):
    """Abstract base class for shell adapters."""

    # Display name for the shell
    name: str

    # Executable to launch
    command: str

    # Name of the rc file written into the session directory
    rc_filename: str

    def detect(self) -> bool:
        """Check if this is the user's login shell (from ``$SHELL``)."""
        login_shell = os.environ.get("SHELL", "")
        return Path(login_shell).name == self.command

    def is_available(self) -> bool:
        """Check if this shell is installed and available."""
        return shutil.which(self.command) is not None

    def get_executable(self) -> str | None:
        """Get the path to the executable."""
        return shutil.which(self.command)

    @property
    def user_rc(self) -> str:
        """The user's own rc file, sourced at the end of the session rc."""
        return f"$HOME/{self.rc_filename}"

    @abstractmethod
    def subshell_command(self) -> str:
        """Shell code that starts a nested interactive session with the aliases."""

    @abstractmethod
    def launch_command(self, session_dir: Path) -> list[str]:
        """Return the command that starts the interactive session.

        Raises:
            RuntimeError: If the shell is not installed.

        """

    def launch_env(
        self,
        session_dir: Path,
        session_name: str,
        base_env: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Return the environment for the session: the caller's plus our variables."""
        env = dict(os.environ if base_env is None else base_env)
        env[SESSION_DIR_VARIABLE] = str(session_dir)
        env[PROMPT_VARIABLE] = f"${session_name}>"
        return env

    def _require_executable(self) -> str:
        exe = self.get_executable()
        if exe is None:
            msg = f"{self.name} is not installed"
            raise RuntimeError(msg)
        return exe

    def render_rc(
        self,
        bindings: Sequence[AliasBinding],
        session_name: str,
        generated_at: datetime | None = None,
    ) -> str:
        """Render the rc file that defines the aliases and the iterate function."""
        generated_at = generated_at or datetime.now(UTC)
        lines = [
            f"# --- folderator generated {self.rc_filename} ---",
            f"# Generated: {generated_at.isoformat(timespec='seconds')}",
            "",
            f"{DIRS_VARIABLE}=(",
        ]
        lines.extend(f"  {shlex.quote(b.resolved_path)}" for b in bindings)
        lines.extend((")", ""))

        for binding in bindings:
            cd_command = f"cd {shlex.quote(binding.resolved_path)}"
            lines.append(f"alias {binding.alias}={shlex.quote(cd_command)}")
        lines.append("")

        lines.append(
            _ITERATE_TEMPLATE.format(
                function=ITERATE_FUNCTION,
                prompt_var=PROMPT_VARIABLE,
                dirs_var=DIRS_VARIABLE,
                iterate_prompt=shlex.quote(f"${session_name}-(itr)>"),
                subshell=self.subshell_command(),
            ),
        )

        lines.extend(
            (
                f'if [ -f "{self.user_rc}" ]; then',
                f'  source "{self.user_rc}"',
                "fi",
                "",
            ),
        )
        return "\n".join(lines)
