"""Temporary shell session: write the rc file, spawn the shell, clean up."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from folderator.constants import RC_FILE_MODE, SESSION_DIR_PREFIX
from folderator.core.errors import SessionError

from ._output import _warn

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from folderator.core.aliases import AliasBinding
    from folderator.shells.base import Shell

logger = logging.getLogger(__name__)


def create_session_dir(
    shell: Shell,
    bindings: Sequence[AliasBinding],
    session_name: str,
) -> Path:
    """Create a temporary directory holding the rendered rc file.

    Raises:
        SessionError: If the directory or the rc file cannot be written.

    """
    try:
        session_dir = Path(tempfile.mkdtemp(prefix=SESSION_DIR_PREFIX))
    except OSError as e:
        msg = f"Error creating temporary environment: {e}"
        raise SessionError(msg) from e

    rc_path = session_dir / shell.rc_filename
    try:
        fd = os.open(rc_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, RC_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(shell.render_rc(bindings, session_name))
    except OSError as e:
        cleanup_session_dir(session_dir)
        msg = f"Error creating temporary environment: {e}"
        raise SessionError(msg) from e

    logger.debug("Wrote %s", rc_path)
    return session_dir


def cleanup_session_dir(session_dir: Path) -> None:
    """Remove the session directory, warning instead of failing."""
    try:
        shutil.rmtree(session_dir)
    except FileNotFoundError:
        pass
    except OSError as e:
        _warn(f"Failed to cleanup temporary directory: {e}")


def run_shell(
    shell: Shell,
    session_dir: Path,
    session_name: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run the interactive shell and wait for it to exit.

    Returns:
        The exit code of the shell.

    Raises:
        SessionError: If the shell is not installed or cannot be started.

    """
    try:
        cmd = shell.launch_command(session_dir)
    except RuntimeError as e:
        raise SessionError(str(e)) from e

    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(  # noqa: S603
            cmd,
            env=shell.launch_env(session_dir, session_name, env),
            check=False,
        )
    except OSError as e:
        msg = f"Could not start {shell.name}: {e}"
        raise SessionError(msg) from e
    return result.returncode


def run_session(
    shell: Shell,
    bindings: Sequence[AliasBinding],
    session_name: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Prepare the session, run the shell until it exits, then clean up."""
    session_dir = create_session_dir(shell, bindings, session_name)
    try:
        return run_shell(shell, session_dir, session_name, env)
    finally:
        cleanup_session_dir(session_dir)
