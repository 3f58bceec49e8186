"""Tests for the temporary shell session."""

from __future__ import annotations

import os
import stat
import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from folderator.core.aliases import AliasBinding
from folderator.core.errors import SessionError
from folderator.session import (
    cleanup_session_dir,
    create_session_dir,
    run_session,
    run_shell,
)
from folderator.shells.bash import Bash
from folderator.shells.zsh import Zsh

BINDINGS = [AliasBinding("go-app", "/x/app")]


def _which(cmd: str) -> str:
    return f"/usr/bin/{cmd}"


class TestCreateSessionDir:
    """Tests for create_session_dir."""

    def test_writes_rc_file(self) -> None:
        """The rc file is written into a fresh folderator-* directory."""
        session_dir = create_session_dir(Zsh(), BINDINGS, "work.txt")
        try:
            assert session_dir.name.startswith("folderator-")
            rc = (session_dir / ".zshrc").read_text()
            assert "alias go-app=" in rc
        finally:
            cleanup_session_dir(session_dir)

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_rc_file_is_private(self) -> None:
        """Only the owner can read the rc file."""
        session_dir = create_session_dir(Bash(), BINDINGS, "work.txt")
        try:
            mode = stat.S_IMODE((session_dir / ".bashrc").stat().st_mode)
            assert mode == 0o600
        finally:
            cleanup_session_dir(session_dir)

    def test_mkdtemp_failure(self) -> None:
        """A temp directory failure becomes a SessionError."""
        with (
            patch("folderator.session.tempfile.mkdtemp", side_effect=OSError("disk full")),
            pytest.raises(SessionError, match="Error creating temporary environment: disk full"),
        ):
            create_session_dir(Zsh(), BINDINGS, "work.txt")

    def test_write_failure_removes_directory(self, tmp_path: Path) -> None:
        """A failed write does not leave the directory behind."""
        session_dir = tmp_path / "folderator-test"
        session_dir.mkdir()
        shell = MagicMock(rc_filename=".zshrc")
        shell.render_rc.side_effect = PermissionError("denied")
        with (
            patch("folderator.session.tempfile.mkdtemp", return_value=str(session_dir)),
            pytest.raises(SessionError, match="denied"),
        ):
            create_session_dir(shell, BINDINGS, "work.txt")
        assert not session_dir.exists()


class TestCleanup:
    """Tests for cleanup_session_dir."""

    def test_removes_directory(self, tmp_path: Path) -> None:
        """The directory and its contents are removed."""
        session_dir = tmp_path / "session"
        session_dir.mkdir()
        (session_dir / ".zshrc").write_text("x")
        cleanup_session_dir(session_dir)
        assert not session_dir.exists()

    def test_missing_directory_is_fine(self, tmp_path: Path) -> None:
        """Cleaning up twice is not an error."""
        cleanup_session_dir(tmp_path / "gone")

    def test_failure_only_warns(self, tmp_path: Path) -> None:
        """A failed removal is reported as a warning."""
        with (
            patch("folderator.session.shutil.rmtree", side_effect=OSError("busy")),
            patch("folderator.session._warn") as mock_warn,
        ):
            cleanup_session_dir(tmp_path)
        mock_warn.assert_called_once()
        assert "Failed to cleanup temporary directory" in mock_warn.call_args[0][0]


class TestRunShell:
    """Tests for run_shell and run_session."""

    def test_runs_shell_with_env(self, tmp_path: Path) -> None:
        """The shell runs with the session environment and its exit code is returned."""
        completed = subprocess.CompletedProcess(args=[], returncode=3)
        with (
            patch("folderator.shells.base.shutil.which", side_effect=_which),
            patch("folderator.session.subprocess.run", return_value=completed) as mock_run,
        ):
            code = run_shell(Zsh(), tmp_path, "work.txt", {"HOME": "/home/me"})

        assert code == 3
        args, kwargs = mock_run.call_args
        assert args[0] == ["/usr/bin/zsh", "-i"]
        assert kwargs["env"]["ZDOTDIR"] == str(tmp_path)
        assert kwargs["env"]["HOME"] == "/home/me"
        assert kwargs["check"] is False

    def test_missing_shell(self, tmp_path: Path) -> None:
        """A shell that is not installed is a SessionError."""
        with (
            patch("folderator.shells.base.shutil.which", return_value=None),
            pytest.raises(SessionError, match="bash is not installed"),
        ):
            run_shell(Bash(), tmp_path, "work.txt")

    def test_spawn_failure(self, tmp_path: Path) -> None:
        """An OSError from spawning is a SessionError."""
        with (
            patch("folderator.shells.base.shutil.which", side_effect=_which),
            patch("folderator.session.subprocess.run", side_effect=OSError("exec format error")),
            pytest.raises(SessionError, match="Could not start zsh"),
        ):
            run_shell(Zsh(), tmp_path, "work.txt")

    def test_run_session_cleans_up(self) -> None:
        """The session directory is removed after the shell exits."""
        seen: list[Path] = []

        def fake_run(cmd: list[str], **kwargs: object) -> MagicMock:
            env = kwargs["env"]
            assert isinstance(env, dict)
            session_dir = Path(env["ZDOTDIR"])
            assert (session_dir / ".zshrc").exists()
            seen.append(session_dir)
            return MagicMock(returncode=0)

        with (
            patch("folderator.shells.base.shutil.which", side_effect=_which),
            patch("folderator.session.subprocess.run", side_effect=fake_run),
        ):
            assert run_session(Zsh(), BINDINGS, "work.txt", dict(os.environ)) == 0

        assert len(seen) == 1
        assert not seen[0].exists()

    def test_run_session_cleans_up_on_error(self) -> None:
        """The session directory is removed even when the shell cannot start."""
        with (
            patch("folderator.shells.base.shutil.which", return_value=None),
            patch("folderator.session.cleanup_session_dir") as mock_cleanup,
            pytest.raises(SessionError),
        ):
            run_session(Zsh(), BINDINGS, "work.txt")
        session_dir = mock_cleanup.call_args[0][0]
        mock_cleanup.assert_called_once()
        # Clean up for real since the cleanup was mocked
        cleanup_session_dir(session_dir)
