"""Shared test fixtures and configuration."""

from __future__ import annotations

import contextlib
import io
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from rich.console import Console

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Set default timeout for all tests."""
    for item in items:
        with contextlib.suppress(AttributeError):
            item.add_marker(pytest.mark.timeout(3))


@pytest.fixture
def mock_console() -> Console:
    """Provide a console that writes to a StringIO for testing."""
    return Console(file=io.StringIO(), width=200, force_terminal=False)


@pytest.fixture
def folders(tmp_path: Path) -> dict[str, Path]:
    """Create a few real folders, two of them sharing the basename ``app``."""
    paths = {
        "x_app": tmp_path / "x" / "app",
        "y_app": tmp_path / "y" / "app",
        "docs": tmp_path / "My Docs!!",
    }
    for path in paths.values():
        path.mkdir(parents=True)
    return paths


@pytest.fixture
def folders_file(tmp_path: Path, folders: dict[str, Path]) -> Path:
    """A folder list file referencing the ``folders`` fixture."""
    content = "\n".join(
        [
            str(folders["x_app"]),
            "",
            f"  {folders['y_app']}  ",
            f"docs: {folders['docs']}",
        ],
    )
    path = tmp_path / "work.txt"
    path.write_text(content + "\n")
    return path


@pytest.fixture
def installed_shells() -> Iterator[None]:
    """Pretend every supported shell is installed."""
    with patch("folderator.shells.base.shutil.which", side_effect=lambda cmd: f"/usr/bin/{cmd}"):
        yield
