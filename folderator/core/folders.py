"""Reading the folder list file and parsing its lines."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import FoldersFileError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FolderEntry:
    """One parsed line of the folder list."""

    raw_path: str
    custom_name: str | None = None


def read_folder_lines(folders_file: str | Path) -> list[str]:
    """Read the folder list and return its trimmed, non-blank lines.

    Raises:
        FoldersFileError: If the file is missing, unreadable or has no folders.

    """
    path = Path(folders_file)
    if not path.exists():
        msg = f"Folders list file not found: {folders_file}"
        raise FoldersFileError(msg)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Error reading folders file: {e}"
        raise FoldersFileError(msg) from e

    # str.splitlines() would also split on form feeds and other separators
    lines = [line.strip() for line in content.replace("\r\n", "\n").split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        msg = f"No folders found in {folders_file}"
        raise FoldersFileError(msg)

    logger.debug("Read %d folder line(s) from %s", len(lines), folders_file)
    return lines


def parse_folder_line(line: str) -> FolderEntry:
    """Parse a line of the folder list.

    A line of the form ``name: /path/to/folder`` gives the folder a custom
    alias name. Only a colon after the first character splits the line, so
    ``:nothing`` is a plain path.

    Raises:
        ParseError: If the name or the path of a named line is empty.

    """
    trimmed = line.strip()
    colon_index = trimmed.find(":")
    if colon_index > 0:
        name = trimmed[:colon_index].strip()
        path_part = trimmed[colon_index + 1 :].strip()
        if not name:
            raise ParseError(line, 'name is empty before ":"')
        if not path_part:
            raise ParseError(line, 'path is empty after ":"')
        return FolderEntry(raw_path=path_part, custom_name=name)

    return FolderEntry(raw_path=trimmed)


def resolve_path(raw: str, cwd: str | Path) -> str:
    """Return the absolute, symlink-free form of *raw* relative to *cwd*.

    Falls back to the plain absolute path when the path cannot be
    canonicalized (e.g. it does not exist). Never raises.
    """
    absolute = os.path.abspath(os.path.join(cwd, raw))
    try:
        return os.path.realpath(absolute, strict=True)
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug("Could not canonicalize %s (%s), using absolute path", absolute, e)
        return absolute
