"""Exceptions raised by folderator."""

from __future__ import annotations


class FolderatorError(Exception):
    """Base class for errors reported to the user."""


class ParseError(FolderatorError):
    """A line of the folder list could not be parsed."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f'Invalid named line format: "{line}" - {reason}')


class FoldersFileError(FolderatorError):
    """The folder list file is missing, unreadable or empty."""


class SessionError(FolderatorError):
    """The temporary shell session could not be prepared or started."""
