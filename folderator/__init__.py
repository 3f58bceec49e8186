"""folderator - quickly work in a subset of folders.

Reads a list of folders, defines a `go-<name>` alias for each one and
starts an interactive shell with those aliases plus an `iterate` helper.
"""

from __future__ import annotations

__version__ = "0.1.0"
