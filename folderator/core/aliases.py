"""Alias name generation for the listed folders."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from folderator.constants import ALIAS_PREFIX, FALLBACK_SLUG, FIRST_COLLISION_SUFFIX

from .folders import parse_folder_line, resolve_path

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)

_UNSAFE_RUN = re.compile(r"[^A-Za-z0-9_-]+")
_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())
_SEPARATOR_RUN = re.compile("[" + re.escape("".join(sorted(_SEPARATORS))) + "]+")


@dataclass(frozen=True)
class AliasBinding:
    """A generated alias and the folder it jumps to."""

    alias: str
    resolved_path: str
    display_name: str | None = None


class AliasRegistry:
    """The aliases already assigned during one run."""

    def __init__(self) -> None:
        self._aliases: set[str] = set()

    def __contains__(self, alias: object) -> bool:
        return alias in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def add(self, alias: str) -> None:
        """Mark *alias* as taken."""
        self._aliases.add(alias)


def slugify(basename: str) -> str:
    """Turn arbitrary text into a shell-safe alias fragment.

    Runs of characters outside ``[A-Za-z0-9_-]`` become a single ``-``,
    leading digits get a ``_`` prefix and empty results become ``dir``.
    """
    slug = _UNSAFE_RUN.sub("-", basename).strip("-")
    if slug[:1].isdigit():
        slug = "_" + slug
    return slug or FALLBACK_SLUG


def _basis(resolved_path: str, custom_name: str | None) -> str:
    if custom_name:
        return custom_name
    basename = os.path.basename(resolved_path.rstrip("".join(_SEPARATORS)))
    if basename:
        return basename
    return _SEPARATOR_RUN.sub("_", resolved_path)


def make_alias_name(
    resolved_path: str,
    custom_name: str | None,
    registry: AliasRegistry,
) -> str:
    """Return a unique ``go-<slug>`` alias for the folder and register it.

    The slug comes from the custom name, the basename of the path, or the
    whole path with separators replaced by ``_``. On collision, ``-2``,
    ``-3``, ... is appended until the alias is free.
    """
    slug = slugify(_basis(resolved_path, custom_name))
    alias = f"{ALIAS_PREFIX}{slug}"
    n = FIRST_COLLISION_SUFFIX
    while alias in registry:
        alias = f"{ALIAS_PREFIX}{slug}-{n}"
        n += 1

    if n > FIRST_COLLISION_SUFFIX:
        logger.debug("Alias for %s collided, using %s", resolved_path, alias)
    registry.add(alias)
    return alias


def generate_bindings(
    lines: Iterable[str],
    cwd: str | Path,
    registry: AliasRegistry | None = None,
) -> list[AliasBinding]:
    """Parse folder lines and assign each folder a unique alias, in order.

    Raises:
        ParseError: On the first malformed line; no bindings are returned.

    """
    registry = registry if registry is not None else AliasRegistry()
    bindings: list[AliasBinding] = []
    for line in lines:
        entry = parse_folder_line(line)
        resolved = resolve_path(entry.raw_path, cwd)
        alias = make_alias_name(resolved, entry.custom_name, registry)
        bindings.append(AliasBinding(alias, resolved, entry.custom_name))
    return bindings
