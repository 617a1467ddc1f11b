"""Wildcard path pattern resolution."""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from pathlib import Path
from typing import Iterable

log = logging.getLogger(__name__)

_MAGIC = re.compile(r"[*?[]")


def has_magic(segment: str) -> bool:
    """Check if a path segment contains wildcard characters."""
    return _MAGIC.search(segment) is not None


def canonical_key(path: Path | str) -> str:
    """Return a comparison key identifying a path on this host.

    Symlinks and junctions are resolved and case is normalized where the
    platform is case-insensitive.
    """
    return os.path.normcase(os.path.realpath(path))


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def _match_children(directory: Path, segment: str) -> list[Path]:
    """List subdirectories of ``directory`` whose name matches ``segment``."""
    matches: list[Path] = []
    try:
        with os.scandir(directory) as it:
            for entry in it:
                try:
                    if entry.is_dir() and fnmatch.fnmatch(entry.name, segment):
                        matches.append(Path(entry.path))
                except OSError:
                    log.debug("Cannot access: %s", entry.path)
    except OSError:
        log.debug("Cannot read %s", directory)
    return matches


def resolve_pattern(pattern: Path | str) -> set[Path]:
    """Expand one wildcard pattern into the set of existing directories it matches.

    Each wildcard segment matches names within a single directory level.
    Missing or unreadable levels yield no matches instead of raising.
    """
    parts = Path(pattern).parts
    if not parts:
        return set()

    idx = 0
    while idx < len(parts) and not has_magic(parts[idx]):
        idx += 1
    base = Path(*parts[:idx]) if idx else Path(".")

    current = [base]
    for segment in parts[idx:]:
        found: list[Path] = []
        for directory in current:
            if has_magic(segment):
                found.extend(_match_children(directory, segment))
            else:
                child = directory / segment
                if _is_dir(child):
                    found.append(child)
        current = found
        if not current:
            log.debug("Pattern matched nothing: %s", pattern)
            return set()

    return {path for path in current if _is_dir(path)}


def resolve_patterns(patterns: Iterable[Path | str]) -> list[Path]:
    """Resolve several patterns, deduplicating directories by canonical path.

    Directories are returned in their resolved form, sorted for stable
    reporting.
    """
    seen: dict[str, Path] = {}
    for pattern in patterns:
        for directory in resolve_pattern(pattern):
            key = canonical_key(directory)
            if key not in seen:
                seen[key] = Path(os.path.realpath(directory))
    return sorted(seen.values())
