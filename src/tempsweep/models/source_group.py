"""Source group definition."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

KIND_ROOTS = "roots"
KIND_PATTERNS = "patterns"
KIND_PROFILES = "profiles"

# Cache locations inside a Gecko-style profile directory
PROFILE_CACHE_DIRS = ("cache2/entries", "cache2", "Cache")


@dataclass(frozen=True)
class SourceGroup:
    """A named scan unit bundling an age threshold with its sources.

    ``roots`` groups scan literal directories. ``patterns`` groups resolve
    wildcard paths to directories at run time. ``profiles`` groups resolve
    their patterns to browser profile directories and then scan the
    ``profile_dirs`` sub-roots of each profile.
    """

    id: str
    description: str
    age_days: int
    kind: str = KIND_ROOTS
    roots: tuple[Path, ...] = ()
    patterns: tuple[str, ...] = ()
    profile_dirs: tuple[str, ...] = PROFILE_CACHE_DIRS

    def __post_init__(self) -> None:
        if self.kind not in (KIND_ROOTS, KIND_PATTERNS, KIND_PROFILES):
            raise ValueError(f"Unknown source group kind: {self.kind!r}")
        if self.age_days < 0:
            raise ValueError(f"age_days must not be negative, got {self.age_days}")

    @property
    def has_sources(self) -> bool:
        if self.kind == KIND_ROOTS:
            return bool(self.roots)
        return bool(self.patterns)
