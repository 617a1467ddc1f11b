"""Shared test fixtures."""

from __future__ import annotations

import os
import time
from pathlib import Path

import pytest

from tempsweep.config import SweepConfig
from tempsweep.models.source_group import KIND_PATTERNS, KIND_ROOTS, SourceGroup

ONE_DAY = 86400


@pytest.fixture
def make_file():
    """Return a factory creating a file of a given size and age in days."""

    def _make(path: Path, size: int = 100, age_days: float = 10) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        mtime = time.time() - age_days * ONE_DAY
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def roots_config(tmp_path):
    """Return a factory for a single roots group config over tmp dirs."""

    def _config(*roots: Path, age_days: int = 7) -> SweepConfig:
        group = SourceGroup(id="temp", description="Temporary files", age_days=age_days, kind=KIND_ROOTS, roots=roots)
        return SweepConfig(groups=(group,))

    return _config


@pytest.fixture
def pattern_group():
    def _group(group_id: str, *patterns: Path | str, age_days: int = 7) -> SourceGroup:
        return SourceGroup(
            id=group_id,
            description=f"Group {group_id}",
            age_days=age_days,
            kind=KIND_PATTERNS,
            patterns=tuple(str(p) for p in patterns),
        )

    return _group
