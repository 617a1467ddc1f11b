"""Merging and deduplication of candidate files across groups."""

from __future__ import annotations

import logging
from typing import Iterable

from tempsweep.core.resolver import canonical_key
from tempsweep.models.scan_result import CandidateFile, GroupScan, RunSummary

log = logging.getLogger(__name__)


def aggregate(scans: Iterable[GroupScan]) -> RunSummary:
    """Merge group contributions into one deduplicated ``RunSummary``.

    Files are keyed by canonical path, so a file reached through several
    sources, or through a symlink next to it, is counted once. When a
    link and its target collide, the target is kept.
    """
    merged: dict[str, CandidateFile] = {}
    seen = 0
    for scan in scans:
        for candidate in scan.candidates:
            seen += 1
            key = canonical_key(candidate.path)
            existing = merged.get(key)
            if existing is not None and candidate.is_link and not existing.is_link:
                continue
            merged[key] = candidate

    candidates = list(merged.values())
    total = sum(c.size_bytes for c in candidates)
    if seen != len(candidates):
        log.info("Dropped %d duplicate candidates", seen - len(candidates))
    return RunSummary(candidates=candidates, total_bytes=total)
