"""Collection of stale files for a single source group."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Callable, Iterable

from tempsweep.core.age_filter import cutoff_for, find_stale_files
from tempsweep.core.resolver import resolve_patterns
from tempsweep.models.scan_result import CandidateFile, GroupScan, ScanReportLine
from tempsweep.models.source_group import KIND_PATTERNS, KIND_PROFILES, SourceGroup

log = logging.getLogger(__name__)

LineCallback = Callable[[ScanReportLine], None]


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


class Collector:
    """Runs the resolver and age filter over one source group at a time.

    Every scanned source produces a ``ScanReportLine``, which is also
    passed to ``on_line`` as soon as it is known so callers can stream
    the report.
    """

    def __init__(self, on_line: LineCallback | None = None) -> None:
        self._on_line = on_line

    def collect(self, group: SourceGroup, now: float | None = None) -> GroupScan:
        """Scan a group using the method matching its kind."""
        if now is None:
            now = time.time()
        cutoff = cutoff_for(group.age_days, now)
        scan = GroupScan(group_id=group.id, description=group.description)

        if group.kind == KIND_PATTERNS:
            self._collect_patterns(scan, group, cutoff)
        elif group.kind == KIND_PROFILES:
            self._collect_profiles(scan, group, cutoff)
        else:
            self._collect_roots(scan, group.description, group.roots, cutoff)

        log.info(
            "Group '%s': %d stale files in %d sources",
            group.id,
            len(scan.candidates),
            len(scan.lines),
        )
        return scan

    def _collect_roots(
        self,
        scan: GroupScan,
        description: str,
        roots: Iterable[Path],
        cutoff: float,
    ) -> None:
        """Scan literal roots, silently skipping those that do not exist."""
        for root in roots:
            if not _is_dir(root):
                log.debug("Skipping missing root: %s", root)
                continue
            self._scan_directory(scan, description, root, cutoff)

    def _collect_patterns(self, scan: GroupScan, group: SourceGroup, cutoff: float) -> None:
        directories = resolve_patterns(group.patterns)
        if not directories:
            for pattern in group.patterns:
                self._emit(scan, ScanReportLine(description=group.description, path=pattern))
            return
        for directory in directories:
            self._scan_directory(scan, group.description, directory, cutoff)

    def _collect_profiles(self, scan: GroupScan, group: SourceGroup, cutoff: float) -> None:
        """Scan the cache sub-roots of every discovered profile directory."""
        profiles = resolve_patterns(group.patterns)
        if not profiles:
            for pattern in group.patterns:
                self._emit(scan, ScanReportLine(description=group.description, path=pattern))
            return
        for profile in profiles:
            log.debug("Found profile: %s", profile)
            roots = [profile.joinpath(*sub.split("/")) for sub in group.profile_dirs]
            description = f"{group.description} ({profile.name})"
            self._collect_roots(scan, description, roots, cutoff)

    def _scan_directory(self, scan: GroupScan, description: str, directory: Path, cutoff: float) -> None:
        # Enumerate the canonical location so aggregation can compare paths
        found: list[CandidateFile] = list(find_stale_files(os.path.realpath(directory), cutoff))
        scan.candidates.extend(found)
        line = ScanReportLine(
            description=description,
            path=directory,
            file_count=len(found),
            total_bytes=sum(f.size_bytes for f in found),
        )
        self._emit(scan, line)

    def _emit(self, scan: GroupScan, line: ScanReportLine) -> None:
        scan.lines.append(line)
        if self._on_line:
            self._on_line(line)
