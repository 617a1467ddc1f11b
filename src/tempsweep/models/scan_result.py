"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CandidateFile:
    """A stale file selected for deletion."""

    path: Path
    size_bytes: int
    mtime: float
    is_link: bool = False


@dataclass(slots=True)
class ScanReportLine:
    """Per-source outcome of a scan, used only for display."""

    description: str
    path: Path | str
    file_count: int = 0
    total_bytes: int = 0

    @property
    def is_empty(self) -> bool:
        return self.file_count == 0


@dataclass(slots=True)
class GroupScan:
    """Everything one source group contributed to the run."""

    group_id: str
    description: str
    lines: list[ScanReportLine] = field(default_factory=list)
    candidates: list[CandidateFile] = field(default_factory=list)


@dataclass(slots=True)
class RunSummary:
    """Deduplicated candidate set across all groups."""

    candidates: list[CandidateFile] = field(default_factory=list)
    total_bytes: int = 0

    @property
    def file_count(self) -> int:
        return len(self.candidates)

    @property
    def is_empty(self) -> bool:
        return not self.candidates
