"""Tempsweep data models."""

from tempsweep.models.source_group import SourceGroup
from tempsweep.models.scan_result import CandidateFile, GroupScan, RunSummary, ScanReportLine
from tempsweep.models.clean_result import DeletionOutcome

__all__ = [
    "CandidateFile",
    "DeletionOutcome",
    "GroupScan",
    "RunSummary",
    "ScanReportLine",
    "SourceGroup",
]
