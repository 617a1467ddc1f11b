"""Scan and delete orchestration engine."""

from __future__ import annotations

import logging
import time
from typing import Callable

from tempsweep.config import SweepConfig
from tempsweep.core.aggregator import aggregate
from tempsweep.core.collector import Collector, LineCallback
from tempsweep.core.confirmation import ConfirmationGate
from tempsweep.core.executor import delete_candidates
from tempsweep.models.clean_result import DeletionOutcome
from tempsweep.models.scan_result import GroupScan, RunSummary

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str, str], None]  # (group_id, status_message)


class SweepEngine:
    """Orchestrates the scan, confirm and delete phases.

    The phases can be driven separately (``scan`` then ``clean``) or
    together through ``run``.
    """

    def __init__(self, config: SweepConfig) -> None:
        self.config = config

    def scan(
        self,
        on_line: LineCallback | None = None,
        on_progress: ProgressCallback | None = None,
        now: float | None = None,
    ) -> RunSummary:
        """Scan every configured group and return the deduplicated summary.

        Groups are processed one after another. Nothing is deleted.

        Args:
            on_line: Optional callback fired for each per-source report line.
            on_progress: Optional callback for progress updates.
            now: Reference time for age cutoffs. Defaults to the current time.
        """
        if now is None:
            now = time.time()
        collector = Collector(on_line=on_line)
        scans: list[GroupScan] = []

        for group in self.config.groups:
            if on_progress:
                on_progress(group.id, "scanning")
            scans.append(collector.collect(group, now))
            if on_progress:
                on_progress(group.id, "done")

        summary = aggregate(scans)
        log.info("Scan found %d files, %d bytes", summary.file_count, summary.total_bytes)
        return summary

    def clean(self, summary: RunSummary) -> DeletionOutcome:
        """Delete every candidate in the summary."""
        outcome = delete_candidates(summary.candidates)
        return outcome

    def run(
        self,
        gate: ConfirmationGate,
        on_line: LineCallback | None = None,
        on_summary: Callable[[RunSummary], None] | None = None,
    ) -> tuple[RunSummary, DeletionOutcome | None]:
        """Scan, ask the gate, then delete.

        Returns the summary and the deletion outcome, which is None when
        nothing was found or the gate declined.
        """
        summary = self.scan(on_line=on_line)
        if summary.is_empty:
            return summary, None
        if on_summary:
            on_summary(summary)
        if not gate.decide(summary):
            log.info("Deletion declined")
            return summary, None
        return summary, self.clean(summary)
