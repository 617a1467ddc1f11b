"""Best-effort deletion of candidate files."""

from __future__ import annotations

import logging
from typing import Iterable

from tempsweep.models.clean_result import DeletionOutcome
from tempsweep.models.scan_result import CandidateFile

log = logging.getLogger(__name__)


def delete_candidates(candidates: Iterable[CandidateFile]) -> DeletionOutcome:
    """Remove each candidate file independently.

    Files that vanished since the scan are skipped quietly. Any other
    failure is recorded on the outcome and the loop moves on. Freed bytes
    use the size recorded at scan time. Directories are never removed.
    """
    outcome = DeletionOutcome()

    for candidate in candidates:
        path = candidate.path
        try:
            if not path.is_file():
                log.debug("Already gone: %s", path)
                continue
            path.unlink()
        except FileNotFoundError:
            log.debug("Already gone: %s", path)
            continue
        except OSError as e:
            log.debug("Cannot delete %s: %s", path, e)
            outcome.errors.append(f"{path}: {e}")
            continue
        outcome.files_removed += 1
        outcome.freed_bytes += candidate.size_bytes

    log.info(
        "Deleted %d files (%d bytes), %d failures",
        outcome.files_removed,
        outcome.freed_bytes,
        outcome.failed,
    )
    return outcome
