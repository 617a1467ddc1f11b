"""Recursive enumeration of files older than a cutoff."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Iterator

from tempsweep.models.scan_result import CandidateFile

log = logging.getLogger(__name__)

_ONE_DAY = 86400  # seconds


def cutoff_for(age_days: int, now: float | None = None) -> float:
    """Return the timestamp ``age_days`` before ``now``."""
    if now is None:
        now = time.time()
    return now - age_days * _ONE_DAY


def find_stale_files(directory: Path | str, cutoff: float) -> Iterator[CandidateFile]:
    """Yield regular files under ``directory`` last modified before ``cutoff``.

    Symlinked files are judged by their target. Symlinked directories are
    not descended into, which keeps the walk free of cycles. Any subtree or
    file that cannot be read is skipped without affecting its siblings.
    """
    stack: list[Path | str] = [directory]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError:
            log.debug("Cannot read %s", current)
            continue

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    stack.append(entry.path)
                elif entry.is_file():
                    stat = entry.stat()
                    if stat.st_mtime < cutoff:
                        is_link = entry.is_symlink()
                        # Removing a link frees only the link itself
                        size = entry.stat(follow_symlinks=False).st_size if is_link else stat.st_size
                        yield CandidateFile(
                            path=Path(entry.path),
                            size_bytes=size,
                            mtime=stat.st_mtime,
                            is_link=is_link,
                        )
            except OSError:
                log.debug("Cannot access: %s", entry.path)
