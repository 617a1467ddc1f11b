"""Deletion outcome dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class DeletionOutcome:
    """Result of the deletion phase.

    ``files_removed`` and ``freed_bytes`` may be smaller than the scanned
    totals when individual files could not be removed.
    """

    files_removed: int = 0
    freed_bytes: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.errors)
