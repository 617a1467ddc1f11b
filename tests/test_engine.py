"""Tests for the scan/delete engine."""

from __future__ import annotations

import pytest

from tempsweep.config import SweepConfig
from tempsweep.core.confirmation import ConfirmationGate
from tempsweep.core.engine import SweepEngine


@pytest.fixture
def populated(tmp_path, make_file):
    """Three old files and two recent ones under a single root."""
    root = tmp_path / "Temp"
    for i in range(3):
        make_file(root / f"old{i}.tmp", size=500_000, age_days=10)
    for i in range(2):
        make_file(root / "sub" / f"new{i}.tmp", size=123, age_days=1)
    return root


class TestSweepEngine:
    def test_scan_does_not_delete(self, populated, roots_config):
        engine = SweepEngine(roots_config(populated))
        summary = engine.scan()

        assert summary.file_count == 3
        assert summary.total_bytes == 1_500_000
        assert all(c.path.exists() for c in summary.candidates)

    def test_scan_is_idempotent(self, populated, roots_config):
        engine = SweepEngine(roots_config(populated))
        first = sorted((c.path, c.size_bytes) for c in engine.scan().candidates)
        second = sorted((c.path, c.size_bytes) for c in engine.scan().candidates)
        assert first == second

    def test_progress_callback(self, populated, roots_config):
        events: list[tuple[str, str]] = []
        SweepEngine(roots_config(populated)).scan(on_progress=lambda gid, status: events.append((gid, status)))
        assert events == [("temp", "scanning"), ("temp", "done")]

    def test_run_unattended_deletes(self, populated, roots_config):
        engine = SweepEngine(roots_config(populated))
        summary, outcome = engine.run(ConfirmationGate(unattended=True))

        assert outcome is not None
        assert outcome.files_removed == 3
        assert outcome.freed_bytes == summary.total_bytes
        assert sorted(p.name for p in populated.rglob("*") if p.is_file()) == ["new0.tmp", "new1.tmp"]
        assert (populated / "sub").is_dir()

    def test_run_declined_deletes_nothing(self, populated, roots_config):
        engine = SweepEngine(roots_config(populated))
        summary, outcome = engine.run(ConfirmationGate(lambda s: "nope"))

        assert outcome is None
        assert summary.file_count == 3
        assert all(c.path.exists() for c in summary.candidates)

    def test_run_empty_skips_gate(self, tmp_path, roots_config):
        def prompt(summary):
            raise AssertionError("gate must not be consulted")

        engine = SweepEngine(roots_config(tmp_path / "missing"))
        summary, outcome = engine.run(ConfirmationGate(prompt))

        assert summary.is_empty
        assert outcome is None

    def test_overlapping_groups_counted_once(self, tmp_path, make_file, pattern_group):
        make_file(tmp_path / "Vendor" / "App" / "Cache" / "data", size=64, age_days=10)
        config = SweepConfig(
            groups=(
                pattern_group("app_cache", tmp_path / "*" / "*" / "Cache*"),
                pattern_group("vendor_cache", tmp_path / "Vendor" / "App" / "Cache"),
            )
        )
        summary = SweepEngine(config).scan()

        assert summary.file_count == 1
        assert summary.total_bytes == 64

    def test_groups_scanned_in_order(self, tmp_path, pattern_group):
        config = SweepConfig(groups=tuple(pattern_group(name, tmp_path / name) for name in ("a", "b", "c")))
        events: list[str] = []
        SweepEngine(config).scan(on_progress=lambda gid, status: events.append(gid) if status == "scanning" else None)
        assert events == ["a", "b", "c"]
