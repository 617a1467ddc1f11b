"""Tests for wildcard path resolution."""

from __future__ import annotations

import os

import pytest

from tempsweep.core.resolver import canonical_key, has_magic, resolve_pattern, resolve_patterns


@pytest.fixture
def appdata(tmp_path):
    """Create a fake application data tree."""
    root = tmp_path / "Local"
    (root / "Vendor" / "App" / "Cache").mkdir(parents=True)
    (root / "Vendor" / "App" / "CacheStorage").mkdir()
    (root / "Vendor" / "Other" / "Data").mkdir(parents=True)
    (root / "Tool" / "Cache").mkdir(parents=True)
    (root / "Tool" / "Cache.lock").write_text("not a directory")
    return root


class TestHasMagic:
    def test_detects_wildcards(self):
        assert has_magic("Cache*")
        assert has_magic("?ache")
        assert has_magic("[Cc]ache")

    def test_plain_segment(self):
        assert not has_magic("Cache")


class TestResolvePattern:
    def test_single_level(self, appdata):
        result = resolve_pattern(appdata / "*" / "Cache")
        assert result == {appdata / "Tool" / "Cache"}

    def test_multiple_levels(self, appdata):
        result = resolve_pattern(appdata / "*" / "*" / "Cache*")
        assert result == {
            appdata / "Vendor" / "App" / "Cache",
            appdata / "Vendor" / "App" / "CacheStorage",
        }

    def test_only_directories_match(self, appdata):
        result = resolve_pattern(appdata / "Tool" / "Cache*")
        assert result == {appdata / "Tool" / "Cache"}

    def test_literal_path(self, appdata):
        assert resolve_pattern(appdata / "Tool") == {appdata / "Tool"}

    def test_no_match_is_empty(self, appdata):
        assert resolve_pattern(appdata / "*" / "Nope*") == set()

    def test_missing_base_is_empty(self, tmp_path):
        assert resolve_pattern(tmp_path / "missing" / "*" / "Cache") == set()

    def test_literal_segment_after_wildcard(self, appdata):
        result = resolve_pattern(appdata / "*" / "App" / "Cache")
        assert result == {appdata / "Vendor" / "App" / "Cache"}

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
    def test_unreadable_level_is_skipped(self, appdata):
        locked = appdata / "Vendor"
        locked.chmod(0)
        try:
            result = resolve_pattern(appdata / "*" / "*" / "Cache*")
        finally:
            locked.chmod(0o755)
        assert result == set()
        assert resolve_pattern(appdata / "*" / "Cache") == {appdata / "Tool" / "Cache"}


class TestResolvePatterns:
    def test_deduplicates_overlapping_patterns(self, appdata):
        result = resolve_patterns([
            appdata / "*" / "*" / "Cache",
            appdata / "Vendor" / "*" / "Cache",
            appdata / "Vendor" / "App" / "Cache",
        ])
        assert result == [(appdata / "Vendor" / "App" / "Cache").resolve()]

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_deduplicates_through_symlinks(self, appdata, tmp_path):
        link = tmp_path / "Linked"
        link.symlink_to(appdata / "Tool", target_is_directory=True)
        result = resolve_patterns([appdata / "Tool" / "Cache", link / "Cache*"])
        assert len(result) == 1

    def test_empty_input(self):
        assert resolve_patterns([]) == []

    def test_canonical_key_matches_equivalent_paths(self, appdata):
        assert canonical_key(appdata / "Tool" / ".." / "Tool") == canonical_key(appdata / "Tool")
