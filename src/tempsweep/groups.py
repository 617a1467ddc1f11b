"""Built-in source group definitions."""

from __future__ import annotations

from pathlib import Path

from tempsweep.locations import KnownLocations
from tempsweep.models.source_group import (
    KIND_PATTERNS,
    KIND_PROFILES,
    KIND_ROOTS,
    SourceGroup,
)

DEFAULT_AGE_DAYS = 7
SYSTEM_AGE_DAYS = 30

_LOCAL_CACHE_PATTERNS = (
    "*/Cache*",
    "*/*/Cache*",
    "*/*/User Data/*/Cache",
    "*/*/User Data/*/Code Cache",
    "*/*/User Data/*/GPUCache",
)
_ROAMING_CACHE_PATTERNS = (
    "*/Cache*",
    "*/*/Cache*",
    "*/GPUCache",
    "*/Code Cache",
)
_LOCAL_TEMP_PATTERNS = (
    "*/Temp",
    "*/Logs",
    "*/*/Logs",
)
_ROAMING_TEMP_PATTERNS = (
    "*/logs",
    "*/*/logs",
    "*/Crashpad/completed",
)
_PROFILE_PATTERNS = (
    "Mozilla/Firefox/Profiles/*",
    # Forks installed under their own vendor directory
    "*/*/Profiles/*",
    # XDG cache layout, e.g. ~/.cache/mozilla/firefox/abcd.default
    "mozilla/*/*",
)


def _under(base: Path | None, *relative: str) -> tuple[Path, ...]:
    if base is None:
        return ()
    return tuple(base.joinpath(*rel.split("/")) for rel in relative)


def _patterns_under(base: Path | None, patterns: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(str(p) for p in _under(base, *patterns))


def _unique(paths: tuple[Path, ...]) -> tuple[Path, ...]:
    return tuple(dict.fromkeys(paths))


def build_groups(
    locations: KnownLocations,
    default_days: int = DEFAULT_AGE_DAYS,
    system_days: int = SYSTEM_AGE_DAYS,
) -> tuple[SourceGroup, ...]:
    """Create the six built-in source groups for the given host locations."""
    local = locations.local_appdata
    roaming = locations.roaming_appdata
    windows = locations.windows_dir

    temp = SourceGroup(
        id="temp",
        description="Temporary files",
        age_days=default_days,
        kind=KIND_ROOTS,
        roots=_unique(locations.temp_dirs + _under(local, "Temp") + _under(windows, "Temp")),
    )

    system = SourceGroup(
        id="system",
        description="System logs and crash dumps",
        age_days=system_days,
        kind=KIND_ROOTS,
        roots=_unique(
            _under(windows, "Logs", "Minidump", "LiveKernelReports", "Panther")
            + _under(
                locations.system_drive,
                "ProgramData/Microsoft/Windows/WER/ReportArchive",
                "ProgramData/Microsoft/Windows/WER/ReportQueue",
            )
            + _under(local, "CrashDumps", "Microsoft/Windows/WER")
        ),
    )

    inet_cache = SourceGroup(
        id="inet_cache",
        description="Internet Explorer cache",
        age_days=default_days,
        kind=KIND_ROOTS,
        roots=_under(local, "Microsoft/Windows/INetCache"),
    )

    app_cache = SourceGroup(
        id="app_cache",
        description="Application cache",
        age_days=default_days,
        kind=KIND_PATTERNS,
        patterns=_patterns_under(local, _LOCAL_CACHE_PATTERNS) + _patterns_under(roaming, _ROAMING_CACHE_PATTERNS),
    )

    app_temp = SourceGroup(
        id="app_temp",
        description="Application temp and logs",
        age_days=default_days,
        kind=KIND_PATTERNS,
        patterns=_patterns_under(local, _LOCAL_TEMP_PATTERNS) + _patterns_under(roaming, _ROAMING_TEMP_PATTERNS),
    )

    gecko_cache = SourceGroup(
        id="gecko_cache",
        description="Gecko browser cache",
        age_days=default_days,
        kind=KIND_PROFILES,
        patterns=_patterns_under(local, _PROFILE_PATTERNS),
    )

    return (temp, system, inet_cache, app_cache, app_temp, gecko_cache)
