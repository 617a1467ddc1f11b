"""Immutable run configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tempsweep.groups import DEFAULT_AGE_DAYS, SYSTEM_AGE_DAYS, build_groups
from tempsweep.locations import KnownLocations
from tempsweep.models.source_group import SourceGroup
from tempsweep.settings import Settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepConfig:
    """Source groups and age thresholds for one run."""

    groups: tuple[SourceGroup, ...]
    default_days: int = DEFAULT_AGE_DAYS
    system_days: int = SYSTEM_AGE_DAYS

    @property
    def has_sources(self) -> bool:
        """Whether at least one group has something to scan."""
        return any(group.has_sources for group in self.groups)


def load_config(
    settings: Settings | None = None,
    locations: KnownLocations | None = None,
) -> SweepConfig:
    """Build the configuration from the settings file and host locations."""
    if settings is None:
        settings = Settings()
    if locations is None:
        locations = KnownLocations.detect()

    default_days = settings.get_days("age.default_days", DEFAULT_AGE_DAYS)
    system_days = settings.get_days("age.system_days", SYSTEM_AGE_DAYS)
    if system_days <= default_days:
        log.warning(
            "System threshold (%d days) is not longer than the default (%d days)",
            system_days,
            default_days,
        )

    return SweepConfig(
        groups=build_groups(locations, default_days, system_days),
        default_days=default_days,
        system_days=system_days,
    )
