"""Platform-provided filesystem locations."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


def _env_path(*names: str) -> Path | None:
    """Return the first non-empty environment variable among ``names`` as a Path."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return Path(value)
    return None


def config_home() -> Path:
    """Return the per-user configuration directory."""
    return _env_path("XDG_CONFIG_HOME", "APPDATA") or Path.home() / ".config"


@dataclass(frozen=True)
class KnownLocations:
    """Well-known directories of the current host.

    Any location the platform does not provide is None.
    """

    temp_dirs: tuple[Path, ...] = ()
    roaming_appdata: Path | None = None
    local_appdata: Path | None = None
    windows_dir: Path | None = None
    system_drive: Path | None = None

    @classmethod
    def detect(cls) -> KnownLocations:
        """Read locations from the environment.

        On hosts without the Windows variables, the XDG config and cache
        homes stand in for the roaming and local application data folders.
        """
        temp_dirs: list[Path] = []
        for candidate in (_env_path("TEMP"), _env_path("TMP"), Path(tempfile.gettempdir())):
            if candidate is not None and candidate not in temp_dirs:
                temp_dirs.append(candidate)

        roaming = _env_path("APPDATA", "XDG_CONFIG_HOME") or Path.home() / ".config"
        local = _env_path("LOCALAPPDATA", "XDG_CACHE_HOME") or Path.home() / ".cache"

        system_drive = _env_path("SystemDrive")
        if system_drive is not None and not str(system_drive).endswith(("\\", "/")):
            # "C:" alone means the current directory on that drive
            system_drive = Path(f"{system_drive}{os.sep}")

        locations = cls(
            temp_dirs=tuple(temp_dirs),
            roaming_appdata=roaming,
            local_appdata=local,
            windows_dir=_env_path("SystemRoot", "WINDIR"),
            system_drive=system_drive,
        )
        log.debug("Detected locations: %s", locations)
        return locations
