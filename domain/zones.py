"""
Domain: time-zone database lookup and host default-zone detection.

The zone database is consulted as an existence check for validation: a zone
identifier such as "America/Toronto" is valid iff a file-like entry exists at
<zoneinfo-root>/<identifier>. Definitions are only loaded, from that same
entry, when a wall-clock conversion asks for a tzinfo.

Default-zone detection runs once at application startup:
1. If the host local-time link exists, resolve it and strip the zoneinfo root
   (".../zoneinfo/Australia/Sydney" -> "Australia/Sydney").
2. Else, if the host zone-name file exists, use its first line when it names
   an existing entry in the database.
3. Otherwise, or on any failure, log a warning and use "" (matches no Place).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, Optional, Protocol
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

DEFAULT_ZONEINFO_ROOT = "/usr/share/zoneinfo"
DEFAULT_LOCALTIME_PATH = "/etc/localtime"
DEFAULT_TIMEZONE_PATH = "/etc/timezone"

# Sentinel for "detection failed"; no real Place can have an empty zone name.
NO_DEFAULT_ZONE = ""


class ZoneLookup(Protocol):
    """Capability answering "does an entry for this identifier exist?"."""

    def exists(self, zone_name: str) -> bool: ...

    def path_for(self, zone_name: str) -> str: ...

    def tzinfo(self, zone_name: str) -> ZoneInfo: ...


def _is_contained(zone_name: str) -> bool:
    """Reject identifiers that would reach outside the zoneinfo root."""

    parts = PurePosixPath(zone_name).parts
    if not parts or PurePosixPath(zone_name).is_absolute():
        return False
    return all(part not in ("", ".", "..") for part in parts)


class FilesystemZoneDatabase:
    """Zone lookup backed by a zoneinfo directory (conventionally TZDIR)."""

    def __init__(self, root: str | os.PathLike[str] = DEFAULT_ZONEINFO_ROOT) -> None:
        self.root = Path(root)
        self._loaded: Dict[str, ZoneInfo] = {}

    def path_for(self, zone_name: str) -> str:
        return f"{self.root}/{zone_name}"

    def exists(self, zone_name: str) -> bool:
        if not zone_name or not _is_contained(zone_name):
            return False
        return (self.root / zone_name).is_file()

    def tzinfo(self, zone_name: str) -> ZoneInfo:
        """
        Load the zone from this root, not from zoneinfo.TZPATH.

        Raises:
            ValueError: if the entry is missing or is not a TZif file
        """

        loaded = self._loaded.get(zone_name)
        if loaded is not None:
            return loaded
        if not self.exists(zone_name):
            raise ValueError(f"Timezone data {self.path_for(zone_name)} not found")
        try:
            with (self.root / zone_name).open("rb") as handle:
                loaded = ZoneInfo.from_file(handle, key=zone_name)
        except OSError as e:
            raise ValueError(f"Timezone data {self.path_for(zone_name)} unreadable: {e}") from e
        self._loaded[zone_name] = loaded
        return loaded

    def __repr__(self) -> str:
        return f"FilesystemZoneDatabase(root={str(self.root)!r})"


class InMemoryZoneDatabase:
    """
    Zone lookup over a fixed set of identifiers.

    Lets callers (and tests) inject a catalogue without depending on a zoneinfo
    directory being installed.
    """

    def __init__(self, zone_names: Iterable[str], root: str = DEFAULT_ZONEINFO_ROOT) -> None:
        self._zone_names = frozenset(zone_names)
        self.root = root

    def path_for(self, zone_name: str) -> str:
        return f"{self.root}/{zone_name}"

    def exists(self, zone_name: str) -> bool:
        return zone_name in self._zone_names

    def tzinfo(self, zone_name: str) -> ZoneInfo:
        """Identifiers here are standard keys, resolved through zoneinfo.TZPATH or tzdata."""
        if not self.exists(zone_name):
            raise ValueError(f"Timezone data {self.path_for(zone_name)} not found")
        return ZoneInfo(zone_name)

    def __contains__(self, zone_name: object) -> bool:
        return zone_name in self._zone_names

    def __len__(self) -> int:
        return len(self._zone_names)


def system_zone_database() -> FilesystemZoneDatabase:
    """Zone database at $TZDIR, falling back to /usr/share/zoneinfo."""

    return FilesystemZoneDatabase(os.getenv("TZDIR") or DEFAULT_ZONEINFO_ROOT)


def _zone_from_resolved_path(resolved: Path, root: Path) -> str:
    """
    Strip the zoneinfo root from a resolved local-time path.

    The root itself may be a symlink, so both sides are compared resolved. When
    the link points into a different zoneinfo tree (e.g. a distribution that
    keeps its data elsewhere), the part after the last "zoneinfo" component is
    used instead.
    """

    for candidate_root in (root, root.resolve()):
        try:
            relative = resolved.relative_to(candidate_root)
        except ValueError:
            continue
        if relative.parts:
            return relative.as_posix()

    parts = resolved.parts
    if "zoneinfo" in parts:
        index = len(parts) - 1 - parts[::-1].index("zoneinfo")
        tail = parts[index + 1:]
        if tail:
            return PurePosixPath(*tail).as_posix()

    raise ValueError(f"{resolved} is not inside the zoneinfo directory {root}")


def detect_default_zone(
    *,
    localtime_path: str | os.PathLike[str] = DEFAULT_LOCALTIME_PATH,
    timezone_path: str | os.PathLike[str] = DEFAULT_TIMEZONE_PATH,
    zones: Optional[ZoneLookup] = None,
) -> str:
    """
    Detect the host's zone identifier; fail-soft.

    Returns NO_DEFAULT_ZONE ("") and logs a warning when nothing usable is
    found. Never raises for host configuration problems.
    """

    if zones is None:
        zones = system_zone_database()
    root = Path(getattr(zones, "root", DEFAULT_ZONEINFO_ROOT))
    localtime = Path(localtime_path)
    timezone_file = Path(timezone_path)

    try:
        if localtime.exists():
            return _zone_from_resolved_path(localtime.resolve(strict=True), root)

        if timezone_file.exists():
            with timezone_file.open(encoding="utf-8") as handle:
                first_line = handle.readline().strip()
            if first_line and zones.exists(first_line):
                return first_line
            raise ValueError(
                f"{timezone_file} doesn't indicate a valid tzfile in {root} (read {first_line!r})"
            )

        raise ValueError(f"no {localtime} symlink or {timezone_file} file found")

    except (OSError, ValueError) as e:
        logger.warning(
            f"Default time zone detection failed: {e}",
            extra={
                "localtime_path": str(localtime),
                "timezone_path": str(timezone_file),
                "zoneinfo_root": str(root),
            },
        )
        return NO_DEFAULT_ZONE


# Process-wide default zone. Written once by initialize_default_zone(); read-only afterwards.
_default_zone: Optional[str] = None


def initialize_default_zone(**detect_kwargs) -> str:
    """
    Compute the process-wide default zone once.

    Later calls return the first result without probing the host again.
    """

    global _default_zone
    if _default_zone is None:
        _default_zone = detect_default_zone(**detect_kwargs)
    return _default_zone


def get_default_zone() -> str:
    """Default zone identifier, detecting it from the host on first use."""

    if _default_zone is None:
        return initialize_default_zone()
    return _default_zone


def reset_default_zone() -> None:
    """Forget the detected default zone (test isolation only)."""

    global _default_zone
    _default_zone = None
