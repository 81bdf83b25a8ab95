"""
Environment settings.

Reads the world clock's host paths from the environment. A `.env` file in the
project root is loaded first; variables already set in the environment win.

Environment variables (all optional):
- TZDIR: zoneinfo root (default /usr/share/zoneinfo)
- WORLD_CLOCK_LOCALTIME: host local-time link (default /etc/localtime)
- WORLD_CLOCK_TIMEZONE_FILE: host zone-name file (default /etc/timezone)
- WORLD_CLOCK_PLACES_FILE: JSON places file (default places.json in the project root)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from domain.zones import (
    DEFAULT_LOCALTIME_PATH,
    DEFAULT_TIMEZONE_PATH,
    DEFAULT_ZONEINFO_ROOT,
    FilesystemZoneDatabase,
)

PROJECT_ROOT = Path(__file__).parent.parent

# Load environment variables from .env file in the project root
env_path = PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True, slots=True)
class Settings:
    zoneinfo_root: Path
    localtime_path: Path
    timezone_path: Path
    places_file: Path

    def zone_database(self) -> FilesystemZoneDatabase:
        return FilesystemZoneDatabase(self.zoneinfo_root)


def load_settings() -> Settings:
    """Build Settings from the current environment."""

    return Settings(
        zoneinfo_root=Path(os.getenv("TZDIR") or DEFAULT_ZONEINFO_ROOT),
        localtime_path=Path(os.getenv("WORLD_CLOCK_LOCALTIME") or DEFAULT_LOCALTIME_PATH),
        timezone_path=Path(os.getenv("WORLD_CLOCK_TIMEZONE_FILE") or DEFAULT_TIMEZONE_PATH),
        places_file=Path(os.getenv("WORLD_CLOCK_PLACES_FILE") or PROJECT_ROOT / "places.json"),
    )


__all__ = ["Settings", "load_settings", "PROJECT_ROOT"]
