#!/usr/bin/env python3
"""
Detect the host's default time zone.

Uses the same one-shot detection as the world clock at startup:
/etc/localtime link first, then /etc/timezone. Paths follow the environment
settings (TZDIR, WORLD_CLOCK_LOCALTIME, WORLD_CLOCK_TIMEZONE_FILE).

Usage:
    python detect_local_zone.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.zones import detect_default_zone
from repositories.environment import load_settings


def main() -> int:
    """Print the detected zone identifier; exit 1 when detection failed."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings()
    zone = detect_default_zone(
        localtime_path=settings.localtime_path,
        timezone_path=settings.timezone_path,
        zones=settings.zone_database(),
    )

    if not zone:
        print("Could not detect the local time zone", file=sys.stderr)
        return 1

    print(zone)
    return 0


if __name__ == "__main__":
    sys.exit(main())
