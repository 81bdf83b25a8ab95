#!/usr/bin/env python3
"""
Show configured places with their local time and shading.

Prints one row per place: city, country, zone, local time, and whether the
place is inside its work hours (W) and civil hours (C). The UTC place is
marked Z and the host's local zone is marked L.

Usage:
    python show_places.py
    python show_places.py --places my_places.json --at 2025-01-15T14:45:00Z
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.zones import initialize_default_zone
from repositories.environment import load_settings
from repositories.places_repository import load_places
from services.place_status import PlaceStatus, statuses_for


def parse_instant(text: str) -> datetime:
    """
    Parse an ISO-8601 instant; a trailing 'Z' means UTC.

    Raises:
        ValueError: if the text is not ISO-8601 or has no UTC offset
    """
    value = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"instant must include a UTC offset: {text!r}")
    return value


def _flags(status: PlaceStatus) -> str:
    return "".join([
        "W" if status.is_work_hours else "-",
        "C" if status.is_civil_hours else "-",
        "Z" if status.is_zulu else "-",
        "L" if status.is_local else "-",
    ])


def format_status_table(statuses: Iterable[PlaceStatus]) -> List[str]:
    """Render statuses as aligned text lines, header first."""
    rows = [("CITY", "COUNTRY", "ZONE", "TIME", "FLAGS")]
    for status in statuses:
        rows.append((
            status.city,
            status.country,
            status.zone_name,
            status.local_time.strftime("%a %H:%M"),
            _flags(status),
        ))

    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    return [
        "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in rows
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Show world clock places with work/civil hour shading",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Flags:
  W  inside work hours
  C  inside civil hours
  Z  the UTC place
  L  the host's local zone
        """
    )

    parser.add_argument(
        "--places",
        type=Path,
        default=None,
        help="Path to the places JSON file (default: WORLD_CLOCK_PLACES_FILE or places.json)"
    )

    parser.add_argument(
        "--at",
        default=None,
        help="ISO-8601 instant with offset to evaluate (default: now)"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings()
    zones = settings.zone_database()

    try:
        at = parse_instant(args.at) if args.at else datetime.now(timezone.utc)
        default_zone = initialize_default_zone(
            localtime_path=settings.localtime_path,
            timezone_path=settings.timezone_path,
            zones=zones,
        )
        places = load_places(args.places or settings.places_file, zones, default_zone)
        statuses = statuses_for(places, at)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for line in format_status_table(statuses):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
