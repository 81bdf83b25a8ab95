"""
Tests for `services/place_status.py`.

Covers:
- Local time and half-hour slot are computed in each place's own zone.
- Work/civil flags follow the place's windows at that slot.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from domain.zones import FilesystemZoneDatabase
from services.place_list import PlaceList
from services.place_status import status_for, statuses_for


def test_status_for_place_in_work_hours(zones) -> None:
    """Verify 14:45 UTC is 09:45 in Toronto, inside default work hours."""

    places = PlaceList(zones, default_zone="America/Toronto")
    toronto = places.create("America/Toronto", "Toronto", "Canada")
    at = datetime(2025, 1, 15, 14, 45, 0, tzinfo=timezone.utc)

    status = status_for(toronto, at)

    assert status.city == "Toronto"
    assert status.zone_name == "America/Toronto"
    assert (status.local_time.hour, status.local_time.minute) == (9, 45)
    assert status.halves == 19
    assert status.is_work_hours is True
    assert status.is_civil_hours is True
    assert status.is_zulu is False
    assert status.is_local is True


def test_statuses_for_list_follow_each_zone(zones) -> None:
    """Verify every place is evaluated at the same instant in its own zone."""

    places = PlaceList(zones)
    places.create("Australia/Sydney", "Sydney", "Australia")
    at = datetime(2025, 1, 15, 14, 45, 0, tzinfo=timezone.utc)

    utc_status, sydney_status = statuses_for(places, at)

    assert utc_status.is_zulu is True
    assert utc_status.halves == 29
    # 14:45 UTC is 01:45 AEDT the next day
    assert sydney_status.halves == 3
    assert sydney_status.is_work_hours is False
    assert sydney_status.is_civil_hours is False


def test_status_for_rejects_naive_instant(zones) -> None:
    """Verify naive instants are rejected."""

    places = PlaceList(zones)
    with pytest.raises(ValueError):
        status_for(places.zulu, datetime(2025, 1, 15, 14, 45, 0))


def test_status_for_zone_only_in_custom_root(tmp_path, zone_installer) -> None:
    """Verify a zone valid under a private root converts from that root, not the system search path."""

    root = tmp_path / "zoneinfo"
    zone_installer(root, "UTC", "UTC")
    zone_installer(root, "Custom/Paris", "Europe/Paris")
    places = PlaceList(FilesystemZoneDatabase(root))
    paris = places.create("Custom/Paris", "Paris", "France")
    at = datetime(2025, 1, 15, 14, 45, 0, tzinfo=timezone.utc)

    status = status_for(paris, at)

    assert status.local_time.utcoffset() == timedelta(hours=1)
    assert status.halves == 31
    assert status.is_work_hours is True
    assert [s.city for s in statuses_for(places, at)] == ["Universal Time", "Paris"]
