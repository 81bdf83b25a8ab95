"""
Place status service.

Snapshots what a world-clock display needs for each place at a given instant:
local wall-clock time, the current half-hour slot, and whether that slot is
inside the place's work and civil windows.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List

from domain.place import Place


@dataclass(frozen=True, slots=True)
class PlaceStatus:
    """
    Immutable view of one Place at one instant.
    """
    city: str
    country: str
    zone_name: str
    local_time: datetime
    halves: int
    is_work_hours: bool
    is_civil_hours: bool
    is_zulu: bool
    is_local: bool


def status_for(place: Place, at: datetime) -> PlaceStatus:
    """
    Evaluate a place at an aware instant.

    Raises:
        ValueError: if `at` is naive
    """
    local = place.local_time(at)
    halves = place.halves_at(at)
    return PlaceStatus(
        city=place.city,
        country=place.country,
        zone_name=place.zone_name,
        local_time=local,
        halves=halves,
        is_work_hours=place.is_work_hours(halves),
        is_civil_hours=place.is_civil_hours(halves),
        is_zulu=place.is_zulu(),
        is_local=place.is_local(),
    )


def statuses_for(places: Iterable[Place], at: datetime) -> List[PlaceStatus]:
    return [status_for(place, at) for place in places]
