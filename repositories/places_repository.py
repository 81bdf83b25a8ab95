"""
Places repository (persistence).

This module provides *only* load/save of the configured places to a JSON file.
Zone validation and window rules stay in the domain; errors raised by Place
propagate unchanged.

File format:
    {
      "places": [
        {"zone": "America/Toronto", "city": "Toronto", "country": "Canada",
         "work_hours": [18, 34], "civil_hours": [15, 46]}
      ]
    }
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, StrictInt, ValidationError

from domain.place import Place
from domain.zones import NO_DEFAULT_ZONE, ZoneLookup
from services.place_list import PlaceList

logger = logging.getLogger(__name__)


class PlaceRecord(BaseModel):
    """One place as stored in the places file."""
    zone: str = Field(..., min_length=1, description="zoneinfo identifier")
    city: str
    country: str = ""
    work_hours: Optional[Tuple[StrictInt, StrictInt]] = Field(
        default=None,
        description="(start, end) in halves since midnight",
    )
    civil_hours: Optional[Tuple[StrictInt, StrictInt]] = Field(
        default=None,
        description="(start, end) in halves since midnight",
    )


class PlacesFile(BaseModel):
    places: List[PlaceRecord] = Field(default_factory=list)


def _record_to_place(record: PlaceRecord, zones: ZoneLookup, default_zone: str) -> Place:
    place = Place(record.zone, record.city, record.country, zones=zones, default_zone=default_zone)
    if record.work_hours is not None:
        place.start_work_day, place.end_work_day = record.work_hours
    if record.civil_hours is not None:
        place.start_civil_day, place.end_civil_day = record.civil_hours
    return place


def _place_to_record(place: Place) -> PlaceRecord:
    return PlaceRecord(
        zone=place.zone_name,
        city=place.city,
        country=place.country,
        work_hours=(place.start_work_day, place.end_work_day),
        civil_hours=(place.start_civil_day, place.end_civil_day),
    )


def load_places(path: Path, zones: ZoneLookup, default_zone: str = NO_DEFAULT_ZONE) -> PlaceList:
    """
    Load configured places.

    A missing file yields a list holding only the UTC place.

    Raises:
        ValueError: if the file is not valid JSON or does not match the format
        InvalidArgumentError: if a stored zone or boundary is rejected by Place
    """

    if not path.exists():
        logger.info(f"No places file at {path}; starting with UTC only")
        return PlaceList(zones, default_zone)

    try:
        parsed = PlacesFile.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ValueError(f"Invalid places file {path}: {e}") from e

    places = [_record_to_place(record, zones, default_zone) for record in parsed.places]
    logger.info(f"Loaded {len(places)} place(s) from {path}")
    return PlaceList(zones, default_zone, places)


def save_places(path: Path, places: PlaceList) -> None:
    """Write places atomically (temp file then rename)."""

    document = PlacesFile(places=[_place_to_record(place) for place in places])
    temp = path.with_suffix(".tmp")
    try:
        temp.write_text(document.model_dump_json(indent=2), encoding="utf-8")
        temp.replace(path)
    finally:
        temp.unlink(missing_ok=True)


__all__ = ["PlaceRecord", "PlacesFile", "load_places", "save_places"]
