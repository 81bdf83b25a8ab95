"""
Places API Endpoints.

Read-only endpoints reporting each configured place's local time and whether
it is currently inside its work and civil hours.
"""

from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.models import ErrorResponse, PlaceListResponse, PlaceStatusResponse
from domain.zones import initialize_default_zone
from repositories.environment import load_settings
from repositories.places_repository import load_places
from services.place_list import PlaceList
from services.place_status import status_for, statuses_for

router = APIRouter()


@lru_cache(maxsize=1)
def get_place_list() -> PlaceList:
    """
    Build the place list once per process from environment settings.

    Default-zone detection runs here, before any request reads a Place.
    """
    settings = load_settings()
    zones = settings.zone_database()
    default_zone = initialize_default_zone(
        localtime_path=settings.localtime_path,
        timezone_path=settings.timezone_path,
        zones=zones,
    )
    return load_places(settings.places_file, zones, default_zone)


def _evaluation_instant(at: Optional[datetime]) -> datetime:
    if at is None:
        return datetime.now(timezone.utc)
    if at.tzinfo is None or at.utcoffset() is None:
        raise HTTPException(
            status_code=422,
            detail="'at' must include a UTC offset (e.g. 2025-01-15T14:45:00Z)"
        )
    return at


@router.get(
    "/places",
    response_model=PlaceListResponse,
    summary="List Places",
    description="Status of every configured place at the given instant (default: now)."
)
def list_places(
    at: Optional[datetime] = Query(None, description="Timezone-aware ISO-8601 instant"),
    places: PlaceList = Depends(get_place_list),
):
    """
    List all configured places in display order.

    The UTC place is always present.
    """
    instant = _evaluation_instant(at)
    items = [PlaceStatusResponse.from_status(s) for s in statuses_for(places, instant)]
    return PlaceListResponse(
        items=items,
        total_count=len(items),
        evaluated_at=instant,
        default_zone=places.default_zone or None,
    )


@router.get(
    "/places/{city}",
    response_model=PlaceStatusResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get Place",
    description="Status of one place, looked up by its city label (case-insensitive)."
)
def get_place(
    city: str,
    at: Optional[datetime] = Query(None, description="Timezone-aware ISO-8601 instant"),
    places: PlaceList = Depends(get_place_list),
):
    place = places.find(city)
    if place is None:
        raise HTTPException(
            status_code=404,
            detail=f"No place named {city!r}"
        )
    return PlaceStatusResponse.from_status(status_for(place, _evaluation_instant(at)))
