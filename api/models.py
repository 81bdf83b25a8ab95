"""
API Response Models.

Pydantic models for serializing place status responses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from services.place_status import PlaceStatus


# ============================================================================
# Place Models
# ============================================================================

class PlaceStatusResponse(BaseModel):
    """Single place evaluated at one instant."""
    city: str
    country: str
    zone_name: str
    local_time: datetime
    halves: int  # half-hours since local midnight, 0..47
    is_work_hours: bool
    is_civil_hours: bool
    is_zulu: bool
    is_local: bool

    class Config:
        json_schema_extra = {
            "example": {
                "city": "Toronto",
                "country": "Canada",
                "zone_name": "America/Toronto",
                "local_time": "2025-01-15T09:45:00-05:00",
                "halves": 19,
                "is_work_hours": True,
                "is_civil_hours": True,
                "is_zulu": False,
                "is_local": True
            }
        }

    @classmethod
    def from_status(cls, status: PlaceStatus) -> "PlaceStatusResponse":
        return cls(
            city=status.city,
            country=status.country,
            zone_name=status.zone_name,
            local_time=status.local_time,
            halves=status.halves,
            is_work_hours=status.is_work_hours,
            is_civil_hours=status.is_civil_hours,
            is_zulu=status.is_zulu,
            is_local=status.is_local,
        )


class PlaceListResponse(BaseModel):
    """Response for place listing."""
    items: List[PlaceStatusResponse]
    total_count: int
    evaluated_at: datetime
    default_zone: Optional[str] = None  # None when host detection failed

    class Config:
        json_schema_extra = {
            "example": {
                "items": [],
                "total_count": 4,
                "evaluated_at": "2025-01-15T14:45:00Z",
                "default_zone": "America/Toronto"
            }
        }


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    status_code: int

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Not found",
                "detail": "No place named 'Atlantis'",
                "status_code": 404
            }
        }
