"""
Domain: Place, one of the geographical places a world clock displays.

A Place is fully described by its zoneinfo identifier, but is usually shown
under a friendlier label such as a city ("Stuttgart" rather than
"Europe/Berlin"), decorated with a country.

Contract excerpts implemented here:
- zone_name is never empty and always names an existing zone database entry.
  It is validated when assigned, so any Place that exists is usable.
- city and country are never None; country may be "".
- The four day-window boundaries are halves in [0, 47] with defaults
  start_civil_day=15 (07:30), start_work_day=18 (09:00),
  end_work_day=34 (17:00), end_civil_day=46 (23:00).
- Boundaries are not cross-validated; windows may wrap past midnight.
- A rejected assignment leaves the previous value unchanged.

This is a plain mutable record with no internal synchronization.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .errors import InvalidArgumentError, require_not_none
from .halves import HalfHourWindow, halves_since_midnight, in_window, validate_halves
from .time import require_aware_timestamp
from .zones import NO_DEFAULT_ZONE, ZoneLookup, system_zone_database

ZULU_ZONE_NAME = "UTC"

DEFAULT_START_CIVIL_DAY = 15
DEFAULT_START_WORK_DAY = 18
DEFAULT_END_WORK_DAY = 34
DEFAULT_END_CIVIL_DAY = 46


class Place:
    """
    A named location tied to a time zone, with work-day and civil-day windows.

    Args:
        zone_name: zoneinfo identifier, e.g. "America/Toronto", "Europe/Paris", "UTC"
        city: label displayed for this place
        country: subtext decorating the city; "" to ignore the feature
        zones: zone database used to validate zone names (system database if omitted)
        default_zone: the host's detected zone identifier, used by is_local()

    Raises:
        NullArgumentError: if zone_name, city or country is None
        InvalidArgumentError: if zone_name is empty or not in the zone database
    """

    __slots__ = (
        "_zones",
        "_default_zone",
        "_zone_name",
        "_city",
        "_country",
        "_start_civil_day",
        "_start_work_day",
        "_end_work_day",
        "_end_civil_day",
    )

    def __init__(
        self,
        zone_name: str,
        city: str,
        country: str,
        *,
        zones: Optional[ZoneLookup] = None,
        default_zone: str = NO_DEFAULT_ZONE,
    ) -> None:
        self._zones: ZoneLookup = zones if zones is not None else system_zone_database()
        self._default_zone = default_zone

        self._start_civil_day = DEFAULT_START_CIVIL_DAY
        self._start_work_day = DEFAULT_START_WORK_DAY
        self._end_work_day = DEFAULT_END_WORK_DAY
        self._end_civil_day = DEFAULT_END_CIVIL_DAY

        self.zone_name = zone_name
        self.city = city
        self.country = country

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def zone_name(self) -> str:
        """Identifier corresponding to the name of the zone file in the zoneinfo directory."""
        return self._zone_name

    @zone_name.setter
    def zone_name(self, zone_name: str) -> None:
        require_not_none("zone_name", zone_name)
        if zone_name == "":
            raise InvalidArgumentError("zone_name must not be empty")

        if not self._zones.exists(zone_name):
            raise InvalidArgumentError(f"Timezone data {self._zones.path_for(zone_name)} not found")
        self._zone_name = zone_name

    @property
    def city(self) -> str:
        return self._city

    @city.setter
    def city(self, name: str) -> None:
        require_not_none("city", name)
        self._city = name

    @property
    def country(self) -> str:
        return self._country

    @country.setter
    def country(self, country: str) -> None:
        require_not_none("country", country)
        self._country = country

    @property
    def default_zone(self) -> str:
        return self._default_zone

    def is_zulu(self) -> bool:
        """
        True if this Place is the one for Zulu / GMT / UTC.

        A literal comparison against "UTC"; zones that merely share a zero
        offset do not count. Relies on whoever owns the places keeping a "UTC"
        entry present.
        """
        return self._zone_name == ZULU_ZONE_NAME

    def is_local(self) -> bool:
        """True if this Place matches the host's detected default zone."""
        return self._zone_name == self._default_zone

    # ------------------------------------------------------------------
    # Day windows, in halves since midnight
    # ------------------------------------------------------------------

    @property
    def start_work_day(self) -> int:
        return self._start_work_day

    @start_work_day.setter
    def start_work_day(self, start: int) -> None:
        validate_halves("start_work_day", start)
        self._start_work_day = start

    @property
    def end_work_day(self) -> int:
        return self._end_work_day

    @end_work_day.setter
    def end_work_day(self, end: int) -> None:
        validate_halves("end_work_day", end)
        self._end_work_day = end

    @property
    def start_civil_day(self) -> int:
        return self._start_civil_day

    @start_civil_day.setter
    def start_civil_day(self, start: int) -> None:
        validate_halves("start_civil_day", start)
        self._start_civil_day = start

    @property
    def end_civil_day(self) -> int:
        return self._end_civil_day

    @end_civil_day.setter
    def end_civil_day(self, end: int) -> None:
        validate_halves("end_civil_day", end)
        self._end_civil_day = end

    @property
    def work_window(self) -> HalfHourWindow:
        return HalfHourWindow(self._start_work_day, self._end_work_day)

    @property
    def civil_window(self) -> HalfHourWindow:
        return HalfHourWindow(self._start_civil_day, self._end_civil_day)

    def is_work_hours(self, since_midnight: int) -> bool:
        """Whether the given half since local midnight falls in this Place's work day."""
        return in_window(self._start_work_day, self._end_work_day, since_midnight)

    def is_civil_hours(self, since_midnight: int) -> bool:
        """Whether the given half since local midnight falls in this Place's civil day."""
        return in_window(self._start_civil_day, self._end_civil_day, since_midnight)

    # ------------------------------------------------------------------
    # Wall clock
    # ------------------------------------------------------------------

    def local_time(self, at: datetime) -> datetime:
        """
        Convert an aware instant to this Place's wall-clock time.

        The zone is loaded from the same database the name was validated against.
        """

        require_aware_timestamp("at", at)
        return at.astimezone(self._zones.tzinfo(self._zone_name))

    def halves_at(self, at: datetime) -> int:
        return halves_since_midnight(self.local_time(at))

    def __str__(self) -> str:
        return self._city

    def __repr__(self) -> str:
        return f"Place(zone_name={self._zone_name!r}, city={self._city!r}, country={self._country!r})"
