"""
Place list service.

Holds the ordered places a world clock displays and owns the guarantee that
Place.is_zulu() depends on: a place literally named "UTC" is always present
and can never be removed.

The zone database and the detected default zone are passed in explicitly and
handed to every Place this list creates.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from domain.place import ZULU_ZONE_NAME, Place
from domain.zones import NO_DEFAULT_ZONE, ZoneLookup

ZULU_CITY = "Universal Time"


class PlaceList:
    """
    Ordered collection of Places with a protected UTC entry.

    Example:
        places = PlaceList(zones, default_zone="America/Toronto")
        places.create("Europe/Paris", "Paris", "France")
        [str(p) for p in places]  # ["Universal Time", "Paris"]
    """

    def __init__(
        self,
        zones: ZoneLookup,
        default_zone: str = NO_DEFAULT_ZONE,
        places: Iterable[Place] = (),
    ) -> None:
        self.zones = zones
        self.default_zone = default_zone
        self._places: List[Place] = list(places)

        if not any(place.is_zulu() for place in self._places):
            self._places.insert(0, self._new_place(ZULU_ZONE_NAME, ZULU_CITY, ""))

    def _new_place(self, zone_name: str, city: str, country: str) -> Place:
        return Place(zone_name, city, country, zones=self.zones, default_zone=self.default_zone)

    def create(self, zone_name: str, city: str, country: str) -> Place:
        """Construct a Place bound to this list's zone database and default zone, then append it."""

        place = self._new_place(zone_name, city, country)
        self._places.append(place)
        return place

    def add(self, place: Place) -> None:
        self._places.append(place)

    def remove(self, place: Place) -> None:
        """
        Remove a place.

        Raises:
            ValueError: if the place is the last UTC entry or is not in this list
        """

        index = next((i for i, existing in enumerate(self._places) if existing is place), None)
        if index is None:
            raise ValueError(f"{place!r} is not in this place list")
        if place.is_zulu() and sum(1 for p in self._places if p.is_zulu()) == 1:
            raise ValueError("The UTC place cannot be removed")
        del self._places[index]

    @property
    def zulu(self) -> Place:
        return next(place for place in self._places if place.is_zulu())

    def local_places(self) -> List[Place]:
        return [place for place in self._places if place.is_local()]

    def find(self, city: str) -> Optional[Place]:
        """First place displayed under the given city label (case-insensitive)."""

        wanted = city.casefold()
        for place in self._places:
            if place.city.casefold() == wanted:
                return place
        return None

    def __iter__(self) -> Iterator[Place]:
        return iter(list(self._places))

    def __len__(self) -> int:
        return len(self._places)

    def __getitem__(self, index: int) -> Place:
        return self._places[index]
