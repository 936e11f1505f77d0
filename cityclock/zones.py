from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import UnknownCityError
from .models import City

logger = logging.getLogger(__name__)

TORONTO = City(name="Toronto", zone_id="America/Toronto")
TEHRAN = City(name="Tehran", zone_id="Asia/Tehran")
DEFAULT_CITIES: Tuple[City, ...] = (TORONTO, TEHRAN)


class ZoneRegistry:
    """Read-only table of cities and their loaded zone rules.

    Every zone is loaded once, when the registry is built. The registry is
    then shared by reference with the resolver, the projector and the
    engine, and nothing is ever added to or removed from it.
    """

    __slots__ = ("_cities", "_zones", "_order")

    def __init__(self, cities: Iterable[City]) -> None:
        by_name = {}
        zones = {}
        for city in cities:
            if city.name in by_name:
                raise ValueError(f"duplicate city: {city.name!r}")
            by_name[city.name] = city
            if city.zone_id not in zones:
                try:
                    zones[city.zone_id] = ZoneInfo(city.zone_id)
                except ZoneInfoNotFoundError as exc:
                    raise ValueError(f"no rule table for zone {city.zone_id!r}") from exc
        if len(by_name) < 2:
            raise ValueError("registry needs at least two cities")
        self._order: Tuple[City, ...] = tuple(by_name.values())
        self._cities: Mapping[str, City] = MappingProxyType(by_name)
        self._zones: Mapping[str, ZoneInfo] = MappingProxyType(zones)
        logger.debug("zone registry loaded: %s", ", ".join(c.zone_id for c in self._order))

    @property
    def cities(self) -> Tuple[City, ...]:
        return self._order

    def city(self, name: str) -> City:
        try:
            return self._cities[name]
        except KeyError:
            raise UnknownCityError(f"unknown city: {name!r}") from None

    def resolve(self, name: str) -> str:
        """Return the zone id for ``name``; the lookup is case-sensitive."""
        return self.city(name).zone_id

    def zone(self, zone_id: str) -> ZoneInfo:
        try:
            return self._zones[zone_id]
        except KeyError:
            raise UnknownCityError(f"unknown zone: {zone_id!r}") from None

    def counterpart(self, name: str) -> City:
        """Return the city a conversion from ``name`` targets."""
        source = self.city(name)
        for city in self._order:
            if city != source:
                return city
        raise UnknownCityError(f"no counterpart for {name!r}")  # pragma: no cover

    def __contains__(self, name: object) -> bool:
        return name in self._cities

    def __repr__(self) -> str:
        return f"ZoneRegistry({list(self._order)!r})"


def default_registry() -> ZoneRegistry:
    return ZoneRegistry(DEFAULT_CITIES)


__all__ = ["DEFAULT_CITIES", "TEHRAN", "TORONTO", "ZoneRegistry", "default_registry"]
