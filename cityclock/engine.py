from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from .clock import ClockSource, SystemClock
from .models import ConversionRequest, ConversionResult, Snapshot
from .projector import InstantProjector
from .resolver import WallClockResolver
from .zones import ZoneRegistry

logger = logging.getLogger(__name__)


class ConversionEngine:
    """Answer "what is H:M today in one city, in the other city?".

    The engine holds no mutable state; one instance serves every request.
    """

    def __init__(
        self,
        registry: ZoneRegistry,
        clock: Optional[ClockSource] = None,
        *,
        resolver: Optional[WallClockResolver] = None,
        projector: Optional[InstantProjector] = None,
    ) -> None:
        self.registry = registry
        self.clock = clock if clock is not None else SystemClock()
        self.resolver = resolver if resolver is not None else WallClockResolver(registry)
        self.projector = projector if projector is not None else InstantProjector(registry)

    def today(self, city_name: str) -> date:
        """Return the current calendar date in ``city_name``, not the host's date."""
        zone_id = self.registry.resolve(city_name)
        return self.projector.project(self.clock.now(), zone_id).date()

    def convert(self, request: ConversionRequest) -> ConversionResult:
        source = self.registry.city(request.source_city)
        target = self.registry.counterpart(source.name)

        day = self.today(source.name)
        instant = self.resolver.resolve(day, request.hour, request.minute, source.zone_id)

        source_time = self.projector.project(instant, source.zone_id)
        target_time = self.projector.project(instant, target.zone_id)
        logger.debug(
            "converted %s %02d:%02d on %s -> %s %s",
            source.name, request.hour, request.minute, day,
            target.name, target_time.isoformat(),
        )
        return ConversionResult(
            source_city=source.name,
            source_time=source_time,
            target_city=target.name,
            target_time=target_time,
            instant=instant,
        )

    def snapshot(self) -> Snapshot:
        instant = self.clock.now()
        readings = tuple(
            (city, self.projector.project(instant, city.zone_id))
            for city in self.registry.cities
        )
        return Snapshot(instant=instant, readings=readings)


__all__ = ["ConversionEngine"]
