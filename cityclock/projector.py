from __future__ import annotations

from datetime import datetime

from .models import CivilTime
from .zones import ZoneRegistry


class InstantProjector:
    """Project instants into civil time. Every instant has exactly one reading per zone."""

    def __init__(self, registry: ZoneRegistry) -> None:
        self._registry = registry

    def project(self, instant: datetime, zone_id: str) -> CivilTime:
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise TypeError("cannot project a naive datetime")
        tz = self._registry.zone(zone_id)
        return CivilTime.from_datetime(instant.astimezone(tz))


__all__ = ["InstantProjector"]
