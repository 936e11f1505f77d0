"""Wall-clock time to instant resolution.

A civil time in a zone with daylight saving rules maps to zero, one or two
instants. The resolver always returns exactly one:

``normal``
    One offset applies; ``instant = civil - offset``.
``overlap``
    Clocks moved back and the civil time happens twice. The earlier instant
    wins, i.e. the one read with the offset in force before the transition.
``gap``
    Clocks moved forward and the civil time never happens. The candidate is
    moved forward by the size of the gap and resolved again, so 02:30 on a
    one-hour spring-forward night resolves like 03:30.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple
from zoneinfo import ZoneInfo

from .models import check_time_of_day
from .zones import ZoneRegistry

logger = logging.getLogger(__name__)

NORMAL = "normal"
OVERLAP = "overlap"
GAP = "gap"

_MAX_SHIFTS = 4


def _offsets(candidate: datetime, tz: ZoneInfo) -> Tuple[str, timedelta, timedelta]:
    # fold=0 reads the offset in force before a transition, fold=1 the one after.
    before = candidate.replace(tzinfo=tz, fold=0).utcoffset()
    after = candidate.replace(tzinfo=tz, fold=1).utcoffset()
    if before == after:
        return NORMAL, before, after
    if before > after:
        return OVERLAP, before, after
    return GAP, before, after


class WallClockResolver:
    def __init__(self, registry: ZoneRegistry) -> None:
        self._registry = registry

    def classify(self, day: date, hour: int, minute: int, zone_id: str) -> str:
        """Return ``"normal"``, ``"overlap"`` or ``"gap"`` for a civil time."""
        check_time_of_day(hour, minute)
        tz = self._registry.zone(zone_id)
        return _offsets(datetime.combine(day, time(hour, minute)), tz)[0]

    def resolve(self, day: date, hour: int, minute: int, zone_id: str) -> datetime:
        """Return the UTC instant at which clocks in ``zone_id`` read ``day hour:minute``.

        :raises InvalidTimeError: hour or minute out of range; checked first.
        :raises UnknownCityError: ``zone_id`` is not in the registry.
        """
        check_time_of_day(hour, minute)
        tz = self._registry.zone(zone_id)
        candidate = datetime.combine(day, time(hour, minute))

        for _ in range(_MAX_SHIFTS):
            kind, before, after = _offsets(candidate, tz)
            if kind == GAP:
                shifted = candidate + (after - before)
                logger.info(
                    "%s %s falls in a spring-forward gap; resolving as %s",
                    zone_id, candidate.isoformat(), shifted.isoformat(),
                )
                candidate = shifted
                continue
            if kind == OVERLAP:
                logger.info(
                    "%s %s is ambiguous; using the earlier offset %s",
                    zone_id, candidate.isoformat(), before,
                )
            return (candidate - before).replace(tzinfo=timezone.utc)

        raise RuntimeError(f"could not resolve {candidate.isoformat()} in {zone_id}")  # pragma: no cover


__all__ = ["GAP", "NORMAL", "OVERLAP", "WallClockResolver"]
