from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Tuple

from .errors import InvalidTimeError, UnknownCityError


def check_time_of_day(hour: int, minute: int) -> None:
    """Raise :class:`InvalidTimeError` unless ``hour:minute`` is a valid time of day."""
    for label, value, upper in (("hour", hour, 23), ("minute", minute, 59)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTimeError(f"{label} must be an integer, got {value!r}")
        if not 0 <= value <= upper:
            raise InvalidTimeError(f"{label} must be between 0 and {upper}, got {value}")


@dataclass(frozen=True)
class City:
    name: str
    zone_id: str


@dataclass(frozen=True)
class CivilTime:
    """A wall-clock reading in one zone at one instant.

    ``utc_offset`` comes from the zone's rule table for the instant the
    reading was projected from. Build instances with
    :meth:`InstantProjector.project` rather than by hand.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    utc_offset: timedelta

    @classmethod
    def from_datetime(cls, value: datetime) -> CivilTime:
        offset = value.utcoffset()
        if offset is None:
            raise TypeError("CivilTime needs an aware datetime")
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            utc_offset=offset,
        )

    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        """Return an aware datetime carrying a fixed offset (not the zone)."""
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            tzinfo=timezone(self.utc_offset),
        )

    def isoformat(self) -> str:
        return self.to_datetime().isoformat()


@dataclass(frozen=True)
class ConversionRequest:
    source_city: str
    hour: int
    minute: int

    def __post_init__(self) -> None:
        check_time_of_day(self.hour, self.minute)


@dataclass(frozen=True)
class ConversionResult:
    source_city: str
    source_time: CivilTime
    target_city: str
    target_time: CivilTime
    instant: datetime


@dataclass(frozen=True)
class Snapshot:
    """One clock reading projected into every registered city."""

    instant: datetime
    readings: Tuple[Tuple[City, CivilTime], ...]

    def for_city(self, name: str) -> CivilTime:
        for city, civil in self.readings:
            if city.name == name:
                return civil
        raise UnknownCityError(f"unknown city: {name!r}")


__all__ = [
    "City",
    "CivilTime",
    "ConversionRequest",
    "ConversionResult",
    "Snapshot",
    "check_time_of_day",
]
