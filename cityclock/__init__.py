"""Current time and time-of-day conversion between Toronto and Tehran."""

from .clock import ClockSource, FixedClock, SystemClock
from .engine import ConversionEngine
from .errors import ClockError, ClockUnavailableError, InvalidTimeError, UnknownCityError
from .formatting import format_iso, format_long, format_time
from .models import City, CivilTime, ConversionRequest, ConversionResult, Snapshot
from .projector import InstantProjector
from .resolver import WallClockResolver
from .zones import ZoneRegistry, default_registry

__version__ = "1.0.0"

__all__ = [
    "City",
    "CivilTime",
    "ClockError",
    "ClockSource",
    "ClockUnavailableError",
    "ConversionEngine",
    "ConversionRequest",
    "ConversionResult",
    "FixedClock",
    "InstantProjector",
    "InvalidTimeError",
    "Snapshot",
    "SystemClock",
    "UnknownCityError",
    "WallClockResolver",
    "ZoneRegistry",
    "default_registry",
    "format_iso",
    "format_long",
    "format_time",
]
