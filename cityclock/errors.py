"""Exceptions raised by the conversion core.

The HTTP layer maps each of these to a status code; see ``cityclock.app``.
"""


class ClockError(Exception):
    """Base class for every error the core raises on purpose."""


class InvalidTimeError(ClockError, ValueError):
    """Hour or minute outside its valid range."""


class UnknownCityError(ClockError, LookupError):
    """City name (or zone id) not present in the registry."""


class ClockUnavailableError(ClockError, RuntimeError):
    """The host clock could not be read."""


__all__ = [
    "ClockError",
    "ClockUnavailableError",
    "InvalidTimeError",
    "UnknownCityError",
]
