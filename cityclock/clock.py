from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from .errors import ClockUnavailableError


@runtime_checkable
class ClockSource(Protocol):
    """Anything that can report the current instant as an aware UTC datetime."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Host wall clock. Every call reads the clock again; nothing is cached."""

    def now(self) -> datetime:
        try:
            return datetime.now(timezone.utc)
        except (OSError, OverflowError, ValueError) as exc:
            raise ClockUnavailableError("system clock could not be read") from exc

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock returning a pre-defined instant for deterministic behaviour."""

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None or self.instant.utcoffset() is None:
            raise TypeError("FixedClock needs an aware datetime")

    def now(self) -> datetime:
        return self.instant.astimezone(timezone.utc)


__all__ = ["ClockSource", "FixedClock", "SystemClock"]
