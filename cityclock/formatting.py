"""Display strings for :class:`~cityclock.models.CivilTime`.

These avoid ``strftime("%p")`` and ``"%B"`` so the output does not depend on
the process locale.
"""
from __future__ import annotations

from .models import CivilTime

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_time(civil: CivilTime) -> str:
    """Return ``"03:45 PM"`` style text; no date, no zone abbreviation."""
    hour = civil.hour % 12 or 12
    suffix = "AM" if civil.hour < 12 else "PM"
    return f"{hour:02d}:{civil.minute:02d} {suffix}"


def format_long(civil: CivilTime) -> str:
    """Return ``"03:45 PM - October 17, 2026"`` style text."""
    return f"{format_time(civil)} - {_MONTHS[civil.month - 1]} {civil.day}, {civil.year}"


def format_iso(civil: CivilTime) -> str:
    return civil.isoformat()


__all__ = ["format_iso", "format_long", "format_time"]
