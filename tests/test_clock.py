from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

import cityclock.clock as clock_module
from cityclock.clock import ClockSource, FixedClock, SystemClock
from cityclock.errors import ClockUnavailableError


def test_system_clock_reads_aware_utc():
    clock = SystemClock()
    first = clock.now()
    second = clock.now()
    assert first.utcoffset() == timedelta(0)
    assert second >= first
    assert isinstance(clock, ClockSource)


def test_system_clock_failure(monkeypatch):
    class BrokenDatetime:
        @staticmethod
        def now(tz=None):
            raise OSError("clock_gettime failed")

    monkeypatch.setattr(clock_module, "datetime", BrokenDatetime)
    with pytest.raises(ClockUnavailableError):
        SystemClock().now()


def test_fixed_clock_normalises_to_utc():
    tehran = timezone(timedelta(hours=3, minutes=30))
    clock = FixedClock(datetime(2026, 1, 15, 20, 30, tzinfo=tehran))
    assert clock.now() == datetime(2026, 1, 15, 17, 0, tzinfo=timezone.utc)
    assert clock.now().tzinfo is timezone.utc


def test_fixed_clock_rejects_naive():
    with pytest.raises(TypeError):
        FixedClock(datetime(2026, 1, 15, 12, 0))
