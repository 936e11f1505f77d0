from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from cityclock.clock import FixedClock
from cityclock.engine import ConversionEngine
from cityclock.projector import InstantProjector
from cityclock.resolver import WallClockResolver
from cityclock.zones import ZoneRegistry, default_registry

TORONTO_ZONE = "America/Toronto"
TEHRAN_ZONE = "Asia/Tehran"


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def registry() -> ZoneRegistry:
    return default_registry()


@pytest.fixture()
def resolver(registry: ZoneRegistry) -> WallClockResolver:
    return WallClockResolver(registry)


@pytest.fixture()
def projector(registry: ZoneRegistry) -> InstantProjector:
    return InstantProjector(registry)


@pytest.fixture()
def engine_at(registry: ZoneRegistry) -> Callable[[datetime], ConversionEngine]:
    def factory(instant: datetime) -> ConversionEngine:
        return ConversionEngine(registry, FixedClock(instant))

    return factory
