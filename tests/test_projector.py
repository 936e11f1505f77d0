from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from cityclock.errors import UnknownCityError
from tests.conftest import TEHRAN_ZONE, TORONTO_ZONE, utc

# Tehran minus Toronto: standard/standard 8:30, one side on DST 7:30 or 9:30.
ALLOWED_OFFSET_GAPS = {timedelta(hours=7, minutes=30), timedelta(hours=8, minutes=30), timedelta(hours=9, minutes=30)}


def test_project_standard_time(projector):
    civil = projector.project(utc(2026, 1, 15, 17, 0), TEHRAN_ZONE)
    assert (civil.year, civil.month, civil.day, civil.hour, civil.minute) == (2026, 1, 15, 20, 30)
    assert civil.utc_offset == timedelta(hours=3, minutes=30)


def test_project_daylight_time(projector):
    civil = projector.project(utc(2026, 7, 15, 16, 0), TORONTO_ZONE)
    assert (civil.hour, civil.minute) == (12, 0)
    assert civil.utc_offset == timedelta(hours=-4)


def test_repeated_hour_projects_with_distinct_offsets(projector):
    first = projector.project(utc(2026, 11, 1, 5, 30), TORONTO_ZONE)
    second = projector.project(utc(2026, 11, 1, 6, 30), TORONTO_ZONE)
    assert (first.hour, first.minute) == (second.hour, second.minute) == (1, 30)
    assert first.utc_offset == timedelta(hours=-4)
    assert second.utc_offset == timedelta(hours=-5)


@pytest.mark.parametrize(
    "instant",
    [
        utc(2021, 1, 10, 12, 0),
        utc(2021, 3, 15, 12, 0),
        utc(2021, 4, 10, 12, 0),
        utc(2021, 10, 1, 12, 0),
        utc(2021, 11, 20, 12, 0),
        utc(2026, 1, 15, 12, 0),
        utc(2026, 7, 15, 12, 0),
    ],
)
def test_offset_gap_is_rule_derived(projector, registry, instant):
    toronto = projector.project(instant, TORONTO_ZONE)
    tehran = projector.project(instant, TEHRAN_ZONE)
    assert toronto.utc_offset == instant.astimezone(registry.zone(TORONTO_ZONE)).utcoffset()
    assert tehran.utc_offset == instant.astimezone(registry.zone(TEHRAN_ZONE)).utcoffset()
    assert tehran.utc_offset - toronto.utc_offset in ALLOWED_OFFSET_GAPS


def test_civil_time_round_trips_to_instant(projector):
    instant = utc(2026, 10, 17, 19, 45)
    assert projector.project(instant, TEHRAN_ZONE).to_datetime() == instant
    assert projector.project(instant, TORONTO_ZONE).isoformat() == "2026-10-17T15:45:00-04:00"


def test_naive_instant_rejected(projector):
    with pytest.raises(TypeError):
        projector.project(datetime(2026, 1, 15, 12, 0), TORONTO_ZONE)


def test_unknown_zone(projector):
    with pytest.raises(UnknownCityError):
        projector.project(utc(2026, 1, 15, 12, 0), "Europe/Paris")
