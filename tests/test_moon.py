# tests/test_moon.py

import pytest

from calastro.core.config import SearchLimits
from calastro.core.errors import SearchExhaustedError
from calastro.core.time import fixed_from_gregorian
from calastro.core.types import Location
from calastro.reference import lunar
from calastro.reference import riseset
from calastro.reference import time_scales as ts
from calastro.reference.locations import JERUSALEM

START = fixed_from_gregorian(2023, 1, 1)


@pytest.fixture(scope="module")
def month_of_moonrises():
    return [riseset.moonrise(START + i, JERUSALEM) for i in range(30)]


@pytest.fixture(scope="module")
def month_of_moonsets():
    return [riseset.moonset(START + i, JERUSALEM) for i in range(30)]


def test_moonrise_defined_on_most_days(month_of_moonrises):
    defined = [t for t in month_of_moonrises if t is not None]
    assert 29 <= len(defined) <= 30
    assert len(month_of_moonrises) - len(defined) <= 1


def test_moonset_defined_on_most_days(month_of_moonsets):
    defined = [t for t in month_of_moonsets if t is not None]
    assert 29 <= len(defined) <= 30


def test_moon_events_fall_on_their_day(month_of_moonrises, month_of_moonsets):
    for i, (rise, setting) in enumerate(zip(month_of_moonrises, month_of_moonsets)):
        for t in (rise, setting):
            if t is not None:
                assert START + i <= t < START + i + 1


def test_moon_is_on_horizon_at_moonrise(month_of_moonrises):
    for i, rise in enumerate(month_of_moonrises):
        if rise is None or rise == START + i:
            continue
        alt = riseset.observed_lunar_altitude(ts.universal_from_standard(rise, JERUSALEM), JERUSALEM)
        assert abs(alt) < 1.0


def test_moonrise_drifts_later(month_of_moonrises):
    pairs = [
        (a, b) for a, b in zip(month_of_moonrises, month_of_moonrises[1:])
        if a is not None and b is not None
    ]
    later = [b - a for a, b in pairs]
    # about 50 minutes later each day
    mean = sum(later) / len(later)
    assert 1.0 < mean < 1.08


def test_observed_altitude_includes_refraction():
    t = START + 0.3
    topo = lunar.topocentric_lunar_altitude(t, JERUSALEM)
    assert riseset.observed_lunar_altitude(t, JERUSALEM) > topo


def test_moonrise_bisection_is_bounded():
    with pytest.raises(SearchExhaustedError):
        riseset.moonrise(START, JERUSALEM, limits=SearchLimits(max_bisections=3))


@pytest.mark.parametrize("latitude", [90.0, -90.0])
@pytest.mark.parametrize("event", [riseset.moonrise, riseset.moonset])
def test_moon_events_at_the_poles(event, latitude):
    pole = Location(latitude, 0.0)
    start = fixed_from_gregorian(2024, 3, 1)
    for day in range(start, start + 5):
        t = event(day, pole)
        if t is not None and t != day:
            alt = riseset.observed_lunar_altitude(ts.universal_from_standard(t, pole), pole)
            assert abs(alt) < 1.0


@pytest.mark.parametrize("event", [riseset.moonrise, riseset.moonset])
def test_moon_events_at_high_latitude_are_horizon_crossings(event):
    north = Location(75.0, 20.0, 0.0, 1 / 24)
    start = fixed_from_gregorian(2025, 1, 1)
    results = [(day, event(day, north)) for day in range(start, start + 60)]
    # the moon stays above or below the horizon for days at a time
    assert any(t is None for _, t in results)
    assert any(t is not None for _, t in results)
    for day, t in results:
        if t is None or t == day:
            continue
        alt = riseset.observed_lunar_altitude(ts.universal_from_standard(t, north), north)
        assert abs(alt) < 1.0
