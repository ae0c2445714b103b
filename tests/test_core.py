# tests/test_core.py

from datetime import date

import pytest

from calastro.core import config
from calastro.core.config import SearchLimits
from calastro.core.errors import ConfigError, DomainError
from calastro.core.time import (
    date_from_fixed,
    fixed_from_date,
    fixed_from_gregorian,
    gregorian_date_difference,
    gregorian_from_fixed,
    gregorian_leap_year,
    gregorian_year_from_fixed,
)
from calastro.core.types import Location


# ------------------------------------------------------------
# Gregorian collaborator
# ------------------------------------------------------------

@pytest.mark.parametrize(
    "ymd",
    [(1, 1, 1), (1945, 11, 12), (2000, 2, 29), (2003, 10, 17), (2100, 3, 1), (9999, 12, 31)],
)
def test_fixed_matches_python_ordinal(ymd):
    assert fixed_from_gregorian(*ymd) == date(*ymd).toordinal()
    assert gregorian_from_fixed(date(*ymd).toordinal()) == ymd


def test_proleptic_years_before_one():
    assert fixed_from_gregorian(0, 12, 31) == 0
    assert gregorian_from_fixed(0) == (0, 12, 31)
    assert gregorian_from_fixed(-1) == (0, 12, 30)
    # -586 July 24 (Meeus / Reingold sample date)
    assert fixed_from_gregorian(-586, 7, 24) == -214193
    assert gregorian_year_from_fixed(-214193) == -586


def test_leap_years():
    assert gregorian_leap_year(2000)
    assert gregorian_leap_year(2024)
    assert not gregorian_leap_year(1900)
    assert not gregorian_leap_year(2023)


def test_date_difference_and_datetime_bridge():
    assert gregorian_date_difference((1900, 1, 1), (1900, 7, 1)) == 181
    assert fixed_from_date(date(2003, 10, 17)) == 731505
    assert date_from_fixed(731505) == date(2003, 10, 17)


# ------------------------------------------------------------
# Location
# ------------------------------------------------------------

def test_location_defaults():
    loc = Location(10.0, 20.0)
    assert loc.elevation == 0.0
    assert loc.zone == 0.0


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(latitude=91.0, longitude=0.0),
        dict(latitude=0.0, longitude=-181.0),
        dict(latitude=0.0, longitude=0.0, zone=1.5),
    ],
)
def test_location_validation(kwargs):
    with pytest.raises(DomainError):
        Location(**kwargs)


def test_location_is_immutable():
    loc = Location(10.0, 20.0)
    with pytest.raises(AttributeError):
        loc.latitude = 5.0


# ------------------------------------------------------------
# SearchLimits
# ------------------------------------------------------------

def test_limits_from_env():
    lim = SearchLimits.from_env({"CALASTRO_MAX_STEPS": "42", "CALASTRO_MAX_BISECTIONS": " "})
    assert lim.max_steps == 42
    assert lim.max_bisections == SearchLimits().max_bisections


def test_limits_from_env_rejects_garbage():
    with pytest.raises(ConfigError):
        SearchLimits.from_env({"CALASTRO_MAX_DEPRESSION_ITERATIONS": "many"})
    with pytest.raises(ConfigError):
        SearchLimits.from_env({"CALASTRO_MAX_STEPS": "0"})


def test_default_limits_reads_environment(monkeypatch):
    monkeypatch.setenv("CALASTRO_MAX_STEPS", "123")
    config.default_limits.cache_clear()
    try:
        assert config.default_limits().max_steps == 123
        assert config.resolve(None).max_steps == 123
        assert config.resolve(SearchLimits(max_steps=7)).max_steps == 7
    finally:
        config.default_limits.cache_clear()
