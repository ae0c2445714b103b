# tests/test_sunrise.py

import pytest
from unittest.mock import patch

from calastro.core.time import fixed_from_gregorian
from calastro.core.types import Location
from calastro.engines.angles import hr, mn
from calastro.reference import riseset
from calastro.reference import solar
from calastro.reference import time_scales as ts
from calastro.reference.locations import CFS_ALERT, GREENWICH, JERUSALEM, MECCA, PADUA

# --- NREL SPA Test Case (Appendix A.5) ---
# Date: October 17, 2003
# Time Zone: -7 hours
# Longitude: -105.1786 deg (West)
# Latitude: 39.742476 deg (North)
# Delta T: 67 seconds
#
# Targets:
# L_app = 204.008551 deg
# EOT = 14.641503 min
# Sunrise = 06:12:43.46 local standard time
# Sunset = 17:20:19.19 local standard time

NREL = Location(39.742476, -105.1786, 0.0, hr(-7))
NREL_DAY = fixed_from_gregorian(2003, 10, 17)


@pytest.fixture
def mock_delta_t():
    """
    Pin Delta T to exactly 67.0 seconds, bypassing the branch polynomials
    for this specific test.
    """
    with patch("calastro.reference.time_scales.dynamical_from_universal") as mock:
        mock.side_effect = lambda t: t + 67.0 / 86400.0
        yield mock


def test_nrel_spa_solar_longitude(mock_delta_t):
    # 2003-10-17 12:30:30 LST (UTC -7) -> 19:30:30 UTC
    tee = ts.moment_from_jd(2452930.312847)
    assert solar.solar_longitude(tee) == pytest.approx(204.008551, abs=0.01)
    assert mock_delta_t.called


def test_nrel_spa_equation_of_time(mock_delta_t):
    tee = ts.moment_from_jd(2452930.312847)
    assert ts.equation_of_time(tee) * 1440.0 == pytest.approx(14.641503, abs=0.1)


def test_nrel_spa_sunrise_sunset(mock_delta_t):
    rise = riseset.sunrise(NREL_DAY, NREL)
    setting = riseset.sunset(NREL_DAY, NREL)
    assert rise is not None and setting is not None
    assert rise == pytest.approx(NREL_DAY + (6 + 12 / 60 + 43.46 / 3600) / 24, abs=mn(2))
    assert setting == pytest.approx(NREL_DAY + (17 + 20 / 60 + 19.19 / 3600) / 24, abs=mn(2))


@pytest.mark.parametrize("month", range(1, 13))
def test_greenwich_sunrise_midday_sunset_order(month):
    fixed = fixed_from_gregorian(2022, month, 15)
    rise = riseset.sunrise(fixed, GREENWICH)
    setting = riseset.sunset(fixed, GREENWICH)
    noon = ts.standard_from_universal(ts.midday(fixed, GREENWICH), GREENWICH)
    assert rise is not None and setting is not None
    assert fixed < rise < noon < setting < fixed + 1


def test_dawn_before_sunrise_and_dusk_after_sunset():
    fixed = fixed_from_gregorian(2022, 3, 1)
    assert riseset.dawn(fixed, JERUSALEM, 18.0) < riseset.sunrise(fixed, JERUSALEM)
    assert riseset.dusk(fixed, JERUSALEM, 18.0) > riseset.sunset(fixed, JERUSALEM)


def test_polar_night_and_day_have_no_sunrise():
    assert riseset.sunrise(fixed_from_gregorian(2020, 12, 21), CFS_ALERT) is None
    assert riseset.sunset(fixed_from_gregorian(2020, 6, 21), CFS_ALERT) is None
    assert riseset.daytime_temporal_hour(fixed_from_gregorian(2020, 12, 21), CFS_ALERT) is None


def test_moment_of_depression_none_when_not_reached():
    fixed = fixed_from_gregorian(2020, 6, 21)
    # astronomical twilight never ends at Greenwich around midsummer
    assert riseset.dusk(fixed, GREENWICH, 18.0) is None


def test_refraction():
    sea = Location(0.0, 0.0, 0.0, 0.0)
    assert riseset.refraction(0.0, sea) == pytest.approx(34 / 60)
    high = Location(0.0, 0.0, 1000.0, 0.0)
    assert riseset.refraction(0.0, high) > riseset.refraction(0.0, sea)
    below = Location(0.0, 0.0, -50.0, 0.0)
    assert riseset.refraction(0.0, below) == riseset.refraction(0.0, sea)


def test_sine_offset_out_of_range_in_polar_night():
    tee = fixed_from_gregorian(2020, 12, 21) + hr(6)
    assert abs(riseset.sine_offset(tee, CFS_ALERT, 0.8)) > 1


def test_jewish_times():
    fixed = fixed_from_gregorian(2023, 4, 7)
    setting = riseset.sunset(fixed, JERUSALEM)
    assert setting < riseset.jewish_dusk(fixed, JERUSALEM) < riseset.jewish_sabbath_ends(fixed, JERUSALEM)


def test_temporal_hours_cover_one_day():
    fixed = fixed_from_gregorian(2023, 6, 21)
    day = riseset.daytime_temporal_hour(fixed, JERUSALEM)
    night = riseset.nighttime_temporal_hour(fixed, JERUSALEM)
    assert day > night
    assert day + night == pytest.approx(1 / 12, abs=0.001)


def test_sundial_hours_match_sunrise():
    fixed = fixed_from_gregorian(2023, 6, 21)
    rise = riseset.sunrise(fixed, JERUSALEM)
    assert riseset.standard_from_sundial(fixed + hr(6), JERUSALEM) == pytest.approx(rise)
    h = riseset.daytime_temporal_hour(fixed, JERUSALEM)
    assert riseset.jewish_morning_end(fixed, JERUSALEM) == pytest.approx(rise + 4 * h)


def test_asr_between_noon_and_sunset():
    fixed = fixed_from_gregorian(2023, 1, 15)
    noon = ts.standard_from_universal(ts.midday(fixed, MECCA), MECCA)
    hanafi = riseset.asr(fixed, MECCA)
    shafii = riseset.alt_asr(fixed, MECCA)
    assert noon < shafii < hanafi < riseset.sunset(fixed, MECCA)


def test_asr_none_without_noon_sun():
    assert riseset.asr(fixed_from_gregorian(2020, 12, 21), CFS_ALERT) is None


def test_local_zero_hour_padua():
    for month in (1, 4, 7, 10):
        z = riseset.local_zero_hour(fixed_from_gregorian(2019, month, 10))
        assert 0.68 < ts.time_from_moment(z) < 0.92


def test_italian_time_just_after_zero_hour():
    fixed = fixed_from_gregorian(2019, 7, 10)
    z = riseset.local_zero_hour(fixed)
    italian = riseset.italian_from_local(z + hr(1))
    assert italian == pytest.approx(fixed + 1 + hr(1), abs=1e-8)


def test_local_from_italian_offsets_from_previous_zero_hour():
    fixed = fixed_from_gregorian(2019, 7, 10)
    z = riseset.local_zero_hour(fixed - 1)
    assert riseset.local_from_italian(fixed + hr(3)) == pytest.approx(z + hr(3))
    assert PADUA.zone == hr(1)
