"""
calastro.reference.deltat

Ephemeris correction (Dynamical Time minus Universal Time), in days.

Branch polynomials follow Meeus, "Astronomical Algorithms" (1991) for
1600..1986 and the NASA eclipse-site (Espenak-Meeus) polynomials elsewhere.
The year is the Gregorian year of the moment's date; branches are selected
on that integer year and are not blended, so the correction is piecewise
and may jump slightly at a branch boundary.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.time import gregorian_date_difference, gregorian_year_from_fixed
from ..core.types import Moment
from ..engines.search import poly

_SECONDS_PER_DAY = 86400.0

# (first year, last year) of each branch, newest first; years outside every
# range use the long-term parabola.
BRANCHES: Tuple[Tuple[int, int], ...] = (
    (2051, 2150),
    (2006, 2050),
    (1987, 2005),
    (1900, 1986),
    (1800, 1899),
    (1700, 1799),
    (1600, 1699),
    (500, 1599),
    (-499, 499),
)


def _c1900(c: float) -> float:
    # (14.15) centuries from 1900-01-01 to July 1 of the year; already in days
    return poly(c, (
        -0.00002,
        0.000297,
        0.025184,
        -0.181133,
        0.553040,
        -0.861938,
        0.677066,
        -0.212591,
    ))


def _c1800(c: float) -> float:
    return poly(c, (
        -0.000009,
        0.003844,
        0.083563,
        0.865736,
        4.867575,
        15.845535,
        31.332267,
        38.291999,
        28.316289,
        11.636204,
        2.043794,
    ))


def _long_term(year: int) -> float:
    u = (year - 1820) / 100.0
    return poly(u, (-20.0, 0.0, 32.0)) / _SECONDS_PER_DAY


def ephemeris_correction_for_year(year: int) -> float:
    """
    Dynamical minus Universal time, in days, for Gregorian `year`.
    """
    y2000 = year - 2000

    if 2051 <= year <= 2150:
        u = (year - 1820) / 100.0
        return (-20.0 + 32.0 * u * u + 0.5628 * (2150 - year)) / _SECONDS_PER_DAY
    if 2006 <= year <= 2050:
        return poly(y2000, (62.92, 0.32217, 0.005589)) / _SECONDS_PER_DAY
    if 1987 <= year <= 2005:
        return poly(y2000, (
            63.86,
            0.3345,
            -0.060374,
            0.0017275,
            0.000651814,
            0.00002373599,
        )) / _SECONDS_PER_DAY
    if 1800 <= year <= 1986:
        c = gregorian_date_difference((1900, 1, 1), (year, 7, 1)) / 36525.0
        return _c1900(c) if year >= 1900 else _c1800(c)
    if 1700 <= year <= 1799:
        return poly(year - 1700, (
            8.118780842,
            -0.005092142,
            0.003336121,
            -0.0000266484,
        )) / _SECONDS_PER_DAY
    if 1600 <= year <= 1699:
        return poly(year - 1600, (
            120.0,
            -0.9808,
            -0.01532,
            0.000140272128,
        )) / _SECONDS_PER_DAY
    if 500 <= year <= 1599:
        return poly((year - 1000) / 100.0, (
            1574.2,
            -556.01,
            71.23472,
            0.319781,
            -0.8503463,
            -0.005050998,
            0.0083572073,
        )) / _SECONDS_PER_DAY
    if -500 < year < 500:
        return poly(year / 100.0, (
            10583.6,
            -1014.41,
            33.78311,
            -5.952053,
            -0.1798452,
            0.022174192,
            0.0090316521,
        )) / _SECONDS_PER_DAY
    return _long_term(year)


def ephemeris_correction(tee: Moment) -> float:
    """Dynamical Time minus Universal Time (days) at moment `tee`."""
    year = gregorian_year_from_fixed(math.floor(tee))
    return ephemeris_correction_for_year(year)


def ephemeris_correction_seconds(tee: Moment) -> float:
    return ephemeris_correction(tee) * _SECONDS_PER_DAY


def dynamical_from_universal(t_universal: Moment) -> Moment:
    return t_universal + ephemeris_correction(t_universal)


def universal_from_dynamical(tee: Moment) -> Moment:
    """
    Universal moment from dynamical `tee`. The correction is evaluated at
    `tee` itself, so this is not an exact inverse of dynamical_from_universal
    (the two differ by far less than a second).
    """
    return tee - ephemeris_correction(tee)
