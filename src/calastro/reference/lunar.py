# reference/lunar.py

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..core.config import SearchLimits
from ..core.types import Degrees, FixedDate, Location, Moment
from ..engines.angles import (
    arcsin_degrees,
    cos_degrees,
    mod,
    mod3,
    sin_degrees,
    wrap_deg,
)
from ..engines.search import final_index, invert_angular, next_index, poly
from ..engines.tables import (
    LUNAR_DISTANCE,
    LUNAR_LATITUDE,
    LUNAR_LONGITUDE,
    NEW_MOON_TERMS,
    NEW_MOON_ADDITIONAL,
)
from . import time_scales as ts
from .solar import nutation, precession, solar_longitude

logger = logging.getLogger(__name__)

MEAN_SYNODIC_MONTH = 29.530588861

NEW_MOON: Degrees = 0.0
FIRST_QUARTER_MOON: Degrees = 90.0
FULL_MOON: Degrees = 180.0
LAST_QUARTER_MOON: Degrees = 270.0

# Index of the new moon of January 6, 2000, counted from the one of January 11, 1 CE
_N0 = 24724

_SIDEREAL_START = 156.13605090692624

# Mean equatorial radius of the earth (m)
_EARTH_RADIUS = 6378140.0


# ------------------------------------------------------------
# Mean elements (arguments: Julian centuries from J2000)
# Meeus, Astronomical Algorithms, 2nd ed., pp. 337-340
# ------------------------------------------------------------

def mean_lunar_longitude(c: float) -> Degrees:
    return mod(poly(c, (218.3164477, 481267.88123421, -0.0015786, 1 / 538841, -1 / 65194000)), 360.0)

def lunar_elongation(c: float) -> Degrees:
    return mod(poly(c, (297.8501921, 445267.1114034, -0.0018819, 1 / 545868, -1 / 113065000)), 360.0)

def solar_anomaly(c: float) -> Degrees:
    return mod(poly(c, (357.5291092, 35999.0502909, -0.0001536, 1 / 24490000)), 360.0)

def lunar_anomaly(c: float) -> Degrees:
    return mod(poly(c, (134.9633964, 477198.8675055, 0.0087414, 1 / 69699, -1 / 14712000)), 360.0)

def moon_node(c: float) -> Degrees:
    """Argument of latitude of the moon."""
    return mod(poly(c, (93.2720950, 483202.0175233, -0.0036539, -1 / 3526000, 1 / 863310000)), 360.0)


def _eccentricity_factor(c: float) -> float:
    return poly(c, (1.0, -0.002516, -0.0000074))


def _periodic_sum(table, c: float, cosine: bool = False) -> float:
    """
    Sum over a (v, w, x, y, z) lunar table: v * E^|x| * trig(w D + x M + y M' + z F).
    """
    args = (lunar_elongation(c), solar_anomaly(c), lunar_anomaly(c), moon_node(c))
    factors = _eccentricity_factor(c) ** np.abs(table.array("x"))
    if cosine:
        return table.cosine_sum(args, factors)
    return table.sine_sum(args, factors)


# ------------------------------------------------------------
# Position
# ------------------------------------------------------------

def lunar_longitude(tee: Moment) -> Degrees:
    """
    Apparent geocentric longitude of the moon at universal `tee`, in [0, 360).
    Meeus, Astronomical Algorithms, 2nd ed., pp. 338-342.
    """
    c = ts.julian_centuries(tee)
    ml = mean_lunar_longitude(c)
    correction = _periodic_sum(LUNAR_LONGITUDE, c) / 1000000.0
    venus = sin_degrees(119.75 + c * 131.849) * 3958 / 1000000.0
    jupiter = sin_degrees(53.09 + c * 479264.29) * 318 / 1000000.0
    flat_earth = sin_degrees(ml - moon_node(c)) * 1962 / 1000000.0
    return wrap_deg(ml + correction + venus + jupiter + flat_earth + nutation(tee))


def lunar_latitude(tee: Moment) -> Degrees:
    """Geocentric latitude of the moon, a small signed angle."""
    c = ts.julian_centuries(tee)
    ml = mean_lunar_longitude(c)
    la = lunar_anomaly(c)
    mn = moon_node(c)
    beta = _periodic_sum(LUNAR_LATITUDE, c) / 1000000.0
    venus = (
        sin_degrees(119.75 + c * 131.849 + mn)
        + sin_degrees(119.75 + c * 131.849 - mn)
    ) * (175 / 1000000.0)
    flat_earth = (
        127 * sin_degrees(ml - la)
        - 115 * sin_degrees(ml + la)
        - 2235 * sin_degrees(ml)
    ) / 1000000.0
    extra = sin_degrees(313.45 + c * 481266.484) * (382 / 1000000.0)
    return beta + venus + flat_earth + extra


def lunar_distance(tee: Moment) -> float:
    """Earth-moon distance in meters."""
    c = ts.julian_centuries(tee)
    return 385000560.0 + _periodic_sum(LUNAR_DISTANCE, c, cosine=True)


def lunar_node(fixed: FixedDate) -> Degrees:
    """Angular distance of the lunar node from the equinoctial point, in [-90, 90)."""
    return mod3(moon_node(ts.julian_centuries(fixed)), -90.0, 90.0)


def sidereal_lunar_longitude(tee: Moment) -> Degrees:
    return wrap_deg(lunar_longitude(tee) - precession(tee) + _SIDEREAL_START)


def lunar_altitude(tee: Moment, location: Location) -> Degrees:
    """
    Geocentric altitude of the moon in [-180, 180), ignoring parallax and
    refraction.
    """
    lam = lunar_longitude(tee)
    beta = lunar_latitude(tee)
    alpha = ts.right_ascension(tee, beta, lam)
    delta = ts.declination(tee, beta, lam)
    theta0 = ts.sidereal_from_moment(tee)
    cap_h = mod(theta0 + location.longitude - alpha, 360.0)
    altitude = arcsin_degrees(
        sin_degrees(location.latitude) * sin_degrees(delta)
        + cos_degrees(location.latitude) * cos_degrees(delta) * cos_degrees(cap_h)
    )
    return mod3(altitude, -180.0, 180.0)


def lunar_parallax(tee: Moment, location: Location) -> Degrees:
    geo = lunar_altitude(tee, location)
    delta = lunar_distance(tee)
    return arcsin_degrees(_EARTH_RADIUS / delta * cos_degrees(geo))


def topocentric_lunar_altitude(tee: Moment, location: Location) -> Degrees:
    """Altitude of the moon seen from `location`, ignoring refraction."""
    return lunar_altitude(tee, location) - lunar_parallax(tee, location)


def lunar_diameter(tee: Moment) -> Degrees:
    """Geocentric apparent diameter of the moon."""
    return 1792367000 / (9 * lunar_distance(tee))


# ------------------------------------------------------------
# New moons
# ------------------------------------------------------------

def nth_new_moon(n: int) -> Moment:
    """
    Universal moment of the n-th new moon after the new moon of
    January 11, 1 CE (n may be negative).
    Meeus, Astronomical Algorithms, corrected 2nd ed. (2005), ch. 49.
    """
    k = n - _N0
    c = k / 1236.85

    approx = ts.J2000 + poly(c, (
        5.09766,
        MEAN_SYNODIC_MONTH * 1236.85,
        0.00015437,
        -0.000000150,
        0.00000000073,
    ))
    cap_e = poly(c, (1.0, -0.002516, -0.0000074))
    sa = poly(c, (2.5534, 1236.85 * 29.10535670, -0.0000014, -0.00000011))
    la = poly(c, (201.5643, 385.81693528 * 1236.85, 0.0107582, 0.00001238, -0.000000058))
    arg = poly(c, (160.7108, 390.67050284 * 1236.85, -0.0016118, -0.00000227, 0.000000011))
    omega = poly(c, (124.7746, -1.56375588 * 1236.85, 0.0020672, 0.00000215))

    correction = -0.00017 * sin_degrees(omega) + NEW_MOON_TERMS.evaluate(
        lambda v, w, x, y, z: v * cap_e ** w * sin_degrees(x * sa + y * la + z * arg)
    )
    extra = 0.000325 * sin_degrees(poly(c, (299.77, 132.8475848, -0.009173)))
    additional = NEW_MOON_ADDITIONAL.evaluate(
        lambda const, coeff, amp: amp * sin_degrees(const + coeff * k)
    )
    return ts.universal_from_dynamical(approx + correction + extra + additional)


def _estimate_new_moon_index(tee: Moment) -> int:
    t0 = nth_new_moon(0)
    phi = lunar_phase(tee)
    return round((tee - t0) / MEAN_SYNODIC_MONTH - phi / 360.0)


def new_moon_before(tee: Moment, *, limits: Optional[SearchLimits] = None) -> Moment:
    """Universal moment of the last new moon strictly before `tee`."""
    n = _estimate_new_moon_index(tee)
    logger.debug("new_moon_before(%s): estimated index %d", tee, n)
    k = final_index(n - 1, lambda i: nth_new_moon(i) < tee, limits=limits)
    return nth_new_moon(k)


def new_moon_at_or_after(tee: Moment, *, limits: Optional[SearchLimits] = None) -> Moment:
    """Universal moment of the first new moon at or after `tee`."""
    n = _estimate_new_moon_index(tee)
    logger.debug("new_moon_at_or_after(%s): estimated index %d", tee, n)
    k = next_index(n, lambda i: nth_new_moon(i) >= tee, limits=limits)
    return nth_new_moon(k)


# ------------------------------------------------------------
# Phase
# ------------------------------------------------------------

def lunar_phase(tee: Moment) -> Degrees:
    """
    Elongation of the moon from the sun in [0, 360): 0 new, 90 first
    quarter, 180 full, 270 last quarter.

    Near a new moon the longitude difference and the position within the
    mean lunation can straddle 0/360; when they disagree by more than 180
    the lunation-based value is used.
    """
    phi = mod(lunar_longitude(tee) - solar_longitude(tee), 360.0)
    t0 = nth_new_moon(0)
    n = round((tee - t0) / MEAN_SYNODIC_MONTH)
    phi_prime = 360.0 * mod((tee - nth_new_moon(n)) / MEAN_SYNODIC_MONTH, 1.0)
    if abs(phi - phi_prime) > 180.0:
        return phi_prime
    return phi


def lunar_phase_at_or_before(phi: Degrees, tee: Moment, *, limits: Optional[SearchLimits] = None) -> Moment:
    """Last universal moment at or before `tee` when the lunar phase was `phi`."""
    tau = tee - (MEAN_SYNODIC_MONTH / 360.0) * mod(lunar_phase(tee) - phi, 360.0)
    a = tau - 2.0
    b = min(tee, tau + 2.0)
    return invert_angular(lunar_phase, phi, a, b, limits=limits)


def lunar_phase_at_or_after(phi: Degrees, tee: Moment, *, limits: Optional[SearchLimits] = None) -> Moment:
    """First universal moment at or after `tee` when the lunar phase is `phi`."""
    tau = tee + (MEAN_SYNODIC_MONTH / 360.0) * mod(phi - lunar_phase(tee), 360.0)
    a = max(tee, tau - 2.0)
    b = tau + 2.0
    return invert_angular(lunar_phase, phi, a, b, limits=limits)
