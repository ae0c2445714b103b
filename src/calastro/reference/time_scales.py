"""
calastro.reference.time_scales

Moments, time zones and sundial time.

A moment is a real number of days since R.D. 0; its integer part is the
fixed date and its fractional part the time of day. Universal, local mean,
standard (zone) and apparent (sundial) time are all expressed this way and
differ only by additive offsets.
"""

from __future__ import annotations

import math

from ..core.types import Degrees, FixedDate, Location, Moment
from ..engines.angles import (
    arcsin_degrees,
    arctan_degrees,
    angle,
    cos_degrees,
    hr,
    mod,
    sign,
    sin_degrees,
    tan_degrees,
)
from ..engines.search import poly
from .deltat import (
    dynamical_from_universal,
    ephemeris_correction,
    universal_from_dynamical,
)

__all__ = [
    "JD_EPOCH",
    "J2000",
    "fixed_from_moment",
    "time_from_moment",
    "moment_from_jd",
    "jd_from_moment",
    "fixed_from_jd",
    "jd_from_fixed",
    "zone_from_longitude",
    "universal_from_local",
    "local_from_universal",
    "standard_from_universal",
    "universal_from_standard",
    "standard_from_local",
    "local_from_standard",
    "ephemeris_correction",
    "dynamical_from_universal",
    "universal_from_dynamical",
    "julian_centuries",
    "equation_of_time",
    "apparent_from_local",
    "local_from_apparent",
    "apparent_from_universal",
    "universal_from_apparent",
    "midnight",
    "midday",
    "sidereal_from_moment",
    "obliquity",
    "declination",
    "right_ascension",
]

# R.D. moment of JD 0 (noon, November 24, 4714 BCE Gregorian)
JD_EPOCH: Moment = -1721424.5

# Noon at the start of Gregorian year 2000
J2000: Moment = 730120.5


# ============================================================
# Fixed dates, moments and Julian days
# ============================================================

def fixed_from_moment(tee: Moment) -> FixedDate:
    return int(math.floor(tee))


def time_from_moment(tee: Moment) -> float:
    """Fraction of the day elapsed at `tee`, in [0, 1)."""
    return mod(tee, 1.0)


def moment_from_jd(jd: float) -> Moment:
    return jd + JD_EPOCH


def jd_from_moment(tee: Moment) -> float:
    return tee - JD_EPOCH


def fixed_from_jd(jd: float) -> FixedDate:
    return fixed_from_moment(moment_from_jd(jd))


def jd_from_fixed(fixed: FixedDate) -> float:
    return jd_from_moment(fixed)


# ============================================================
# Zones
# ============================================================

def zone_from_longitude(longitude: Degrees) -> float:
    """Local mean time minus UT, as a fraction of a day."""
    return longitude / 360.0


def universal_from_local(t_local: Moment, location: Location) -> Moment:
    return t_local - zone_from_longitude(location.longitude)


def local_from_universal(t_universal: Moment, location: Location) -> Moment:
    return t_universal + zone_from_longitude(location.longitude)


def standard_from_universal(t_universal: Moment, location: Location) -> Moment:
    return t_universal + location.zone


def universal_from_standard(t_standard: Moment, location: Location) -> Moment:
    return t_standard - location.zone


def standard_from_local(t_local: Moment, location: Location) -> Moment:
    return standard_from_universal(universal_from_local(t_local, location), location)


def local_from_standard(t_standard: Moment, location: Location) -> Moment:
    return local_from_universal(universal_from_standard(t_standard, location), location)


# ============================================================
# Dynamical time
# ============================================================

def julian_centuries(tee: Moment) -> float:
    """Julian centuries of dynamical time since J2000, for universal `tee`."""
    return (dynamical_from_universal(tee) - J2000) / 36525.0


# ============================================================
# Sundial time
# ============================================================

def equation_of_time(tee: Moment) -> float:
    """
    Apparent minus mean solar time at `tee`, as a fraction of a day.
    Meeus, Astronomical Algorithms, 2nd ed., p. 185; clamped to half a day.
    """
    c = julian_centuries(tee)
    lam = poly(c, (280.46645, 36000.76983, 0.0003032))
    anomaly = poly(c, (357.52910, 35999.05030, -0.0001559, -0.00000048))
    eccentricity = poly(c, (0.016708617, -0.000042037, -0.0000001236))

    epsilon = obliquity(tee)
    y = tan_degrees(epsilon / 2.0) ** 2

    equation = (
        y * sin_degrees(2.0 * lam)
        - 2.0 * eccentricity * sin_degrees(anomaly)
        + 4.0 * eccentricity * y * sin_degrees(anomaly) * cos_degrees(2.0 * lam)
        - 0.5 * y * y * sin_degrees(4.0 * lam)
        - 1.25 * eccentricity * eccentricity * sin_degrees(2.0 * anomaly)
    ) / (2.0 * math.pi)

    return sign(equation) * min(abs(equation), hr(12))


def apparent_from_local(t_local: Moment, location: Location) -> Moment:
    return t_local + equation_of_time(universal_from_local(t_local, location))


def local_from_apparent(t_apparent: Moment, location: Location) -> Moment:
    # the correction is evaluated at the apparent moment taken as local time
    return t_apparent - equation_of_time(universal_from_local(t_apparent, location))


def apparent_from_universal(t_universal: Moment, location: Location) -> Moment:
    return apparent_from_local(local_from_universal(t_universal, location), location)


def universal_from_apparent(t_apparent: Moment, location: Location) -> Moment:
    return universal_from_local(local_from_apparent(t_apparent, location), location)


def midnight(fixed: FixedDate, location: Location) -> Moment:
    """Universal moment of true (apparent) midnight starting `fixed`."""
    return universal_from_apparent(fixed, location)


def midday(fixed: FixedDate, location: Location) -> Moment:
    """Universal moment of true (apparent) noon on `fixed`."""
    return universal_from_apparent(fixed + hr(12), location)


# ============================================================
# Sidereal time and equatorial coordinates
# ============================================================

def sidereal_from_moment(tee: Moment) -> Degrees:
    """Mean sidereal time at universal `tee`, as an hour angle in degrees."""
    c = (tee - J2000) / 36525.0
    return mod(poly(c, (
        280.46061837,
        36525.0 * 360.98564736629,
        0.000387933,
        -1.0 / 38710000.0,
    )), 360.0)


def obliquity(tee: Moment) -> Degrees:
    """Mean obliquity of the ecliptic."""
    c = julian_centuries(tee)
    return angle(23, 26, 21.448) + poly(c, (
        0.0,
        -angle(0, 0, 46.8150),
        -angle(0, 0, 0.00059),
        angle(0, 0, 0.001813),
    ))


def declination(tee: Moment, beta: Degrees, lam: Degrees) -> Degrees:
    """
    Declination of the point at ecliptic latitude `beta`, longitude `lam`.
    Returned in [0, 360): southern declinations come out near 360.
    """
    epsilon = obliquity(tee)
    return arcsin_degrees(
        sin_degrees(beta) * cos_degrees(epsilon)
        + cos_degrees(beta) * sin_degrees(epsilon) * sin_degrees(lam)
    )


def right_ascension(tee: Moment, beta: Degrees, lam: Degrees) -> Degrees:
    epsilon = obliquity(tee)
    ra = arctan_degrees(
        sin_degrees(lam) * cos_degrees(epsilon) - tan_degrees(beta) * sin_degrees(epsilon),
        cos_degrees(lam),
    )
    # both arguments vanish only at the celestial poles, where any value will do
    return 0.0 if ra is None else ra
