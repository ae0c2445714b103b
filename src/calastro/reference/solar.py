# reference/solar.py

from __future__ import annotations

import logging
from typing import Optional

from ..core.config import SearchLimits
from ..core.time import gregorian_new_year
from ..core.types import Degrees, Location, Moment
from ..engines.angles import (
    arcsecs,
    arcsin_degrees,
    arctan_degrees,
    cos_degrees,
    mod,
    mod3,
    sin_degrees,
    wrap_deg,
)
from ..engines.search import invert_angular, poly
from ..engines.tables import SOLAR_LONGITUDE
from . import time_scales as ts

logger = logging.getLogger(__name__)

MEAN_TROPICAL_YEAR = 365.242189
MEAN_SIDEREAL_YEAR = 365.25636

# Solar longitudes of the equinoxes and solstices
SPRING: Degrees = 0.0
SUMMER: Degrees = 90.0
AUTUMN: Degrees = 180.0
WINTER: Degrees = 270.0

# Sidereal longitude of the equinox at J2000 (Lahiri-style zero point)
_SIDEREAL_START = 336.13605101930455


def solar_longitude(tee: Moment) -> Degrees:
    """
    Apparent longitude of the sun at universal moment `tee`, in [0, 360).

    Bretagnon & Simon, "Planetary Programs and Tables from -4000 to +2800"
    (1986): 49 periodic terms on top of a secular term, then aberration
    and nutation.
    """
    c = ts.julian_centuries(tee)
    periods = SOLAR_LONGITUDE.evaluate(
        lambda x, y, z: x * sin_degrees(y + z * c)
    )
    lam = 282.7771834 + 36000.76953744 * c + 0.000005729577951308232 * periods
    return wrap_deg(lam + aberration(tee) + nutation(tee))


def nutation(tee: Moment) -> Degrees:
    """Longitudinal nutation."""
    c = ts.julian_centuries(tee)
    a = poly(c, (124.90, -1934.134, 0.002063))
    b = poly(c, (201.11, 72001.5377, 0.00057))
    return -0.004778 * sin_degrees(a) - 0.0003667 * sin_degrees(b)


def aberration(tee: Moment) -> Degrees:
    c = ts.julian_centuries(tee)
    return 0.0000974 * cos_degrees(177.63 + 35999.01848 * c) - 0.005575


def solar_longitude_after(
    lam: Degrees,
    tee: Moment,
    *,
    limits: Optional[SearchLimits] = None,
) -> Moment:
    """
    First universal moment at or after `tee` when the solar longitude is `lam`.
    """
    rate = MEAN_TROPICAL_YEAR / 360.0
    tau = tee + rate * mod(lam - solar_longitude(tee), 360.0)
    a = max(tee, tau - 5.0)
    b = tau + 5.0
    logger.debug("solar_longitude_after(%s): bracket [%.5f, %.5f]", lam, a, b)
    return invert_angular(solar_longitude, lam, a, b, limits=limits)


def season_in_gregorian(season: Degrees, g_year: int, *, limits: Optional[SearchLimits] = None) -> Moment:
    """Universal moment of `season` (e.g. WINTER) in Gregorian year `g_year`."""
    return solar_longitude_after(season, gregorian_new_year(g_year), limits=limits)


def estimate_prior_solar_longitude(lam: Degrees, tee: Moment) -> Moment:
    """
    Approximate moment at or before `tee` when the solar longitude just
    exceeded `lam`. Never later than `tee`.
    """
    rate = MEAN_TROPICAL_YEAR / 360.0
    tau = tee - rate * mod(solar_longitude(tee) - lam, 360.0)
    delta = mod3(solar_longitude(tau) - lam, -180.0, 180.0)
    return min(tee, tau - rate * delta)


def precession(tee: Moment) -> Degrees:
    """
    Precession at `tee` of the J2000 point (0, 0).
    Meeus, Astronomical Algorithms, 2nd ed., pp. 136-137.
    """
    c = ts.julian_centuries(tee)
    eta = mod(poly(c, (0.0, arcsecs(47.0029), arcsecs(-0.03302), arcsecs(0.000060))), 360.0)
    cap_p = mod(poly(c, (174.876384, arcsecs(-869.8089), arcsecs(0.03536))), 360.0)
    p = mod(poly(c, (0.0, arcsecs(5029.0966), arcsecs(1.11113), arcsecs(0.000006))), 360.0)
    cap_a = cos_degrees(eta) * sin_degrees(cap_p)
    cap_b = cos_degrees(cap_p)
    arg = arctan_degrees(cap_a, cap_b)
    if arg is None:
        arg = 0.0
    return mod(p + cap_p - arg, 360.0)


def sidereal_solar_longitude(tee: Moment) -> Degrees:
    return wrap_deg(solar_longitude(tee) - precession(tee) + _SIDEREAL_START)


def solar_altitude(tee: Moment, location: Location) -> Degrees:
    """
    Geocentric altitude of the sun in (-180, 180], ignoring parallax and
    refraction.
    """
    lam = solar_longitude(tee)
    alpha = ts.right_ascension(tee, 0.0, lam)
    delta = ts.declination(tee, 0.0, lam)
    theta0 = ts.sidereal_from_moment(tee)
    cap_h = mod(theta0 + location.longitude - alpha, 360.0)
    altitude = arcsin_degrees(
        sin_degrees(location.latitude) * sin_degrees(delta)
        + cos_degrees(location.latitude) * cos_degrees(delta) * cos_degrees(cap_h)
    )
    return mod3(altitude, -180.0, 180.0)
