"""
calastro.reference.riseset

Rising, setting and twilight of the sun and moon, and the time-of-day
systems built on them (temporal hours, asr, Italian hours).

Every public function that can legitimately have no answer on a given day
(polar day/night, a moon that does not rise on the date) returns None
instead of a moment.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..core.config import SearchLimits, resolve
from ..core.errors import SearchExhaustedError
from ..core.types import Degrees, FixedDate, Location, Moment, OptionalMoment
from ..engines.angles import (
    angle,
    arccos_degrees,
    arcmins,
    arcsecs,
    arcsin_degrees,
    arctan_degrees,
    cos_degrees,
    hr,
    mn,
    mod3,
    sec,
    sin_degrees,
    tan_degrees,
)
from ..engines.search import binary_search
from . import time_scales as ts
from .locations import PADUA
from .lunar import lunar_phase, topocentric_lunar_altitude
from .solar import solar_longitude

logger = logging.getLogger(__name__)

MORNING = True
EVENING = False

_EARTH_RADIUS = 6372000.0

# Depression angles used by Jewish ritual
SABBATH_ENDS_DEPRESSION: Degrees = angle(7, 5, 0)
JEWISH_DUSK_DEPRESSION: Degrees = angle(4, 40, 0)


# ============================================================
# Depression of the sun
# ============================================================

def sine_offset(tee: Moment, location: Location, alpha: Degrees) -> float:
    """
    Sine of the hour-angle offset between the sun at local `tee` and the
    sun at depression `alpha`. Outside [-1, 1] when that depression is
    never reached.
    """
    phi = location.latitude
    t_prime = ts.universal_from_local(tee, location)
    delta = ts.declination(t_prime, 0.0, solar_longitude(t_prime))
    return tan_degrees(phi) * tan_degrees(delta) + sin_degrees(alpha) / (
        cos_degrees(delta) * cos_degrees(phi)
    )


def approx_moment_of_depression(
    tee: Moment, location: Location, alpha: Degrees, early: bool
) -> OptionalMoment:
    """
    Local moment near `tee` when the sun's depression is `alpha` (negative
    above the horizon), morning if `early`, else evening.
    """
    attempt = sine_offset(tee, location, alpha)
    fixed = ts.fixed_from_moment(tee)
    if alpha >= 0:
        alt = fixed if early else fixed + 1
    else:
        alt = fixed + hr(12)
    value = sine_offset(alt, location, alpha) if abs(attempt) > 1 else attempt

    if abs(value) > 1:
        return None
    offset = mod3(arcsin_degrees(value) / 360.0, hr(-12), hr(12))
    hours = hr(6) - offset if early else hr(18) + offset
    return ts.local_from_apparent(fixed + hours, location)


def moment_of_depression(
    approx: Moment,
    location: Location,
    alpha: Degrees,
    early: bool,
    *,
    limits: Optional[SearchLimits] = None,
) -> OptionalMoment:
    """
    Refine approx_moment_of_depression until successive estimates agree
    within 30 seconds. Returns None when the depression is not reached.
    """
    lim = resolve(limits)
    tee = approx
    for i in range(lim.max_depression_iterations):
        nxt = approx_moment_of_depression(tee, location, alpha, early)
        if nxt is None:
            logger.debug("moment_of_depression: alpha=%s not reached near %s", alpha, approx)
            return None
        if abs(tee - nxt) < sec(30):
            logger.debug("moment_of_depression: converged after %d rounds", i + 1)
            return nxt
        tee = nxt
    raise SearchExhaustedError("moment_of_depression", lim.max_depression_iterations)


def dawn(fixed: FixedDate, location: Location, alpha: Degrees, *, limits: Optional[SearchLimits] = None) -> OptionalMoment:
    """Standard time on `fixed` of morning depression `alpha`."""
    result = moment_of_depression(fixed + hr(6), location, alpha, MORNING, limits=limits)
    if result is None:
        return None
    return ts.standard_from_local(result, location)


def dusk(fixed: FixedDate, location: Location, alpha: Degrees, *, limits: Optional[SearchLimits] = None) -> OptionalMoment:
    """Standard time on `fixed` of evening depression `alpha`."""
    result = moment_of_depression(fixed + hr(18), location, alpha, EVENING, limits=limits)
    if result is None:
        return None
    return ts.standard_from_local(result, location)


def refraction(tee: Moment, location: Location) -> Degrees:
    """
    Refraction at the horizon plus the dip of the horizon for the
    observer's elevation. The moment is unused.
    """
    h = max(0.0, location.elevation)
    dip = arccos_degrees(_EARTH_RADIUS / (_EARTH_RADIUS + h))
    return arcmins(34) + dip + arcsecs(19) * math.sqrt(h)


def sunrise(fixed: FixedDate, location: Location, *, limits: Optional[SearchLimits] = None) -> OptionalMoment:
    """Standard time of sunrise (upper limb) on `fixed`."""
    alpha = refraction(fixed + hr(6), location) + arcmins(16)
    return dawn(fixed, location, alpha, limits=limits)


def sunset(fixed: FixedDate, location: Location, *, limits: Optional[SearchLimits] = None) -> OptionalMoment:
    """Standard time of sunset (upper limb) on `fixed`."""
    alpha = refraction(fixed + hr(18), location) + arcmins(16)
    return dusk(fixed, location, alpha, limits=limits)


def jewish_sabbath_ends(fixed: FixedDate, location: Location) -> OptionalMoment:
    """End of the sabbath per Berthold Cohn."""
    return dusk(fixed, location, SABBATH_ENDS_DEPRESSION)


def jewish_dusk(fixed: FixedDate, location: Location) -> OptionalMoment:
    """Dusk per the Vilna Gaon."""
    return dusk(fixed, location, JEWISH_DUSK_DEPRESSION)


# ============================================================
# Temporal hours
# ============================================================

def daytime_temporal_hour(fixed: FixedDate, location: Location) -> Optional[float]:
    """A twelfth of the time from sunrise to sunset on `fixed`."""
    rise = sunrise(fixed, location)
    setting = sunset(fixed, location)
    if rise is None or setting is None:
        return None
    return (setting - rise) / 12.0


def nighttime_temporal_hour(fixed: FixedDate, location: Location) -> Optional[float]:
    """A twelfth of the time from sunset on `fixed` to the next sunrise."""
    rise = sunrise(fixed + 1, location)
    setting = sunset(fixed, location)
    if rise is None or setting is None:
        return None
    return (rise - setting) / 12.0


def standard_from_sundial(tee: Moment, location: Location) -> OptionalMoment:
    """
    Standard time of temporal moment `tee`, where 6:00 and 18:00 on the
    sundial clock are sunrise and sunset.
    """
    fixed = ts.fixed_from_moment(tee)
    time = 24.0 * ts.time_from_moment(tee)
    if 6.0 <= time <= 18.0:
        h = daytime_temporal_hour(fixed, location)
    elif time < 6.0:
        h = nighttime_temporal_hour(fixed - 1, location)
    else:
        h = nighttime_temporal_hour(fixed, location)
    if h is None:
        return None

    if 6.0 <= time <= 18.0:
        return sunrise(fixed, location) + (time - 6.0) * h
    if time < 6.0:
        return sunset(fixed - 1, location) + (time + 6.0) * h
    return sunset(fixed, location) + (time - 18.0) * h


def jewish_morning_end(fixed: FixedDate, location: Location) -> OptionalMoment:
    """End of morning (fourth temporal hour) per Jewish ritual."""
    return standard_from_sundial(fixed + hr(10), location)


# ============================================================
# Asr
# ============================================================

def _asr(fixed: FixedDate, location: Location, shadow: float) -> OptionalMoment:
    noon = ts.midday(fixed, location)
    phi = location.latitude
    delta = ts.declination(noon, 0.0, solar_longitude(noon))
    altitude = mod3(
        arcsin_degrees(cos_degrees(delta) * cos_degrees(phi) + sin_degrees(delta) * sin_degrees(phi)),
        -180.0,
        180.0,
    )
    if altitude <= 0:
        # sun never above the horizon at noon, no shadow
        return None
    tan_alt = tan_degrees(altitude)
    h = mod3(arctan_degrees(tan_alt, shadow * tan_alt + 1.0), -90.0, 90.0)
    return dusk(fixed, location, -h)


def asr(fixed: FixedDate, location: Location) -> OptionalMoment:
    """Standard time of asr, Hanafi rule (shadow twice the object plus noon shadow)."""
    return _asr(fixed, location, 2.0)


def alt_asr(fixed: FixedDate, location: Location) -> OptionalMoment:
    """Standard time of asr, Shafi'i rule."""
    return _asr(fixed, location, 1.0)


# ============================================================
# Italian hours (counted from half an hour after sunset in Padua)
# ============================================================

def local_zero_hour(tee: Moment) -> Moment:
    fixed = ts.fixed_from_moment(tee)
    setting = dusk(fixed, PADUA, arcmins(16))
    if setting is None:
        raise ValueError(f"no sunset in Padua on {fixed}")
    return ts.local_from_standard(setting + mn(30), PADUA)


def local_from_italian(tee: Moment) -> Moment:
    """Local time corresponding to Italian time `tee`."""
    fixed = ts.fixed_from_moment(tee)
    z = local_zero_hour(tee - 1)
    return tee - fixed + z


def italian_from_local(t_local: Moment) -> Moment:
    """Italian time corresponding to local time `t_local`."""
    fixed = ts.fixed_from_moment(t_local)
    z0 = local_zero_hour(t_local - 1)
    z = local_zero_hour(t_local)
    if t_local > z:
        return t_local + fixed + 1 - z
    return t_local + fixed - z0


# ============================================================
# Moon
# ============================================================

def observed_lunar_altitude(tee: Moment, location: Location) -> Degrees:
    """
    Observed altitude of the moon's upper limb, with refraction and
    elevation (16' is the moon's approximate semi-diameter).
    """
    return topocentric_lunar_altitude(tee, location) + refraction(tee, location) + arcmins(16)


def _lunar_offset(t: Moment, location: Location) -> float:
    if abs(location.latitude) == 90.0:
        return 0.0
    altitude = observed_lunar_altitude(t, location)
    return altitude / (4.0 * (90.0 - abs(location.latitude)))


# A bisection that ends further than this from the horizon found no crossing.
_HORIZON_TOLERANCE_DEG = 1.0


def _on_horizon(tee: Moment, location: Location) -> bool:
    return abs(observed_lunar_altitude(tee, location)) < _HORIZON_TOLERANCE_DEG


def moonrise(fixed: FixedDate, location: Location, *, limits: Optional[SearchLimits] = None) -> OptionalMoment:
    """
    Standard time of moonrise on `fixed`, or None when the moon does not
    rise that day.
    """
    t = ts.universal_from_standard(fixed, location)
    waning = lunar_phase(t) > 180.0
    offset = _lunar_offset(t, location)
    if waning and offset > 0:
        approx = t + 1 - offset
    elif waning:
        approx = t - offset
    else:
        approx = t + 0.5 + offset
    rise = binary_search(
        approx - hr(6),
        approx + hr(6),
        lambda lo, hi: hi - lo < mn(1),
        lambda x: observed_lunar_altitude(x, location) > 0,
        limits=limits,
    )
    if not _on_horizon(rise, location):
        logger.debug("moonrise(%d): no horizon crossing near %s", fixed, approx)
        return None
    if rise < t + 1:
        return max(ts.standard_from_universal(rise, location), fixed)
    return None


def moonset(fixed: FixedDate, location: Location, *, limits: Optional[SearchLimits] = None) -> OptionalMoment:
    """
    Standard time of moonset on `fixed`, or None when the moon does not
    set that day.
    """
    t = ts.universal_from_standard(fixed, location)
    waxing = lunar_phase(t) < 180.0
    offset = _lunar_offset(t, location)
    if waxing and offset > 0:
        approx = t + offset
    elif waxing:
        approx = t + 1 + offset
    else:
        approx = t - offset + 0.5
    setting = binary_search(
        approx - hr(6),
        approx + hr(6),
        lambda lo, hi: hi - lo < mn(1),
        lambda x: observed_lunar_altitude(x, location) < 0,
        limits=limits,
    )
    if not _on_horizon(setting, location):
        logger.debug("moonset(%d): no horizon crossing near %s", fixed, approx)
        return None
    if setting < t + 1:
        return max(ts.standard_from_universal(setting, location), fixed)
    return None
