"""
calastro.reference.visibility

Lunar crescent visibility criteria and the searches for phasis, the first
evening on which the new crescent can be seen.

A criterion is a callable (fixed, location) -> bool answering "is the
crescent visible on the eve of `fixed` (i.e. the evening of fixed - 1)?".
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..core.config import SearchLimits, resolve
from ..core.errors import SearchExhaustedError
from ..core.types import Criterion, Degrees, FixedDate, Location, Moment
from ..engines.angles import arccos_degrees, cos_degrees, hr, mn, sin_degrees
from ..engines.search import next_index, poly
from . import time_scales as ts
from .locations import BABYLON, MECCA
from .lunar import (
    FIRST_QUARTER_MOON,
    NEW_MOON,
    lunar_altitude,
    lunar_latitude,
    lunar_parallax,
    lunar_phase,
    lunar_phase_at_or_before,
    new_moon_before,
)
from .riseset import dusk, moonset, sunset
from .solar import solar_altitude

logger = logging.getLogger(__name__)


def _waxing_crescent(phase: Degrees) -> bool:
    return NEW_MOON < phase < FIRST_QUARTER_MOON


# ------------------------------------------------------------
# Geometry
# ------------------------------------------------------------

def arc_of_light(tee: Moment) -> Degrees:
    """Angular separation of sun and moon."""
    return arccos_degrees(cos_degrees(lunar_latitude(tee)) * cos_degrees(lunar_phase(tee)))


def arc_of_vision(tee: Moment, location: Location) -> Degrees:
    """Difference in altitude between moon and sun."""
    return lunar_altitude(tee, location) - solar_altitude(tee, location)


def lunar_semi_diameter(tee: Moment, location: Location) -> Degrees:
    """Topocentric semi-diameter of the moon."""
    h = lunar_altitude(tee, location)
    p = lunar_parallax(tee, location)
    return 0.27245 * p * (1 + sin_degrees(h) * sin_degrees(p))


def simple_best_view(fixed: FixedDate, location: Location) -> Moment:
    """Universal best viewing time on the evening of `fixed`: dusk at 4.5 degrees."""
    dark = dusk(fixed, location, 4.5)
    best = fixed + 1 if dark is None else dark
    return ts.universal_from_standard(best, location)


def bruin_best_view(fixed: FixedDate, location: Location) -> Moment:
    """
    Universal best viewing time on the evening of `fixed` per Bruin (1977):
    sunset and moonset weighted 5:4.
    """
    sun = sunset(fixed, location)
    moon = moonset(fixed, location)
    if sun is None or moon is None:
        best = fixed + 1
    else:
        best = (5 / 9) * sun + (4 / 9) * moon
    return ts.universal_from_standard(best, location)


def moonlag(fixed: FixedDate, location: Location) -> Optional[float]:
    """
    Moonset minus sunset on `fixed` (days). A full day when the moon does
    not set; None when the sun does not set.
    """
    sun = sunset(fixed, location)
    if sun is None:
        return None
    moon = moonset(fixed, location)
    if moon is None:
        return hr(24)
    return moon - sun


# ------------------------------------------------------------
# Criteria
# ------------------------------------------------------------

def shaukat_criterion(fixed: FixedDate, location: Location) -> bool:
    """
    S. K. Shaukat's criterion for likely visibility on the eve of `fixed`.
    Not intended for high latitudes.
    """
    tee = simple_best_view(fixed - 1, location)
    phase = lunar_phase(tee)
    h = lunar_altitude(tee, location)
    arcl = arc_of_light(tee)
    return _waxing_crescent(phase) and 10.6 <= arcl <= 90 and h > 4.1


def yallop_criterion(fixed: FixedDate, location: Location) -> bool:
    """
    B. D. Yallop's criterion for possible visibility on the eve of `fixed`
    (crescent visible under perfect conditions).
    """
    tee = bruin_best_view(fixed - 1, location)
    phase = lunar_phase(tee)
    cap_d = lunar_semi_diameter(tee, location)
    cap_arcl = arc_of_light(tee)
    cap_w = cap_d * (1 - cos_degrees(cap_arcl))
    cap_arcv = arc_of_vision(tee, location)
    e = -0.14
    q1 = poly(cap_w, (11.8371, -6.3226, 0.7319, -0.1018))
    return _waxing_crescent(phase) and cap_arcv > q1 + e


def saudi_criterion(fixed: FixedDate, location: Location = MECCA) -> bool:
    """Saudi rule: the moon sets after the sun on the eve of `fixed`."""
    setting = sunset(fixed - 1, location)
    if setting is None:
        return False
    tee = ts.universal_from_standard(setting, location)
    lag = moonlag(fixed - 1, location)
    return _waxing_crescent(lunar_phase(tee)) and lag is not None and lag > 0


def babylonian_criterion(fixed: FixedDate, location: Location = BABYLON) -> bool:
    """
    Moonlag criterion: the moon is at least a day old at sunset and sets
    more than 48 minutes after the sun.
    """
    setting = sunset(fixed - 1, location)
    if setting is None:
        return False
    tee = ts.universal_from_standard(setting, location)
    if not _waxing_crescent(lunar_phase(tee)):
        return False
    if new_moon_before(tee) > tee - hr(24):
        return False
    lag = moonlag(fixed - 1, location)
    return lag is not None and lag > mn(48)


CRITERIA: Dict[str, Criterion] = {
    "shaukat": shaukat_criterion,
    "yallop": yallop_criterion,
    "saudi": saudi_criterion,
    "babylonian": babylonian_criterion,
}


def get_criterion(name: str) -> Criterion:
    key = name.strip().lower()
    if key not in CRITERIA:
        raise KeyError(f"Unknown criterion '{name}'. Available: {', '.join(sorted(CRITERIA))}")
    return CRITERIA[key]


def visible_crescent(fixed: FixedDate, location: Location, criterion: Criterion = shaukat_criterion) -> bool:
    """True when the crescent is visible on the eve of `fixed`."""
    return criterion(fixed, location)


# ------------------------------------------------------------
# Phasis
# ------------------------------------------------------------

def _last_new_moon_date(fixed: FixedDate, limits: Optional[SearchLimits]) -> FixedDate:
    return ts.fixed_from_moment(lunar_phase_at_or_before(NEW_MOON, fixed, limits=limits))


def phasis_on_or_before(
    fixed: FixedDate,
    location: Location,
    *,
    criterion: Criterion = shaukat_criterion,
    limits: Optional[SearchLimits] = None,
) -> FixedDate:
    """
    Latest fixed date on or before `fixed` on whose eve the crescent first
    became visible at `location`.
    """
    moon = _last_new_moon_date(fixed, limits)
    age = fixed - moon
    if age <= 3 and not criterion(fixed, location):
        # the current crescent is not yet visible; use the previous month
        tau = moon - 30
    else:
        tau = moon
    logger.debug("phasis_on_or_before(%d): new moon %d, seed %d", fixed, moon, tau)
    return next_index(tau, lambda d: criterion(d, location), limits=limits)


def phasis_on_or_after(
    fixed: FixedDate,
    location: Location,
    *,
    criterion: Criterion = shaukat_criterion,
    limits: Optional[SearchLimits] = None,
) -> FixedDate:
    """
    Earliest fixed date on or after `fixed` on whose eve the crescent first
    became visible at `location`.
    """
    moon = _last_new_moon_date(fixed, limits)
    age = fixed - moon
    if age >= 4 or criterion(fixed - 1, location):
        # this month's phasis is already past; skip to the next new moon
        tau = moon + 29
    else:
        tau = fixed
    logger.debug("phasis_on_or_after(%d): new moon %d, seed %d", fixed, moon, tau)
    return next_index(tau, lambda d: criterion(d, location), limits=limits)


def saudi_new_month_on_or_before(fixed: FixedDate, *, limits: Optional[SearchLimits] = None) -> FixedDate:
    """Start of the Saudi month containing `fixed` (Mecca, Saudi rule)."""
    return phasis_on_or_before(fixed, MECCA, criterion=saudi_criterion, limits=limits)


def babylonian_new_month_on_or_before(fixed: FixedDate, *, limits: Optional[SearchLimits] = None) -> FixedDate:
    """Start of the Babylonian month containing `fixed` (moonlag rule)."""
    return phasis_on_or_before(fixed, BABYLON, criterion=babylonian_criterion, limits=limits)


# ------------------------------------------------------------
# Month lengths
# ------------------------------------------------------------

def month_length(
    fixed: FixedDate,
    location: Location,
    *,
    criterion: Criterion = shaukat_criterion,
    limits: Optional[SearchLimits] = None,
) -> int:
    """Length in days of the observational month containing `fixed`."""
    moon = phasis_on_or_after(fixed + 1, location, criterion=criterion, limits=limits)
    prev = phasis_on_or_before(fixed, location, criterion=criterion, limits=limits)
    return moon - prev


def early_month(
    fixed: FixedDate,
    location: Location,
    *,
    criterion: Criterion = shaukat_criterion,
    limits: Optional[SearchLimits] = None,
) -> bool:
    """
    True when the month containing `fixed` had to start early because a
    preceding run of observational months would otherwise exceed 30 days.
    """
    lim = resolve(limits)
    day = fixed
    for _ in range(lim.max_steps):
        start = phasis_on_or_before(day, location, criterion=criterion, limits=lim)
        if day - start >= 30:
            return True
        prev = start - 15
        length = month_length(prev, location, criterion=criterion, limits=lim)
        if length > 30:
            return True
        if length < 30:
            return False
        day = prev
    raise SearchExhaustedError(f"early_month from {fixed}", lim.max_steps)
