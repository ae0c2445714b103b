"""calastro public API.

Calendrical astronomy: solar and lunar positions, rising and setting,
new moons and lunar crescent visibility. Moments are R.D. day counts
(day 1 = January 1, 1 CE, proleptic Gregorian).
"""

from .core.config import SearchLimits, default_limits
from .core.errors import CalastroError, ConfigError, DomainError, SearchExhaustedError
from .core.time import fixed_from_gregorian, gregorian_from_fixed
from .core.types import Location
from .reference.locations import NAMED_LOCATIONS, get_location
from .reference.lunar import (
    lunar_latitude,
    lunar_longitude,
    lunar_phase,
    new_moon_at_or_after,
    new_moon_before,
    nth_new_moon,
)
from .reference.riseset import dawn, dusk, moonrise, moonset, sunrise, sunset
from .reference.solar import season_in_gregorian, solar_longitude, solar_longitude_after
from .reference.time_scales import ephemeris_correction, equation_of_time, midday
from .reference.visibility import phasis_on_or_after, phasis_on_or_before, visible_crescent

__all__ = [
    "SearchLimits",
    "default_limits",
    "CalastroError",
    "ConfigError",
    "DomainError",
    "SearchExhaustedError",
    "Location",
    "NAMED_LOCATIONS",
    "get_location",
    "fixed_from_gregorian",
    "gregorian_from_fixed",
    "ephemeris_correction",
    "equation_of_time",
    "midday",
    "solar_longitude",
    "solar_longitude_after",
    "season_in_gregorian",
    "lunar_longitude",
    "lunar_latitude",
    "lunar_phase",
    "nth_new_moon",
    "new_moon_before",
    "new_moon_at_or_after",
    "dawn",
    "dusk",
    "sunrise",
    "sunset",
    "moonrise",
    "moonset",
    "visible_crescent",
    "phasis_on_or_before",
    "phasis_on_or_after",
]
