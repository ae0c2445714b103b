"""
Named observer locations and the bearing between two of them.
"""

from __future__ import annotations

from typing import Dict

from ..core.time import gregorian_year_from_fixed
from ..core.types import Degrees, Location, Moment
from ..engines.angles import angle, arctan_degrees, cos_degrees, hr, sin_degrees, tan_degrees

URBANA = Location(40.1, -88.2, 225.0, hr(-6))
GREENWICH = Location(51.4777815, 0.0, 46.9, hr(0))
MECCA = Location(6427 / 300, 11947 / 300, 298.0, hr(3))
JERUSALEM = Location(31.78, 35.24, 740.0, hr(2))
ACRE = Location(32.94, 35.09, 22.0, hr(2))
TEHRAN = Location(35.68, 51.42, 1100.0, hr(3.5))
PARIS = Location(angle(48, 50, 11), angle(2, 20, 15), 27.0, hr(1))
PADUA = Location(angle(45, 24, 28), angle(11, 53, 9), 18.0, hr(1))

# Babylon keeps local mean time (44.4328 / 360 ~ 0.145833 day)
BABYLON = Location(32.4794, 44.4328, 26.0, 0.145833)

# Cairo
ISLAMIC_LOCATION = Location(30.1, 31.3, 200.0, hr(2))
# Haifa
HEBREW_LOCATION = Location(32.82, 35.0, 0.0, hr(2))
# Mount Gerizim
SAMARITAN_LOCATION = Location(32.1994, 35.2728, 881.0, hr(2))
BAHAI_LOCATION = Location(35.696111, 51.423056, 0.0, hr(3.5))
# Canadian Forces Station Alert, Nunavut
CFS_ALERT = Location(82.5, 62.316667, 0.0, -0.208333)

_BEIJING_LATITUDE = angle(39, 55, 0)
_BEIJING_LONGITUDE = angle(116, 25, 0)


def chinese_location(tee: Moment) -> Location:
    """Beijing; local mean time (1397/180 h) before 1929, UTC+8 afterwards."""
    year = gregorian_year_from_fixed(int(tee // 1))
    zone = hr(1397 / 180) if year < 1929 else hr(8)
    return Location(_BEIJING_LATITUDE, _BEIJING_LONGITUDE, 43.5, zone)


def direction(location: Location, focus: Location) -> Degrees:
    """
    Bearing (degrees clockwise from north) of `focus` seen from `location`,
    along the great circle. Facing a pole gives 0 or 180.
    """
    phi, psi = location.latitude, location.longitude
    phi_f, psi_f = focus.latitude, focus.longitude
    y = sin_degrees(psi_f - psi)
    x = cos_degrees(phi) * tan_degrees(phi_f) - sin_degrees(phi) * cos_degrees(psi - psi_f)
    if (x == 0 and y == 0) or phi_f == 90.0:
        return 0.0
    if phi_f == -90.0:
        return 180.0
    return arctan_degrees(y, x)


NAMED_LOCATIONS: Dict[str, Location] = {
    "urbana": URBANA,
    "greenwich": GREENWICH,
    "mecca": MECCA,
    "jerusalem": JERUSALEM,
    "acre": ACRE,
    "tehran": TEHRAN,
    "paris": PARIS,
    "padua": PADUA,
    "babylon": BABYLON,
    "cairo": ISLAMIC_LOCATION,
    "haifa": HEBREW_LOCATION,
    "samaritan": SAMARITAN_LOCATION,
    "bahai": BAHAI_LOCATION,
    "alert": CFS_ALERT,
}


def get_location(name: str) -> Location:
    key = name.strip().lower()
    if key not in NAMED_LOCATIONS:
        raise KeyError(f"Unknown location '{name}'. Available: {', '.join(sorted(NAMED_LOCATIONS))}")
    return NAMED_LOCATIONS[key]
