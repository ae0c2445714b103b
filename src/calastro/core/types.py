from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import DomainError

# Unit conventions. Angles are degrees, times are days counted from R.D. 0
# (midnight starting Monday, December 31, 1 BCE, proleptic Gregorian).
Degrees = float
Moment = float
FixedDate = int
FractionOfDay = float

# None marks an astronomical event that does not happen for the given input.
OptionalMoment = Optional[Moment]


@dataclass(frozen=True)
class Location:
    """Observer on the earth.

    latitude/longitude in degrees (north and east positive), elevation in
    meters above sea level, zone is the standard-time offset from UT as a
    fraction of a day (e.g. 1/12 for UTC+2).
    """
    latitude: Degrees
    longitude: Degrees
    elevation: float = 0.0
    zone: FractionOfDay = 0.0

    def __post_init__(self) -> None:
        if not (-90.0 <= self.latitude <= 90.0):
            raise DomainError(f"latitude must be in [-90, 90], got {self.latitude}")
        if not (-180.0 <= self.longitude <= 180.0):
            raise DomainError(f"longitude must be in [-180, 180], got {self.longitude}")
        if not (-1.0 < self.zone < 1.0):
            raise DomainError(f"zone is a fraction of a day, got {self.zone}")


# Visibility criterion: True when the crescent is visible on the eve of the date.
Criterion = Callable[[FixedDate, Location], bool]
