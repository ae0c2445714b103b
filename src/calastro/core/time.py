"""
Gregorian calendar collaborator.

Closed-form conversions between proleptic Gregorian dates and fixed dates
(R.D., day 1 = January 1, 1 CE). Years may be zero or negative (astronomical
year numbering), which is why dates are plain (year, month, day) tuples;
`datetime.date` is accepted where it can represent the date.
"""

from __future__ import annotations
from datetime import date
from typing import Tuple

from .types import FixedDate

GregorianDate = Tuple[int, int, int]

GREGORIAN_EPOCH: FixedDate = 1


def gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and year % 400 not in (100, 200, 300)


def fixed_from_gregorian(year: int, month: int, day: int) -> FixedDate:
    """Fixed date of the proleptic Gregorian date (year, month, day)."""
    if month <= 2:
        correction = 0
    elif gregorian_leap_year(year):
        correction = -1
    else:
        correction = -2
    y1 = year - 1
    return (
        GREGORIAN_EPOCH - 1
        + 365 * y1
        + y1 // 4
        - y1 // 100
        + y1 // 400
        + (367 * month - 362) // 12
        + correction
        + day
    )


def gregorian_new_year(year: int) -> FixedDate:
    return fixed_from_gregorian(year, 1, 1)


def gregorian_year_from_fixed(fixed: FixedDate) -> int:
    """Gregorian year containing fixed date."""
    d0 = fixed - GREGORIAN_EPOCH
    n400, d1 = divmod(d0, 146097)
    n100, d2 = divmod(d1, 36524)
    n4, d3 = divmod(d2, 1461)
    n1 = d3 // 365
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    if n100 == 4 or n1 == 4:
        return year
    return year + 1


def gregorian_from_fixed(fixed: FixedDate) -> GregorianDate:
    """Inverse of fixed_from_gregorian."""
    year = gregorian_year_from_fixed(fixed)
    prior_days = fixed - gregorian_new_year(year)
    if fixed < fixed_from_gregorian(year, 3, 1):
        correction = 0
    elif gregorian_leap_year(year):
        correction = 1
    else:
        correction = 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = fixed - fixed_from_gregorian(year, month, 1) + 1
    return (year, month, day)


def gregorian_date_difference(g1: GregorianDate, g2: GregorianDate) -> int:
    """Number of days from g1 to g2."""
    return fixed_from_gregorian(*g2) - fixed_from_gregorian(*g1)


def fixed_from_date(d: date) -> FixedDate:
    """datetime.date -> fixed date (Python ordinals are R.D. numbers)."""
    return d.toordinal()


def date_from_fixed(fixed: FixedDate) -> date:
    """Fixed date -> datetime.date (years 1..9999 only)."""
    return date.fromordinal(fixed)
