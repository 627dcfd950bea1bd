from __future__ import annotations
from datetime import date
from typing import Tuple

from .errors import InvalidDateError

# First JDN counted with Gregorian arithmetic (1582-10-15).
GREGORIAN_REFORM_JDN = 2299161


def jd_from_date(day: int, month: int, year: int) -> int:
    """
    Civil date -> Julian Day Number.

    Gregorian arithmetic is tried first; results before the reform are
    recomputed on the proleptic Julian calendar. No range checking is done,
    so day=30, month=2 still maps to a day number.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if jdn < GREGORIAN_REFORM_JDN:
        jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return jdn


def jd_to_date(jdn: int) -> Tuple[int, int, int]:
    """Inverse of jd_from_date, returns (day, month, year)."""
    if jdn >= GREGORIAN_REFORM_JDN:
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
    else:
        b = 0
        c = jdn + 32082

    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return day, month, year


def to_jdn(d: date) -> int:
    """Convert a datetime.date to a Julian Day Number."""
    return jd_from_date(d.day, d.month, d.year)


def from_jdn(jdn: int) -> date:
    """JDN -> datetime.date (years 1..9999 only)."""
    day, month, year = jd_to_date(jdn)
    return date(year, month, day)


def is_leap_year(year: int) -> bool:
    """Leap-year rule in force for `year`: Julian up to 1582, Gregorian after."""
    if year <= 1582:
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def month_length(month: int, year: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def validate_civil_date(day: int, month: int, year: int) -> None:
    """
    Strict check of a civil date label.

    Raises InvalidDateError for months outside 1..12, days outside the month,
    and the ten days dropped by the Gregorian reform (1582-10-05..14).
    """
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be in 1..12 (got {month})")
    n = month_length(month, year)
    if not 1 <= day <= n:
        raise InvalidDateError(f"day must be in 1..{n} for {year}-{month:02d} (got {day})")
    if year == 1582 and month == 10 and 5 <= day <= 14:
        raise InvalidDateError(f"1582-10-{day:02d} does not exist (Gregorian reform gap)")
