"""
amlich.engines.convert
----------------------
Solar (Gregorian/Julian) <-> lunar date conversion.

Lunar months are numbered from the month-11 anchor of each year: month 11 is
the lunation containing the winter solstice, and a year whose two anchors
are more than 365 days apart has 13 lunations, one of which repeats the
number of the month before it (the leap month).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from amlich.core.errors import InvalidDateError
from amlich.core.time import jd_from_date, jd_to_date
from .leap_month import find_leap_month
from .month11 import lunar_month11
from .new_moon import lunation_index, nearest_lunation_index, new_moon_day

LunarTuple = Tuple[int, int, int, bool]

# Lunations are at least 29 days; integer month distance from the anchor.
MIN_MONTH_DAYS = 29
LEAP_YEAR_SPAN = 365


@dataclass(frozen=True)
class SolarToLunar:
    """A forward conversion with its intermediate values."""
    day_number: int
    month_start: int
    a11: int
    b11: int
    diff: int
    leap_offset: Optional[int]
    leap_ambiguous: bool
    lunar_day: int
    lunar_month: int
    lunar_year: int
    lunar_leap: bool

    def as_tuple(self) -> LunarTuple:
        return (self.lunar_day, self.lunar_month, self.lunar_year, self.lunar_leap)


def solar_to_lunar(day: int, month: int, year: int, timezone: float) -> SolarToLunar:
    day_number = jd_from_date(day, month, year)

    k = lunation_index(day_number)
    month_start = new_moon_day(k + 1, timezone)
    if month_start > day_number:
        month_start = new_moon_day(k, timezone)

    a11 = lunar_month11(year, timezone)
    b11 = a11
    if a11 >= month_start:
        lunar_year = year
        a11 = lunar_month11(year - 1, timezone)
    else:
        lunar_year = year + 1
        b11 = lunar_month11(year + 1, timezone)

    lunar_day = day_number - month_start + 1
    diff = math.floor((month_start - a11) / MIN_MONTH_DAYS)
    lunar_leap = False
    lunar_month = diff + 11

    leap_offset = None
    leap_ambiguous = False
    if b11 - a11 > LEAP_YEAR_SPAN:
        search = find_leap_month(a11, timezone)
        leap_offset = search.offset
        leap_ambiguous = search.ambiguous
        if diff >= leap_offset:
            lunar_month = diff + 10
            if diff == leap_offset:
                lunar_leap = True

    if lunar_month > 12:
        lunar_month -= 12
    # Months 11 and 12 close to a11 belong to the previous lunar year.
    if lunar_month >= 11 and diff < 4:
        lunar_year -= 1

    return SolarToLunar(
        day_number=day_number,
        month_start=month_start,
        a11=a11,
        b11=b11,
        diff=diff,
        leap_offset=leap_offset,
        leap_ambiguous=leap_ambiguous,
        lunar_day=lunar_day,
        lunar_month=lunar_month,
        lunar_year=lunar_year,
        lunar_leap=lunar_leap,
    )


def convert_solar_to_lunar(day: int, month: int, year: int, timezone: float) -> LunarTuple:
    """
    Map a civil date to (lunar_day, lunar_month, lunar_year, lunar_leap).

    Inputs are not range checked; an impossible date such as Feb 30 is
    converted through its day number like any other.
    """
    return solar_to_lunar(day, month, year, timezone).as_tuple()


def _year_anchors(lunar_month: int, lunar_year: int, timezone: float) -> Tuple[int, int]:
    if lunar_month < 11:
        return lunar_month11(lunar_year - 1, timezone), lunar_month11(lunar_year, timezone)
    return lunar_month11(lunar_year, timezone), lunar_month11(lunar_year + 1, timezone)


def leap_month_of_year(lunar_year: int, timezone: float) -> Optional[int]:
    """Month number repeated as a leap month in `lunar_year`, or None."""
    # Months 1..10 sit between the anchors of Y-1 and Y, months 11 and 12
    # between those of Y and Y+1.
    for lunar_month, early in ((1, False), (11, True)):
        a11, b11 = _year_anchors(lunar_month, lunar_year, timezone)
        if b11 - a11 <= LEAP_YEAR_SPAN:
            continue
        leap_offset = find_leap_month(a11, timezone).offset
        if (leap_offset <= 2) == early:
            return (leap_offset - 2) % 12 or 12
    return None


def lunar_month_lunation(
    lunar_month: int,
    lunar_year: int,
    lunar_leap: bool,
    timezone: float,
) -> int:
    """
    Lunation index k whose new moon starts the given lunar month.

    Raises InvalidDateError if `lunar_month` is out of range or a leap
    instance is asked for a month that is not repeated that year.
    """
    if not 1 <= lunar_month <= 12:
        raise InvalidDateError(f"lunar month must be in 1..12 (got {lunar_month})")

    a11, b11 = _year_anchors(lunar_month, lunar_year, timezone)
    k = nearest_lunation_index(a11)

    off = (lunar_month - 11) % 12
    if b11 - a11 > LEAP_YEAR_SPAN:
        leap_offset = find_leap_month(a11, timezone).offset
        leap_month = (leap_offset - 2) % 12 or 12
        if lunar_leap and lunar_month != leap_month:
            raise InvalidDateError(
                f"month {lunar_month} of lunar year {lunar_year} is not a leap month (leap month is {leap_month})"
            )
        if lunar_leap or off >= leap_offset:
            off += 1
    elif lunar_leap:
        raise InvalidDateError(f"lunar year {lunar_year} has no leap month")
    return k + off


def convert_lunar_to_solar(
    lunar_day: int,
    lunar_month: int,
    lunar_year: int,
    lunar_leap: bool,
    timezone: float,
) -> Tuple[int, int, int]:
    """
    Inverse of convert_solar_to_lunar, returns (day, month, year).

    Raises InvalidDateError for a label that does not exist: a month out of
    range, a leap instance of a month that is not repeated, or a day past the
    end of the month (29 or 30).
    """
    k = lunar_month_lunation(lunar_month, lunar_year, lunar_leap, timezone)
    month_start = new_moon_day(k, timezone)
    days = new_moon_day(k + 1, timezone) - month_start
    if not 1 <= lunar_day <= days:
        leap_tag = " (leap)" if lunar_leap else ""
        raise InvalidDateError(
            f"lunar day must be in 1..{days} for month {lunar_month}{leap_tag} of {lunar_year} (got {lunar_day})"
        )
    return jd_to_date(month_start + lunar_day - 1)
