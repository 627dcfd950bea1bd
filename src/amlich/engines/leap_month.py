"""
amlich.engines.leap_month
-------------------------
Locates the intercalary month of a 13-month lunar year.

The leap month is the first lunation after month 11 during which the sun
stays in one 30-degree sector, i.e. two consecutive new moons fall in the
same sector.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .new_moon import nearest_lunation_index, new_moon_day
from .solar import sun_longitude_sector

log = logging.getLogger(__name__)

# Upper bound on the new moons examined after month 11.
MAX_LEAP_SEARCH = 14


@dataclass(frozen=True)
class LeapMonthSearch:
    """
    offset: ordinal of the leap lunation counted from month 11 (1..13).
    ambiguous: True if no sector repeat was found before the cap; `offset`
      is then the last examined value.
    """
    offset: int
    ambiguous: bool = False


def find_leap_month(a11: int, timezone: float) -> LeapMonthSearch:
    k = nearest_lunation_index(a11)

    last = sun_longitude_sector(new_moon_day(k + 1, timezone), timezone)
    for i in range(2, MAX_LEAP_SEARCH + 1):
        arc = sun_longitude_sector(new_moon_day(k + i, timezone), timezone)
        if arc == last:
            return LeapMonthSearch(offset=i - 1)
        last = arc

    log.warning(
        "LeapMonthAmbiguous: no repeated sun sector within %d lunations of a11=%d (tz=%s); using offset %d",
        MAX_LEAP_SEARCH, a11, timezone, MAX_LEAP_SEARCH - 1,
    )
    return LeapMonthSearch(offset=MAX_LEAP_SEARCH - 1, ambiguous=True)


def leap_month_offset(a11: int, timezone: float) -> int:
    """Offset, relative to month 11 starting at `a11`, of the leap lunation."""
    return find_leap_month(a11, timezone).offset
