"""
amlich.engines.calendar
-----------------------
The Orchestrator. Binds the conversion pipeline to one calendar spec
(timezone and validation policy) and exposes date, month and year lookups.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

from amlich.core.types import CalendarSpec, DayInfo, LunarDate
from amlich.core.time import from_jdn, jd_to_date, validate_civil_date
from .convert import (
    LunarTuple,
    SolarToLunar,
    convert_lunar_to_solar,
    leap_month_of_year,
    lunar_month_lunation,
    solar_to_lunar,
)
from .new_moon import new_moon_day


@lru_cache(maxsize=8192)
def _cached_solar_to_lunar(day: int, month: int, year: int, timezone: float) -> SolarToLunar:
    return solar_to_lunar(day, month, year, timezone)


class LunisolarCalendar:
    """
    Translates civil dates to lunar labels and back for a fixed timezone.
    """
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.id = spec.id
        self.timezone = float(spec.timezone)

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timezone": self.timezone,
            "strict": self.spec.strict,
            "meta": dict(self.spec.meta or {}),
        }

    # ---------------------------------------------------------
    # Forward: civil date -> lunar label
    # ---------------------------------------------------------

    def _solar_to_lunar(self, day: int, month: int, year: int) -> SolarToLunar:
        if self.spec.strict:
            validate_civil_date(day, month, year)
        return _cached_solar_to_lunar(day, month, year, self.timezone)

    def convert(self, day: int, month: int, year: int) -> LunarTuple:
        return self._solar_to_lunar(day, month, year).as_tuple()

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        res = self._solar_to_lunar(d.day, d.month, d.year)
        lunar = LunarDate(
            calendar=self.id,
            lunar_year=res.lunar_year,
            month_no=res.lunar_month,
            is_leap_month=res.lunar_leap,
            day=res.lunar_day,
            timezone=self.timezone,
        )
        dbg = None
        if debug:
            dbg = {
                "month_start_jdn": res.month_start,
                "a11": res.a11,
                "b11": res.b11,
                "diff": res.diff,
                "leap_offset": res.leap_offset,
                "leap_ambiguous": res.leap_ambiguous,
                "timezone": self.timezone,
            }
        return DayInfo(civil_date=d, calendar=self.id, lunar=lunar, jdn=res.day_number, debug=dbg)

    def explain(self, d: date) -> Dict[str, Any]:
        res = self._solar_to_lunar(d.day, d.month, d.year)
        return {
            "date": d,
            "calendar": self.id.name,
            "timezone": self.timezone,
            "jdn": res.day_number,
            "month_start": {"jdn": res.month_start, "date": from_jdn(res.month_start)},
            "a11": {"jdn": res.a11, "date": from_jdn(res.a11)},
            "b11": {"jdn": res.b11, "date": from_jdn(res.b11)},
            "year_span_days": res.b11 - res.a11,
            "diff": res.diff,
            "leap_offset": res.leap_offset,
            "leap_ambiguous": res.leap_ambiguous,
            "lunar": res.as_tuple(),
        }

    # ---------------------------------------------------------
    # Inverse: lunar label -> civil date
    # ---------------------------------------------------------

    def to_gregorian(self, t: LunarDate) -> date:
        day, month, year = convert_lunar_to_solar(
            t.day, t.month_no, t.lunar_year, t.is_leap_month, self.timezone
        )
        return date(year, month, day)

    # ---------------------------------------------------------
    # Month and year layout
    # ---------------------------------------------------------

    def _month_jdn_bounds(self, k: int) -> Tuple[int, int]:
        first = new_moon_day(k, self.timezone)
        last = new_moon_day(k + 1, self.timezone) - 1
        return first, last

    def month_bounds(self, Y: int, M: int, *, is_leap_month: bool = False) -> Dict[str, Any]:
        k = lunar_month_lunation(M, Y, is_leap_month, self.timezone)
        first, last = self._month_jdn_bounds(k)
        return {
            "Y": Y,
            "M": M,
            "is_leap_month": is_leap_month,
            "k": k,
            "first_jdn": first,
            "last_jdn": last,
            "first_date": from_jdn(first),
            "last_date": from_jdn(last),
            "days": last - first + 1,
        }

    def days_in_month(self, Y: int, M: int, *, is_leap_month: bool = False) -> int:
        k = lunar_month_lunation(M, Y, is_leap_month, self.timezone)
        first, last = self._month_jdn_bounds(k)
        return last - first + 1

    def months_in_year(self, Y: int) -> List[Dict[str, Any]]:
        k_first = lunar_month_lunation(1, Y, False, self.timezone)
        k_next = lunar_month_lunation(1, Y + 1, False, self.timezone)

        out = []
        for k in range(k_first, k_next):
            first, last = self._month_jdn_bounds(k)
            day, month, year = jd_to_date(first)
            res = _cached_solar_to_lunar(day, month, year, self.timezone)
            out.append({
                "Y": res.lunar_year,
                "M": res.lunar_month,
                "is_leap_month": res.lunar_leap,
                "k": k,
                "first_jdn": first,
                "last_jdn": last,
                "days": last - first + 1,
            })
        return out

    def leap_month(self, Y: int) -> Optional[int]:
        return leap_month_of_year(Y, self.timezone)

    def new_year_day(self, Y: int) -> date:
        k = lunar_month_lunation(1, Y, False, self.timezone)
        return from_jdn(new_moon_day(k, self.timezone))
