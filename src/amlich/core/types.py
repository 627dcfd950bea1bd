from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional

@dataclass(frozen=True)
class CalendarId:
    family: Literal["lunisolar", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class LunarDate:
    calendar: CalendarId
    lunar_year: int
    month_no: int
    is_leap_month: bool
    day: int
    timezone: Optional[float] = None   # hours east of UTC the label was reckoned in

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    calendar: CalendarId
    lunar: LunarDate
    jdn: int
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a lunisolar calendar."""
    id: CalendarId
    timezone: float      # hours east of UTC
    strict: bool = False
    meta: Optional[Dict[str, Any]] = None
