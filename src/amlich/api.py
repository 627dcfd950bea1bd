from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from .core.engine import CalendarEngine, CalendarRegistry
from .core.types import CalendarSpec, DayInfo, LunarDate
from .core.time import validate_civil_date
from .engines import convert as _convert
from .engines.factory import make_calendar as _make_calendar, with_timezone

DEFAULT_CALENDAR = "vietnamese"
_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(name: str, *, timezone: Optional[float] = None) -> CalendarEngine:
    """Registered calendar, or a fresh copy of its preset at another timezone."""
    if timezone is None:
        return _reg().get(name)
    from .engines.specs import ALL_SPECS
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown calendar spec '{name}'")
    return _make_calendar(with_timezone(ALL_SPECS[name], timezone))

def make_calendar(spec: CalendarSpec) -> CalendarEngine:
    return _make_calendar(spec)

def register_calendar(name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

# ============================================================
# Core conversion
# ============================================================

def convert_solar_to_lunar(
    day: int,
    month: int,
    year: int,
    timezone: float,
    *,
    strict: bool = False,
) -> Tuple[int, int, int, bool]:
    """
    Gregorian date -> (lunar_day, lunar_month, lunar_year, lunar_leap).

    `timezone` is in hours east of UTC. With strict=False any integers are
    accepted and validity is the caller's responsibility; strict=True raises
    InvalidDateError for impossible dates.
    """
    if strict:
        validate_civil_date(day, month, year)
    return _convert.convert_solar_to_lunar(day, month, year, timezone)

def convert_lunar_to_solar(
    lunar_day: int,
    lunar_month: int,
    lunar_year: int,
    lunar_leap: bool,
    timezone: float,
) -> Tuple[int, int, int]:
    """Lunar label -> (day, month, year)."""
    return _convert.convert_lunar_to_solar(lunar_day, lunar_month, lunar_year, lunar_leap, timezone)

def lunar_label(lunar_day: int, lunar_month: int) -> str:
    """Secondary label drawn under a Gregorian day number."""
    if lunar_day == 1:
        return f"{lunar_day}/{lunar_month}"
    return f"{lunar_day}"

# ============================================================
# Calendar-level API
# ============================================================

def day_info(d: date, *, calendar: str = DEFAULT_CALENDAR, debug: bool = False) -> DayInfo:
    return _reg().get(calendar).day_info(d, debug=debug)

def to_gregorian(t: LunarDate, *, calendar: Optional[str] = None) -> date:
    """
    Lunar label -> civil date.

    Without `calendar`, a label that carries its timezone is resolved at that
    timezone; otherwise its calendar id names the registered calendar.
    """
    if calendar is not None:
        return _reg().get(calendar).to_gregorian(t)
    if t.timezone is not None:
        day, month, year = _convert.convert_lunar_to_solar(
            t.day, t.month_no, t.lunar_year, t.is_leap_month, t.timezone
        )
        return date(year, month, day)
    return _reg().get(t.calendar.name).to_gregorian(t)

def explain(d: date, *, calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _reg().get(calendar).explain(d)

def month_bounds(Y: int, M: int, *, is_leap_month: bool = False, calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _reg().get(calendar).month_bounds(Y, M, is_leap_month=is_leap_month)

def days_in_month(Y: int, M: int, *, is_leap_month: bool = False, calendar: str = DEFAULT_CALENDAR) -> int:
    return month_bounds(Y, M, is_leap_month=is_leap_month, calendar=calendar)["days"]

def months_in_year(Y: int, *, calendar: str = DEFAULT_CALENDAR) -> List[Dict[str, Any]]:
    return _reg().get(calendar).months_in_year(Y)

def leap_month(Y: int, *, calendar: str = DEFAULT_CALENDAR) -> Optional[int]:
    return _reg().get(calendar).leap_month(Y)

def new_year_day(Y: int, *, calendar: str = DEFAULT_CALENDAR) -> date:
    return _reg().get(calendar).new_year_day(Y)

def first_day_of_month(Y: int, M: int, *, is_leap_month: bool = False, calendar: str = DEFAULT_CALENDAR) -> date:
    return month_bounds(Y, M, is_leap_month=is_leap_month, calendar=calendar)["first_date"]

def last_day_of_month(Y: int, M: int, *, is_leap_month: bool = False, calendar: str = DEFAULT_CALENDAR) -> date:
    return month_bounds(Y, M, is_leap_month=is_leap_month, calendar=calendar)["last_date"]
