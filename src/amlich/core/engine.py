from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .types import DayInfo, LunarDate

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def day_info(self, d: date, *, debug: bool = False) -> DayInfo: ...
    def convert(self, day: int, month: int, year: int) -> Tuple[int, int, int, bool]: ...
    def to_gregorian(self, t: LunarDate) -> date: ...
    def month_bounds(self, Y: int, M: int, *, is_leap_month: bool = False) -> Dict[str, Any]: ...
    def months_in_year(self, Y: int) -> List[Dict[str, Any]]: ...
    def leap_month(self, Y: int) -> Optional[int]: ...
    def new_year_day(self, Y: int) -> date: ...
    def explain(self, d: date) -> Dict[str, Any]: ...

@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
