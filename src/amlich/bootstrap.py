from __future__ import annotations
from amlich.core.engine import CalendarRegistry
from amlich.engines.specs import ALL_SPECS
from amlich.engines.factory import make_calendar

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = make_calendar(spec)
    return CalendarRegistry(calendars)
