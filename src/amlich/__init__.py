"""amlich public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    convert_solar_to_lunar,
    convert_lunar_to_solar,
    lunar_label,
    day_info,
    to_gregorian,
    explain,
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
    month_bounds,
    days_in_month,
    months_in_year,
    leap_month,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
)
from .core.errors import AmlichError, InvalidDateError
from .core.types import CalendarSpec, DayInfo, LunarDate

__all__ = [
    "convert_solar_to_lunar",
    "convert_lunar_to_solar",
    "lunar_label",
    "day_info",
    "to_gregorian",
    "explain",
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "month_bounds",
    "days_in_month",
    "months_in_year",
    "leap_month",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "AmlichError",
    "InvalidDateError",
    "CalendarSpec",
    "DayInfo",
    "LunarDate",
]
