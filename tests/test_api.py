# tests/test_api.py

from dataclasses import replace
from datetime import date, timedelta

import pytest

import amlich
from amlich.core.engine import CalendarRegistry
from amlich.core.time import to_jdn
from amlich.engines.factory import custom_spec, make_calendar, with_timezone
from amlich.engines.specs import VIETNAMESE

def test_registry_contents():
    assert amlich.list_calendars() == ["chinese", "vietnamese"]
    info = amlich.calendar_info("vietnamese")
    assert info["timezone"] == 7.0
    assert info["id"].family == "lunisolar"
    assert amlich.calendar_info("chinese")["timezone"] == 8.0

def test_unknown_calendar():
    with pytest.raises(KeyError, match="Available"):
        amlich.get_calendar("martian")

def test_registry_rejects_duplicates():
    reg = CalendarRegistry({})
    cal = make_calendar(VIETNAMESE)
    reg.register("vietnamese", cal)
    with pytest.raises(KeyError):
        reg.register("vietnamese", cal)
    reg.register("vietnamese", make_calendar(with_timezone(VIETNAMESE, 8.0)), overwrite=True)
    assert reg.get("vietnamese").info()["timezone"] == 8.0

    with pytest.raises(KeyError):
        amlich.register_calendar("vietnamese", cal)

def test_timezone_override_does_not_touch_registry():
    cal = amlich.get_calendar("vietnamese", timezone=8.0)
    assert cal.info()["timezone"] == 8.0
    assert amlich.get_calendar("vietnamese").info()["timezone"] == 7.0

def test_custom_spec_registration():
    spec = custom_spec(9.0)
    assert spec.id.name == "utc+9"
    assert spec.id.family == "custom"
    amlich.register_calendar("test-utc+9", amlich.make_calendar(spec), overwrite=True)
    assert "test-utc+9" in amlich.list_calendars()
    # Tet 2024 fell on 10 Feb at UTC+9 as well
    assert amlich.new_year_day(2024, calendar="test-utc+9") == date(2024, 2, 10)

def test_day_info():
    info = amlich.day_info(date(2025, 8, 1))
    assert info.jdn == to_jdn(date(2025, 8, 1))
    assert info.calendar.name == "vietnamese"
    assert (info.lunar.lunar_year, info.lunar.month_no, info.lunar.is_leap_month, info.lunar.day) == (2025, 6, True, 8)
    assert info.debug is None

def test_day_info_debug():
    info = amlich.day_info(date(2025, 8, 1), debug=True)
    assert set(info.debug) == {
        "month_start_jdn", "a11", "b11", "diff", "leap_offset", "leap_ambiguous", "timezone",
    }
    assert info.debug["month_start_jdn"] == to_jdn(date(2025, 7, 25))
    assert info.debug["leap_offset"] == 8

def test_explain():
    ex = amlich.explain(date(2025, 8, 1))
    assert ex["month_start"]["date"] == date(2025, 7, 25)
    assert ex["a11"]["date"] == date(2024, 12, 1)
    assert ex["b11"]["date"] == date(2025, 12, 20)
    assert ex["year_span_days"] > 365
    assert ex["lunar"] == (8, 6, 2025, True)

def test_to_gregorian():
    lunar = amlich.day_info(date(2025, 8, 1)).lunar
    assert amlich.to_gregorian(lunar) == date(2025, 8, 1)

    lunar = replace(lunar, day=1)
    assert amlich.to_gregorian(lunar) == date(2025, 7, 25)

def test_month_bounds_leap_month():
    mb = amlich.month_bounds(2025, 6, is_leap_month=True)
    assert mb["first_date"] == date(2025, 7, 25)
    assert mb["last_date"] == date(2025, 8, 22)
    assert mb["days"] == 29

    mb = amlich.month_bounds(2025, 6)
    assert mb["first_date"] == date(2025, 6, 25)
    assert mb["last_date"] == date(2025, 7, 24)
    assert amlich.days_in_month(2025, 6) == 30
    assert amlich.days_in_month(2025, 6, is_leap_month=True) == 29
    assert amlich.first_day_of_month(2025, 7) == date(2025, 8, 23)
    assert amlich.last_day_of_month(2025, 6, is_leap_month=True) == date(2025, 8, 22)

def test_month_bounds_rejects_missing_leap():
    with pytest.raises(amlich.InvalidDateError):
        amlich.month_bounds(2024, 6, is_leap_month=True)

def test_months_in_year():
    months = amlich.months_in_year(2025)
    assert len(months) == 13
    assert [(r["M"], r["is_leap_month"]) for r in months if r["is_leap_month"]] == [(6, True)]
    assert all(r["Y"] == 2025 for r in months)
    assert all(r["days"] in (29, 30) for r in months)
    # contiguous
    for a, b in zip(months, months[1:]):
        assert b["first_jdn"] == a["last_jdn"] + 1
    assert months[0]["first_jdn"] == to_jdn(date(2025, 1, 29))
    assert months[-1]["last_jdn"] == to_jdn(date(2026, 2, 16))

    assert len(amlich.months_in_year(2024)) == 12

@pytest.mark.parametrize(
    "year, expected",
    [(2024, date(2024, 2, 10)), (2025, date(2025, 1, 29)), (2026, date(2026, 2, 17))],
)
def test_new_year_day(year, expected):
    assert amlich.new_year_day(year) == expected

def test_leap_month():
    assert amlich.leap_month(2023) == 2
    assert amlich.leap_month(2024) is None
    assert amlich.leap_month(2025) == 6
    assert amlich.leap_month(2025, calendar="chinese") == 6

def test_lunar_label():
    assert amlich.lunar_label(1, 6) == "1/6"
    assert amlich.lunar_label(15, 6) == "15"

def test_strict_calendar_spec():
    cal = amlich.make_calendar(replace(VIETNAMESE, strict=True))
    with pytest.raises(amlich.InvalidDateError):
        cal.convert(30, 2, 2025)
    assert amlich.get_calendar("vietnamese").convert(30, 2, 2025) == cal.convert(2, 3, 2025)

def test_timezone_override_gets_its_own_id():
    cal = amlich.get_calendar("vietnamese", timezone=-5.0)
    assert cal.info()["id"].name == "vietnamese@utc-5"
    # same timezone keeps the preset
    assert amlich.get_calendar("vietnamese", timezone=7.0).info()["id"].name == "vietnamese"

def test_to_gregorian_uses_label_timezone():
    """Labels from an unregistered calendar resolve at the offset they were made in."""
    cal = amlich.get_calendar("vietnamese", timezone=-5.0)
    d = date(2024, 1, 1)
    while d < date(2026, 1, 1):
        lunar = cal.day_info(d).lunar
        assert lunar.timezone == -5.0
        assert amlich.to_gregorian(lunar) == d
        assert cal.to_gregorian(lunar) == d
        d += timedelta(days=1)

def test_to_gregorian_custom_calendar_registered_under_other_name():
    cal = amlich.make_calendar(custom_spec(7.0, name="saigon"))
    amlich.register_calendar("hcm", cal, overwrite=True)
    lunar = amlich.day_info(date(2025, 8, 1), calendar="hcm").lunar
    assert lunar.calendar.name == "saigon"
    assert amlich.to_gregorian(lunar) == date(2025, 8, 1)
    assert amlich.to_gregorian(lunar, calendar="hcm") == date(2025, 8, 1)

def test_to_gregorian_label_without_timezone():
    lunar = replace(amlich.day_info(date(2025, 8, 1)).lunar, timezone=None)
    assert amlich.to_gregorian(lunar) == date(2025, 8, 1)
