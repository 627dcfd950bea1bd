"""
amlich.engines.factory
----------------------
Transforms pure data specifications into live calendar objects.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional

from amlich.core.types import CalendarId, CalendarSpec
from amlich.engines.calendar import LunisolarCalendar


def make_calendar(spec: CalendarSpec) -> LunisolarCalendar:
    """The universal entry point."""
    return LunisolarCalendar(spec)


def custom_spec(timezone: float, *, name: Optional[str] = None, strict: bool = False) -> CalendarSpec:
    """Spec for an ad-hoc timezone, e.g. a historical or local offset."""
    if name is None:
        name = f"utc{timezone:+g}"
    return CalendarSpec(
        id=CalendarId("custom", name, "1.0"),
        timezone=float(timezone),
        strict=strict,
        meta={"description": f"lunisolar calendar reckoned at UTC{timezone:+g}"},
    )


def with_timezone(spec: CalendarSpec, timezone: float) -> CalendarSpec:
    """Copy of `spec` reckoned at another UTC offset, under its own id."""
    if float(timezone) == spec.timezone:
        return spec
    return replace(
        spec,
        id=replace(spec.id, name=f"{spec.id.name}@utc{timezone:+g}"),
        timezone=float(timezone),
    )
