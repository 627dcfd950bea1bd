"""
amlich.engines.specs
--------------------
Named calendar presets. A preset only fixes the civil timezone the
astronomy is evaluated in; the month rules are shared.
"""

from __future__ import annotations

from typing import Dict

from ..core.types import CalendarId, CalendarSpec

# Vietnam has kept UTC+7 for calendar reckoning since 1968.
VIETNAMESE = CalendarSpec(
    id=CalendarId("lunisolar", "vietnamese", "1.0"),
    timezone=7.0,
    meta={"description": "Vietnamese lunisolar calendar (âm lịch), UTC+7"},
)

CHINESE = CalendarSpec(
    id=CalendarId("lunisolar", "chinese", "1.0"),
    timezone=8.0,
    meta={"description": "Chinese lunisolar calendar (nongli) reckoned at UTC+8"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "vietnamese": VIETNAMESE,
    "chinese": CHINESE,
}
