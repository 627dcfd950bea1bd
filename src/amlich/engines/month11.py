"""
amlich.engines.month11
----------------------
The yearly anchor of month numbering: the new moon that starts month 11,
i.e. the lunation containing the winter solstice.
"""

from __future__ import annotations

import math

from amlich.core.time import jd_from_date
from .new_moon import SYNODIC_MONTH, new_moon_day
from .solar import sun_longitude_sector

# Integer day of the k=0 new moon (1900-01-01).
K0_JDN = 2415021

# Sector 9 begins at solar longitude 270° (winter solstice).
SOLSTICE_SECTOR = 9


def lunar_month11(year: int, timezone: float) -> int:
    """JDN of the first day of month 11 of lunar year `year`."""
    off = jd_from_date(31, 12, year) - K0_JDN
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_day(k, timezone)
    if sun_longitude_sector(nm, timezone) >= SOLSTICE_SECTOR:
        nm = new_moon_day(k - 1, timezone)
    return nm
