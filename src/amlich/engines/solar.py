# engines/solar.py

from __future__ import annotations

import math

JD_J2000_MIDNIGHT = 2451545.5
DAYS_PER_CENTURY = 36525

DR = math.pi / 180


def sun_longitude(jdn: float, timezone: float) -> float:
    """
    True ecliptic longitude of the sun (radians, wrapped to [0, 2π)) at local
    midnight starting day `jdn`, using the three-term equation of center.
    """
    T = (jdn - JD_J2000_MIDNIGHT - timezone / 24) / DAYS_PER_CENTURY
    T2 = T * T

    # Mean anomaly and mean longitude (degrees)
    M = 357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T * T2
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2

    # Equation of center
    DL = (1.914600 - 0.004817 * T - 0.000014 * T2) * math.sin(DR * M)
    DL = DL + (0.019993 - 0.000101 * T) * math.sin(DR * 2 * M) + 0.000290 * math.sin(DR * 3 * M)

    L = (L0 + DL) * DR
    return L - math.pi * 2 * math.floor(L / (math.pi * 2))


def sun_longitude_deg(jdn: float, timezone: float) -> float:
    return math.degrees(sun_longitude(jdn, timezone))


def sun_longitude_sector(jdn: float, timezone: float) -> int:
    """
    Which of the twelve 30-degree sectors the sun occupies (0 = [0°, 30°)).
    Sector 9 starts at the winter solstice.
    """
    return math.floor(sun_longitude(jdn, timezone) / math.pi * 6)
