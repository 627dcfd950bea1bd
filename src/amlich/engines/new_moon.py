"""
amlich.engines.new_moon
-----------------------
New-moon instants from a truncated periodic series (older Meeus form,
epoch 1900 January 0.5), with the ΔT correction of `amlich.engines.deltat`.

Lunation index k counts new moons from k=0 on 1900-01-01.
"""

from __future__ import annotations

import math

from .deltat import delta_t_days

# Mean synodic month used to estimate k from a day number.
SYNODIC_MONTH = 29.530588853

# JD of the k=0 new moon, as used to estimate k from a day number.
K0_JD = 2415021.076998695

LUNATIONS_PER_CENTURY = 1236.85

DR = math.pi / 180

# Periodic corrections to the mean new moon, in days:
# (amplitude, multiple of M, multiple of M', multiple of F)
# M = sun's mean anomaly, M' = moon's mean anomaly, F = moon's argument of latitude.
# The leading sin(M) term has a time-dependent amplitude and is handled apart.
NEW_MOON_TERMS = (
    (0.0021, 2, 0, 0),
    (-0.4068, 0, 1, 0),
    (0.0161, 0, 2, 0),
    (-0.0004, 0, 3, 0),
    (0.0104, 0, 0, 2),
    (-0.0051, 1, 1, 0),
    (-0.0074, 1, -1, 0),
    (0.0004, 1, 0, 2),
    (-0.0004, -1, 0, 2),
    (-0.0006, 0, 1, 2),
    (0.0010, 0, -1, 2),
    (0.0005, 1, 2, 0),
)


def mean_new_moon_jd(k: int) -> float:
    """Mean new moon (JDE) of lunation k, including the small secular sine term."""
    T = k / LUNATIONS_PER_CENTURY
    T2 = T * T
    T3 = T2 * T
    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * T2 - 0.000000155 * T3
    return jd1 + 0.00033 * math.sin((166.56 + 132.87 * T - 0.009173 * T2) * DR)


def new_moon_jd(k: int) -> float:
    """Corrected instant (JD, UT) of the k-th new moon."""
    T = k / LUNATIONS_PER_CENTURY
    T2 = T * T
    T3 = T2 * T

    jd1 = mean_new_moon_jd(k)

    M = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3
    Mpr = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3
    F = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3

    c1 = (0.1734 - 0.000393 * T) * math.sin(M * DR)
    for amp, m, mpr, f in NEW_MOON_TERMS:
        c1 += amp * math.sin(DR * (m * M + mpr * Mpr + f * F))

    return jd1 + c1 - delta_t_days(T)


def new_moon_day(k: int, timezone: float) -> int:
    """Local Julian Day Number on which the k-th new moon falls."""
    return math.floor(new_moon_jd(k) + 0.5 + timezone / 24)


def lunation_index(jdn: float) -> int:
    """Index of the lunation that began on or before `jdn` (approximate)."""
    return math.floor((jdn - K0_JD) / SYNODIC_MONTH)


def nearest_lunation_index(jdn: float) -> int:
    """Index of the new moon nearest `jdn`."""
    return math.floor((jdn - K0_JD) / SYNODIC_MONTH + 0.5)
