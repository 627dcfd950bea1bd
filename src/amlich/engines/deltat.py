"""
amlich.engines.deltat
---------------------
ΔT (TT - UT) correction applied to the new-moon series, in days.

*** TIME COORDINATE WARNING ***
`T` here is Julian centuries counted from 1900 January 0.5, i.e. the
new-moon argument `k / 1236.85`, NOT centuries from J2000.0.
"""

from __future__ import annotations

# Before ~800 AD the historical tidal-deceleration fit applies.
T_SPLIT = -11.0


def delta_t_ancient(T: float) -> float:
    T2 = T * T
    T3 = T2 * T
    return 0.001 + 0.000839 * T + 0.0002261 * T2 - 0.00000845 * T3 - 0.000000081 * T * T3


def delta_t_modern(T: float) -> float:
    T2 = T * T
    return -0.000278 + 0.000265 * T + 0.000262 * T2


def delta_t_days(T: float) -> float:
    """ΔT in days for T centuries since 1900 January 0.5."""
    if T < T_SPLIT:
        return delta_t_ancient(T)
    return delta_t_modern(T)
