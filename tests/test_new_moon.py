# tests/test_new_moon.py

import pytest

from amlich.core.time import jd_from_date
from amlich.engines import deltat, new_moon as nm

def test_epoch_new_moon():
    """k=0 is the new moon of 1900-01-01 ~13:50 UT."""
    assert nm.new_moon_jd(0) == pytest.approx(nm.K0_JD, abs=2e-3)
    assert nm.new_moon_day(0, 0.0) == jd_from_date(1, 1, 1900)
    assert nm.new_moon_day(0, 7.0) == jd_from_date(1, 1, 1900)
    # UTC+11 pushes the instant past local midnight
    assert nm.new_moon_day(0, 11.0) == jd_from_date(2, 1, 1900)

@pytest.mark.parametrize(
    "day, month, year",
    [
        (10, 2, 2024),   # 2024-02-09 22:59 UT
        (1, 12, 2024),   # 2024-12-01 06:21 UT
        (29, 1, 2025),   # 2025-01-29 12:36 UT
        (25, 7, 2025),   # 2025-07-24 19:11 UT
        (23, 8, 2025),   # 2025-08-23 06:06 UT
    ],
)
def test_modern_new_moons_utc7(day, month, year):
    jdn = jd_from_date(day, month, year)
    k = nm.nearest_lunation_index(jdn)
    assert nm.new_moon_day(k, 7.0) == jdn

def test_new_moons_strictly_increasing():
    prev = nm.new_moon_day(-3000, 7.0)
    for k in range(-2999, 4000):
        cur = nm.new_moon_day(k, 7.0)
        assert cur > prev
        assert 29 <= cur - prev <= 30
        prev = cur

def test_lunation_index_brackets_day():
    for jdn in range(jd_from_date(1, 1, 2020), jd_from_date(1, 1, 2021)):
        k = nm.lunation_index(jdn)
        start = nm.new_moon_day(k + 1, 7.0)
        if start > jdn:
            start = nm.new_moon_day(k, 7.0)
        assert start <= jdn < nm.new_moon_day(nm.nearest_lunation_index(start) + 1, 7.0)

def test_periodic_table_size():
    # 12 tabulated terms + the sin(M) term + the secular term in the mean new moon
    assert len(nm.NEW_MOON_TERMS) == 12

def test_delta_t_branches():
    assert deltat.delta_t_days(0.0) == pytest.approx(-0.000278)
    assert deltat.delta_t_days(-12.0) == deltat.delta_t_ancient(-12.0)
    assert deltat.delta_t_days(-12.0) == pytest.approx(0.036412384, abs=1e-9)
    assert deltat.delta_t_days(-11.0) == deltat.delta_t_modern(-11.0)
    # around 2025 the modern branch gives ~40 s
    assert deltat.delta_t_days(1.25) * 86400 == pytest.approx(39.97, abs=0.05)
