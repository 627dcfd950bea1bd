# tests/test_cli.py

import pytest

from amlich import cli

def test_day(capsys):
    assert cli.main(["day", "2025-08-01"]) == 0
    out = capsys.readouterr().out
    assert "2025-08-01 UTC+7 -> day 8, month 6 (leap), year 2025" in out
    assert "label: 8" in out

def test_date_shortcut(capsys):
    assert cli.main(["2025-07-25"]) == 0
    out = capsys.readouterr().out
    assert "day 1, month 6 (leap), year 2025" in out
    assert "label: 1/6" in out

def test_day_other_calendar(capsys):
    assert cli.main(["day", "2024-02-10", "--calendar", "chinese"]) == 0
    assert "UTC+8 -> day 1, month 1, year 2024" in capsys.readouterr().out

def test_day_strict_rejects(capsys):
    assert cli.main(["day", "2025-02-30", "--strict"]) == 2
    assert "error:" in capsys.readouterr().err

def test_day_debug_rejects_impossible_date(capsys):
    assert cli.main(["day", "2025-02-30", "--debug"]) == 2
    assert "error:" in capsys.readouterr().err
    assert cli.main(["day", "2025-02-30", "--debug", "--strict"]) == 2
    assert "error:" in capsys.readouterr().err

def test_day_debug(capsys):
    assert cli.main(["day", "2025-08-01", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "leap_offset" in out
    assert "year_span_days" in out

def test_to_solar(capsys):
    assert cli.main(["to-solar", "2025", "6", "1", "--leap"]) == 0
    assert "2025/6L/1 UTC+7 -> 2025-07-25" in capsys.readouterr().out

def test_to_solar_rejects_missing_leap(capsys):
    assert cli.main(["to-solar", "2024", "6", "1", "--leap"]) == 2
    assert "no leap month" in capsys.readouterr().err

def test_new_moon(capsys):
    assert cli.main(["new-moon", "0", "--tz", "0"]) == 0
    out = capsys.readouterr().out
    assert "JDN    = 2415021  (1900-01-01, UTC+0)" in out

def test_sun(capsys):
    assert cli.main(["sun", "2024-12-22"]) == 0
    assert "Sun sector      = 9" in capsys.readouterr().out

def test_year(capsys):
    assert cli.main(["year", "2025"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 13
    assert "2025  M06L  2025-07-25 .. 2025-08-22  (29 days)" in lines

def test_unknown_command():
    with pytest.raises(SystemExit):
        cli.main(["nope"])

def test_diag_leap_months_text(capsys):
    rc = cli.main(["diag", "leap-months", "--text", "--start-year", "2020", "--end-year", "2025"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Vietnam (UTC+7):" in out
    assert "  2023  leap 2" in out
    assert "  2025  leap 6" in out
    assert "  2024  leap" not in out

def test_diag_leap_months_plot(tmp_path, capsys):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    out_png = tmp_path / "barcode.png"
    rc = cli.main([
        "diag", "leap-months", "--start-year", "2000", "--end-year", "2030", "--out", str(out_png),
    ])
    assert rc == 0
    assert out_png.exists()
    assert "Saved:" in capsys.readouterr().out

def test_diag_round_trip(capsys):
    rc = cli.main(["diag", "round-trip", "--N", "50", "--start", "2000-01-01", "--end", "2030-12-31"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "vietnamese: 50 trials, OK" in out
    assert "chinese: 50 trials, OK" in out

def test_pretty_month(capsys):
    assert cli.main(["pretty-month"]) == 0
    out = capsys.readouterr().out
    assert "vietnamese lunar month  Y=2025  M=6L   (2025-07-25 .. 2025-08-22)" in out
    assert "vietnamese Gregorian month  2025-08" in out
    assert "1/7" in out

def test_new_years(capsys):
    assert cli.main(["new-years", "--from-year", "2024", "--to-year", "2026", "--dates", "iso"]) == 0
    out = capsys.readouterr().out
    assert "2024-02-10" in out
    assert "2025-01-29  (6)" in out
    assert "2026-02-17" in out
    assert "Years where New Year differs:" in out
