from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    neg = s.startswith("-")
    y, m, d = map(int, s.lstrip("-").split("-"))
    return (-y if neg else y), m, d


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import amlich
    from amlich.core.time import validate_civil_date

    p = argparse.ArgumentParser(prog="amlich day", description="Gregorian -> lunar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="vietnamese")
    p.add_argument("--tz", type=float, default=None, help="Override the calendar's UTC offset (hours east)")
    p.add_argument("--strict", action="store_true", help="Reject impossible dates such as Feb 30")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    cal = amlich.get_calendar(args.calendar, timezone=args.tz)
    tz = cal.info()["timezone"]

    try:
        if args.debug:
            if args.strict:
                validate_civil_date(d, m, y)
            print(cal.explain(date(y, m, d)))
            return 0
        lday, lmonth, lyear, leap = amlich.convert_solar_to_lunar(d, m, y, tz, strict=args.strict)
    except ValueError as e:
        # InvalidDateError, or datetime rejecting an impossible --debug date
        print(f"error: {e}", file=sys.stderr)
        return 2

    leap_tag = " (leap)" if leap else ""
    print(f"{y:04d}-{m:02d}-{d:02d} UTC{tz:+g} -> day {lday}, month {lmonth}{leap_tag}, year {lyear}")
    print(f"label: {amlich.lunar_label(lday, lmonth)}")
    return 0


def cmd_to_solar(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich to-solar", description="Lunar label -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="Leap instance of the month")
    p.add_argument("--calendar", default="vietnamese")
    p.add_argument("--tz", type=float, default=None)
    args = p.parse_args(argv)

    cal = amlich.get_calendar(args.calendar, timezone=args.tz)
    tz = cal.info()["timezone"]
    try:
        d, m, y = amlich.convert_lunar_to_solar(args.day, args.month, args.year, args.leap, tz)
    except amlich.InvalidDateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    leap_tag = "L" if args.leap else ""
    print(f"{args.year}/{args.month}{leap_tag}/{args.day} UTC{tz:+g} -> {y:04d}-{m:02d}-{d:02d}")
    return 0


def cmd_sun(argv: list[str]) -> int:
    from amlich.core.time import jd_from_date
    from amlich.engines import solar

    p = argparse.ArgumentParser(prog="amlich sun", description="Solar longitude and sector at local midnight.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--tz", type=float, default=7.0, help="UTC offset in hours east (default: 7)")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    jdn = jd_from_date(d, m, y)

    print(f"JDN = {jdn}")
    print(f"Sun longitude   = {solar.sun_longitude_deg(jdn, args.tz):.6f} deg")
    print(f"Sun sector      = {solar.sun_longitude_sector(jdn, args.tz)}")
    return 0


def cmd_new_moon(argv: list[str]) -> int:
    from amlich.core.time import jd_to_date
    from amlich.engines import new_moon

    p = argparse.ArgumentParser(prog="amlich new-moon", description="Instant and local day of the k-th new moon.")
    p.add_argument("k", type=int, help="Lunation index (k=0 is the new moon of 1900-01-01)")
    p.add_argument("--tz", type=float, default=7.0, help="UTC offset in hours east (default: 7)")
    args = p.parse_args(argv)

    jd = new_moon.new_moon_jd(args.k)
    jdn = new_moon.new_moon_day(args.k, args.tz)
    d, m, y = jd_to_date(jdn)

    print(f"k      = {args.k}")
    print(f"JD(UT) = {jd:.6f}")
    print(f"JDN    = {jdn}  ({y:04d}-{m:02d}-{d:02d}, UTC{args.tz:+g})")
    return 0


def cmd_year(argv: list[str]) -> int:
    import amlich
    from amlich.core.time import from_jdn

    p = argparse.ArgumentParser(prog="amlich year", description="Month layout of a lunar year.")
    p.add_argument("year", type=int)
    p.add_argument("--calendar", default="vietnamese")
    p.add_argument("--tz", type=float, default=None)
    args = p.parse_args(argv)

    cal = amlich.get_calendar(args.calendar, timezone=args.tz)
    for rec in cal.months_in_year(args.year):
        leap_tag = "L" if rec["is_leap_month"] else " "
        first = from_jdn(rec["first_jdn"])
        last = from_jdn(rec["last_jdn"])
        print(f"{rec['Y']}  M{rec['M']:02d}{leap_tag}  {first} .. {last}  ({rec['days']} days)")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `amlich YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="amlich", description="Lunisolar (âm lịch) calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar day label")
    sub.add_parser("to-solar", help="Lunar label -> Gregorian date")
    sub.add_parser("sun", help="Solar longitude and sector for a date")
    sub.add_parser("new-moon", help="Instant of the k-th new moon")
    sub.add_parser("year", help="Month layout of a lunar year")

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _configure_logging(args.verbose)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-solar":
        return cmd_to_solar(rest)

    if args.cmd == "sun":
        return cmd_sun(rest)

    if args.cmd == "new-moon":
        return cmd_new_moon(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("amlich.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("amlich.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-months": "amlich.diagnostics.leap_months",
            "round-trip": "amlich.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
