from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import amlich


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def weeks_from_days(first: date, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.weekday())]  # Monday=0
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_month_calendar(calendar: str, Y: int, M: int, is_leap: bool) -> None:
    b = amlich.month_bounds(Y, M, is_leap_month=is_leap, calendar=calendar)
    d0 = b["first_date"]
    d1 = b["last_date"]

    days = []
    d = d0
    while d <= d1:
        info = amlich.day_info(d, calendar=calendar)
        days.append((f"{info.lunar.day:2d}", f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)

    leap_tag = "L" if is_leap else ""
    title = f"{calendar} lunar month  Y={Y}  M={M}{leap_tag}   ({d0} .. {d1})"
    print_grid(title, weeks_from_days(d0, days))


def gregorian_month_calendar(calendar: str, gy: int, gm: int) -> None:
    """Gregorian grid with the lunar label under each day, as a day cell shows it."""
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    days = []
    d = first
    while d <= last:
        t = amlich.day_info(d, calendar=calendar).lunar
        label = amlich.lunar_label(t.day, t.month_no)
        if t.day == 1 and t.is_leap_month:
            label += "L"
        days.append((f"{d.day:2d}", label))
        d += timedelta(days=1)

    title = f"{calendar} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, weeks_from_days(first, days))

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--calendar", default="vietnamese", help="vietnamese|chinese (default: vietnamese)")

    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2025 6)")
    p.add_argument("--leap", action="store_true",
                   help="If set, lunar month is the leap instance (only meaningful when the month repeats).")

    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 8)")

    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        # sensible default demo
        lunar_month_calendar(args.calendar, Y=2025, M=6, is_leap=True)
        gregorian_month_calendar(args.calendar, gy=2025, gm=8)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(args.calendar, Y=Y, M=M, is_leap=args.leap)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.calendar, gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
