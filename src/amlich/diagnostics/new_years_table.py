from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import amlich


DEFAULT_CALENDARS: List[Tuple[str, str]] = [
    ("Vietnam", "vietnamese"),
    ("China", "chinese"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_calendars(arg: str) -> List[Tuple[str, str]]:
    """
    Parse calendar list from CLI.
    Example:
      --calendars "Vietnam=vietnamese,China=chinese"
    If you pass just calendar names, headers will be capitalized names:
      --calendars "vietnamese,chinese"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, cal = it.split("=", 1)
            out.append((name.strip(), cal.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print lunar New Year (Tết) date table for several calendars, with leap months."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calendars",
        type=str,
        default="",
        help='Comma list like "Vietnam=vietnamese,China=chinese" (default: both presets).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [f"{name} (leap)" for name, _ in calendars]
    colw = [5] + [max(14, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    mismatches: list[tuple[int, list[date]]] = []

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        seen: list[date] = []
        for (_, cal), w in zip(calendars, colw[1:]):
            d = amlich.new_year_day(Y, calendar=cal)
            lm = amlich.leap_month(Y, calendar=cal)
            cellv = fmt(d) + (f"  ({lm})" if lm is not None else "")
            row.append(cellv.ljust(w))
            seen.append(d)
        print("  ".join(row))
        if len(set(seen)) > 1:
            mismatches.append((Y, seen))

    if len(calendars) > 1:
        print("\nYears where New Year differs:")
        if not mismatches:
            print("(none)")
        for Y, ds in mismatches:
            print(f"{Y}  " + "  ".join(d.isoformat() for d in ds))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
