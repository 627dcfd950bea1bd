from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import amlich


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_calendars(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        info = amlich.day_info(d0, calendar=calendar)
        back = amlich.to_gregorian(info.lunar, calendar=calendar)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("d0:", d0)
            print("lunar:", info.lunar)
            print("back:", back)
            print("explain:", amlich.explain(d0, calendar=calendar))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> lunar -> gregorian.")
    p.add_argument("--calendars", type=str, default="vietnamese,chinese",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="1800-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2199-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    start, end = parse_date(args.start), parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    total = 0
    for cal in parse_calendars(args.calendars):
        n_fail = roundtrip_test(cal, args.N, start, end, args.seed, max_failures=args.max_failures)
        status = "OK" if n_fail == 0 else f"{n_fail} failure(s)"
        print(f"{cal}: {args.N} trials, {status}")
        total += n_fail

    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
