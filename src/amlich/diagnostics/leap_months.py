#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import amlich


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "amlich[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "amlich[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    calendar: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


DEFAULT_STYLES: Dict[str, Style] = {
    "vietnamese": Style("Vietnam (UTC+7)", "vietnamese", marker="o", size=22, hollow=False),
    "chinese": Style("China (UTC+8)", "chinese", marker="o", size=95, hollow=True),
}


def parse_calendars(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    if not (1 <= len(out) <= 3):
        raise SystemExit("--calendars must contain 1 to 3 comma-separated calendars")
    return out


def leap_points(calendar: str, start_year: int, end_year: int) -> List[Tuple[int, int]]:
    out = []
    for Y in range(start_year, end_year + 1):
        lm = amlich.leap_month(Y, calendar=calendar)
        if lm is not None:
            out.append((Y, lm))
    return out


def build_points(np, calendar: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    pts = leap_points(calendar, start_year, end_year)
    xs = [y for y, _ in pts]
    ys = [m for _, m in pts]
    return np.array(xs, dtype=int), np.array(ys, dtype=int)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month barcode diagram across calendars (square cell grid only)."
    )
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Leap month pattern")
    p.add_argument(
        "--calendars",
        default="vietnamese,chinese",
        help="Comma list of 1-3 calendars to plot (default: vietnamese,chinese).",
    )
    p.add_argument(
        "--text",
        action="store_true",
        help="Print the leap months as a table instead of plotting.",
    )
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    calendars = parse_calendars(args.calendars)
    styles: List[Style] = []
    for c in calendars:
        if c not in DEFAULT_STYLES:
            raise SystemExit(f"Unknown calendar '{c}'. Known: {sorted(DEFAULT_STYLES.keys())}")
        styles.append(DEFAULT_STYLES[c])

    if args.text:
        for st in styles:
            pts = leap_points(st.calendar, start_year, end_year)
            print(f"{st.label}:")
            for Y, M in pts:
                print(f"  {Y}  leap {M}")
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(16, 3.6))

    # --- square cell grid ---
    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)

    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap="Greys",
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.grid(False)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_yticks(list(range(1, 13)))
    ax.set_xlabel("Lunar year")
    ax.set_ylabel("Leap month")

    for st in styles:
        x, m = build_points(np, st.calendar, start_year, end_year)
        if st.hollow:
            ax.scatter(x, m, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=st.lw, alpha=st.alpha, label=st.label, zorder=5)
        else:
            ax.scatter(x, m, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=st.alpha, label=st.label, zorder=5)

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
