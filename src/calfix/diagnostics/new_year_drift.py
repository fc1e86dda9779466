#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import calfix
from calfix.calendars.gregorian import Gregorian
from calfix.core.fixed import Fixed


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calfix[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calfix[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 14.0
    hollow: bool = False


def new_year_offset(start: Fixed) -> Tuple[int, int]:
    """
    (Gregorian year, days from its Jan 1) for a new-year day.

    Starts in the last days of December count against the following
    January, so a calendar that straddles Jan 1 plots as a small band
    around zero instead of jumping to day 365.
    """
    gy = Gregorian.from_fixed(Fixed(start.day + 14)).year
    return gy, start.day - Gregorian.day_number(gy, 1, 1)


def build_series(np, name: str, start_year: int, end_year: int):
    cal = calfix.get_calendar(name)
    years = set()
    for gy in range(start_year, end_year + 1):
        years.add(cal.from_fixed(Gregorian(gy, 7, 1).to_fixed()).year)

    xs: List[int] = []
    ys: List[int] = []
    for y in sorted(years):
        gy, off = new_year_offset(cal.year_start(y).to_fixed())
        xs.append(gy)
        ys.append(off)
    return np.array(xs, dtype=int), np.array(ys, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of new-year days of the reform calendars against Gregorian.")
    p.add_argument("--start-year", type=int, default=1800)
    p.add_argument("--end-year", type=int, default=2200)
    p.add_argument("--relative", action="store_true", help="Subtract each calendar's median offset.")
    p.add_argument("--outbase", default="new_year_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "symmetry454":          Style("Symmetry (equinox)", "tab:blue", "o"),
        "symmetry454_solstice": Style("Symmetry (solstice)", "tab:cyan", "o", size=22, hollow=True),
        "positivist":           Style("Positivist", "0.45", "_", size=20),
        "cotsworth":            Style("Cotsworth", "tab:green", "|", size=20),
        "tranquility":          Style("Tranquility", "tab:purple", "s", size=10),
        "french_rev":           Style("French Rev.", "tab:red", "o", size=10),
        "french_rev_unadjusted": Style("French Rev. (unadjusted)", "tab:orange", "x", size=12),
    }

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    if args.relative:
        ax.set_ylabel("Days from median new-year position")
    else:
        ax.set_ylabel("Days from Gregorian Jan 1")
    ax.set_title("New-year days of reform calendars")

    for name, st in styles.items():
        x, y = build_series(np, name, args.start_year, args.end_year)
        if args.relative:
            y = y - float(np.median(y))
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=1.0, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=1.0, alpha=0.45, label=st.label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
