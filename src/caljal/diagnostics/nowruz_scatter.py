#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import caljal
from caljal.engines import arithmetic


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljal[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 14.0
    hollow: bool = False


DEFAULT_STYLES: Dict[str, Style] = {
    "arithmetic-33": Style("33-year cycle", "tab:blue", "o"),
    "birashk-2820": Style("2820-year cycle", "tab:red", "o", size=40.0, hollow=True),
}


def nowruz_march_day(cal, year: int) -> int:
    """Day of March (Gregorian) on which Jalali `year` begins; 1 April = 32."""
    g = arithmetic.to_gregorian(cal, cal.date(year, 1, 1))
    return g.day if g.month == 3 else 31 + g.day


def build_series(np, rule: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    cal = caljal.get_calendar(rule)
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(nowruz_march_day(cal, int(Y)))
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Nowruz (1 Farvardin) dates per leap rule.")
    p.add_argument("--start", type=int, default=1200, help="First Jalali year.")
    p.add_argument("--end", type=int, default=1600, help="Last Jalali year.")
    p.add_argument("--rules", type=str, default=",".join(caljal.list_rules()))
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Jalali year")
    ax.set_ylabel("Day of March (Gregorian)")
    ax.set_title("Nowruz dates per leap rule")

    for rule in [x.strip() for x in args.rules.split(",") if x.strip()]:
        st = DEFAULT_STYLES.get(rule, Style(rule, "0.45", "x"))
        x, y = build_series(np, rule, args.start, args.end)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, alpha=0.5, label=st.label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=150)
    plt.close(fig)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
