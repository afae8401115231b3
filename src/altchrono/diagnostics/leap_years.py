#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional

import altchrono


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "altchrono[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "altchrono[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    chronology: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


DEFAULT_STYLES: Dict[str, Style] = {
    "Julian": Style("Julian", "Julian", marker="o", size=22, hollow=False),
    "BritishCutover": Style("British", "BritishCutover", marker="o", size=60, hollow=True),
    "Coptic": Style("Coptic", "Coptic", marker="s", size=40, hollow=True),
    "Sym010": Style("Symmetry", "Sym010", marker="^", size=60, hollow=True),
    "Pax": Style("Pax", "Pax", marker="D", size=40, hollow=True),
    "Accounting": Style("Retail 4-5-4", "Accounting", marker="v", size=60, hollow=True),
}


def parse_chronologies(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    if not (1 <= len(out) <= 6):
        raise SystemExit("--chronologies must contain 1 to 6 comma-separated chronology ids")
    return out


def leap_years(chronology: str, start_year: int, end_year: int) -> List[int]:
    chrono = altchrono.get_chronology(chronology)
    return [y for y in range(start_year, end_year + 1) if chrono.is_leap_year(y)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-year barcode diagram across calendars (one row per calendar)."
    )
    p.add_argument("--start-year", type=int, default=1700)
    p.add_argument("--end-year", type=int, default=1800)
    p.add_argument("--out", default="leapyear_barcode.png")
    p.add_argument("--title", default="Leap years across calendars")
    p.add_argument(
        "--chronologies",
        default="Julian,BritishCutover,Sym010,Pax",
        help="Comma list of 1-6 chronology ids to plot (default: Julian,BritishCutover,Sym010,Pax).",
    )
    p.add_argument("--print", dest="print_only", action="store_true", help="List the leap years instead of plotting.")
    p.add_argument("--year-step", type=int, default=10, help="Label every k years (default: 10).")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    names = parse_chronologies(args.chronologies)
    styles: List[Style] = []
    for n in names:
        if n not in DEFAULT_STYLES:
            raise SystemExit(f"Unknown chronology '{n}'. Known: {sorted(DEFAULT_STYLES.keys())}")
        styles.append(DEFAULT_STYLES[n])

    if args.print_only:
        for st in styles:
            years = leap_years(st.chronology, start_year, end_year)
            print(f"{st.label} ({len(years)}): {' '.join(str(y) for y in years)}")
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    rows = len(styles)
    fig, ax = plt.subplots(figsize=(16, 1.0 + 0.6 * rows))

    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, rows + 1.5, 1.0)
    Z = np.zeros((rows, end_year - start_year + 1), dtype=float)

    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, rows + 0.5)
    ax.grid(False)
    ax.tick_params(axis="both", which="both", length=0)

    step = max(1, int(args.year_step))
    xt = list(range(start_year, end_year + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Calendar year")
    ax.set_yticks(list(range(1, rows + 1)))
    ax.set_yticklabels([st.label for st in styles])

    for row, st in enumerate(styles, start=1):
        x = np.array(leap_years(st.chronology, start_year, end_year), dtype=int)
        y = np.full_like(x, row)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=st.lw, alpha=st.alpha, zorder=5)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=st.alpha, zorder=5)

    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
