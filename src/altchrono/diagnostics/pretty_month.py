from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import altchrono
from altchrono.chronologies.discordian import SEASONS, WEEKDAYS
from altchrono.core.date import ChronoDate

ISO_WEEKDAYS = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")


def dow_header(names: Tuple[str, ...], w: int = 6) -> str:
    return " ".join(n[:w].ljust(w) for n in names).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, header: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_title(first: ChronoDate) -> str:
    chrono = first.chronology
    if chrono.calendar_type == "discordian":
        return f"{chrono.id} YOLD {first.year}  {SEASONS[first.month - 1]}"
    return f"{chrono.id}  Y={first.year}  M={first.month}"


def month_grid(days: List[ChronoDate], days_in_week: int) -> List[List[Tuple[str, str]]]:
    """Weeks of a month; each cell shows the day number over the ISO month-day."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(days[0].day_of_week - 1)]
    for cd in days:
        iso = cd.to_iso()
        wk.append(cell(f"{cd.day:2d}", f"{iso.month:02d}-{iso.day:02d}"))
        if len(wk) == days_in_week:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < days_in_week:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def epagomenal_days(days: List[ChronoDate]) -> List[ChronoDate]:
    """Days outside the month grid falling inside or right after the month."""
    out = []
    d = days[0]
    while d <= days[-1].plus_days(1):
        if d.epagomenal is not None:
            out.append(d)
        d = d.plus_days(1)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a month of a calendar as a week grid.")
    p.add_argument("chronology", help="Chronology id or calendar type, e.g. Coptic or pax")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    args = p.parse_args(argv)

    chrono = altchrono.get_chronology(args.chronology)
    days = altchrono.month_days(args.year, args.month, chronology=args.chronology)
    names = WEEKDAYS if chrono.calendar_type == "discordian" else ISO_WEEKDAYS
    print_grid(month_title(days[0]), dow_header(names), month_grid(days, chrono.days_in_week))
    for d in epagomenal_days(days):
        print(f"outside the weeks: {d} ({d.to_iso().isoformat()})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
