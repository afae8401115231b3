from __future__ import annotations

import argparse
from datetime import date
from typing import List, Tuple

import altchrono


DEFAULT_CALENDARS: List[Tuple[str, str]] = [
    ("Coptic", "Coptic"),
    ("Ethiopic", "Ethiopic"),
    ("Julian", "Julian"),
    ("Sym010", "Sym010"),
    ("Pax", "Pax"),
    ("Accounting", "Accounting"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_calendars(arg: str) -> List[Tuple[str, str]]:
    """
    Parse calendar list from CLI.
    Example:
      --calendars "Copt=coptic,Eth=ethiopic,Pax=pax"
    If you pass just chronologies, names are the chronology ids:
      --calendars "coptic,pax"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, chrono = it.split("=", 1)
            out.append((name.strip(), chrono.strip()))
        else:
            out.append((altchrono.get_chronology(it).id, it))
    return out


def year_start(chronology: str, year: int) -> date:
    chrono = altchrono.get_chronology(chronology)
    return chrono.date_year_day(year, 1).to_iso()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the ISO date on which each year starts, for several calendars."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calendars",
        type=str,
        default="",
        help='Comma list like "Copt=coptic,Pax=pax" (default: Coptic, Ethiopic, Julian, Sym010, Pax, Accounting).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in table columns (default: iso).",
    )
    p.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Add this to the row year for a calendar whose years are numbered differently, e.g. 284 for Coptic.",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in calendars]
    colw = [5] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for (_, chrono), w in zip(calendars, colw[1:]):
            row.append(fmt(year_start(chrono, Y + args.offset)).ljust(w))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
