from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date

from altchrono.core.errors import AltChronoError


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    m = _DATE_RE.match(s)
    if m is None:
        raise SystemExit(f"Bad date '{s}', expected YYYY-MM-DD")
    y, mo, d = map(int, m.groups())
    return y, mo, d


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


def cmd_convert(argv: list[str]) -> int:
    import altchrono

    p = argparse.ArgumentParser(prog="altchrono convert", description="Convert a date between calendars")
    p.add_argument("date", help="YYYY-MM-DD (ISO unless --from is given)")
    p.add_argument("--to", required=True, help="target chronology id or calendar type")
    p.add_argument("--from", dest="source", default=None, help="chronology the date is written in")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    if args.source is None:
        out = altchrono.from_iso(date(y, m, d), chronology=args.to)
    else:
        out = altchrono.convert(altchrono.get_chronology(args.source).date(y, m, d), to=args.to)
    print(out)
    return 0


def cmd_today(argv: list[str]) -> int:
    import altchrono

    p = argparse.ArgumentParser(prog="altchrono today", description="Print today's date in some calendars")
    p.add_argument("chronologies", nargs="*", help="chronology ids (default: all registered)")
    args = p.parse_args(argv)

    for name in args.chronologies or altchrono.list_chronologies():
        print(altchrono.today(chronology=name))
    return 0


def cmd_list(argv: list[str]) -> int:
    import altchrono

    for name in altchrono.list_chronologies():
        print(name)
    return 0


def cmd_info(argv: list[str]) -> int:
    import altchrono

    p = argparse.ArgumentParser(prog="altchrono info", description="Describe a chronology")
    p.add_argument("chronology")
    args = p.parse_args(argv)

    for k, v in altchrono.chronology_info(args.chronology).items():
        print(f"{k}: {v}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="altchrono", description="Alternative calendar systems CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_conv = sub.add_parser("convert", help="ISO (or --from calendar) date -> calendar date")
    p_conv.add_argument("date", help="YYYY-MM-DD")
    p_conv.add_argument("--to", required=True)
    p_conv.add_argument("--from", dest="source", default=None)

    sub.add_parser("today", help="Today's date in the registered calendars")
    sub.add_parser("list", help="List registered chronologies")
    sub.add_parser("info", help="Describe a chronology")
    sub.add_parser("month", help="Print a month as a week grid (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-years", "year-starts"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "convert":
            conv_argv = [args.date, "--to", args.to]
            if args.source is not None:
                conv_argv += ["--from", args.source]
            return cmd_convert(conv_argv + rest)

        if args.cmd == "today":
            return cmd_today(rest)

        if args.cmd == "list":
            return cmd_list(rest)

        if args.cmd == "info":
            return cmd_info(rest)

        if args.cmd == "month":
            return _run_module_main("altchrono.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "leap-years": "altchrono.diagnostics.leap_years",
                "year-starts": "altchrono.diagnostics.year_starts",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (AltChronoError, KeyError) as e:
        print(f"altchrono: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
