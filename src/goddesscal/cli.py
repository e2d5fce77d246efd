from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

from goddesscal.core.errors import GoddessCalError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {s!r}: {e}") from e


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


def cmd_day(argv: list[str]) -> int:
    import goddesscal

    p = argparse.ArgumentParser(prog="goddesscal day", description="Gregorian -> Goddess date")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--engine", default="mmg")
    p.add_argument("--style", choices=("short", "medium", "full"), default="full")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    info = goddesscal.day_info(args.date, engine=args.engine, debug=args.debug)
    if args.debug:
        print(info)
    else:
        print(goddesscal.render(info.goddess, args.style, engine=args.engine))
    return 0


def cmd_gregorian(argv: list[str]) -> int:
    import goddesscal

    p = argparse.ArgumentParser(prog="goddesscal gregorian", description="Goddess date -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--cycle", type=int, default=1)
    p.add_argument("--engine", default="mmg")
    p.add_argument("--datetime", action="store_true", help="Print the UTC instant the day starts at.")
    args = p.parse_args(argv)

    g = goddesscal.GoddessDate.make(args.year, args.month, args.day, cycle=args.cycle)
    if args.datetime:
        print(goddesscal.to_datetime(g, engine=args.engine).isoformat())
    else:
        print(goddesscal.to_gregorian(g, engine=args.engine).isoformat())
    return 0


def cmd_info(argv: list[str]) -> int:
    import goddesscal

    p = argparse.ArgumentParser(prog="goddesscal info", description="Print engine parameters.")
    p.add_argument("--engine", default="mmg")
    args = p.parse_args(argv)

    for k, v in goddesscal.engine_info(args.engine).items():
        print(f"{k:12s} {v}")
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `goddesscal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="goddesscal", description="McKenna-Meyer Goddess calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Goddess date")
    sub.add_parser("gregorian", help="Goddess date -> Gregorian date")
    sub.add_parser("info", help="Print engine parameters")

    # diagnostics
    sub.add_parser("pretty-month", help="Print Goddess/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "gregorian":
        return cmd_gregorian(rest)

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("goddesscal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("goddesscal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "goddesscal.diagnostics.round_trip",
            "year-lengths": "goddesscal.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return _dispatch(argv)
    except GoddessCalError as e:
        raise SystemExit(f"goddesscal: {e}") from e


if __name__ == "__main__":
    raise SystemExit(main())
