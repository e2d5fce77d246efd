from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import goddesscal

DOW_HEADER = "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def weeks_from(first: date, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    """Lay consecutive day cells out Monday-first, padding both ends of the grid."""
    padded = [cell("", "")] * first.weekday() + cells
    padded += [cell("", "")] * (-len(padded) % 7)
    return [padded[i:i + 7] for i in range(0, len(padded), 7)]


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(DOW_HEADER)
    print("-" * len(DOW_HEADER))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def goddess_month_calendar(engine: str, cycle: int, Y: int, M: int) -> None:
    rows = goddesscal.days_in_month(Y, M, cycle=cycle, engine=engine)
    d0, d1 = rows[0]["date"], rows[-1]["date"]

    cells = [cell(f"{r['day']:2d}", f"{r['date'].month:02d}-{r['date'].day:02d}") for r in rows]
    name = goddesscal.month_bounds(Y, M, cycle=cycle, engine=engine, as_date=False)["name"]
    title = f"{engine} month  C={cycle}  Y={Y}  M={M} ({name})   ({d0} .. {d1})"
    print_grid(title, weeks_from(d0, cells))


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    ndays = pycal.monthrange(gy, gm)[1]

    cells = []
    for k in range(ndays):
        d = first + timedelta(days=k)
        g = goddesscal.day_info(d, engine=engine).goddess
        cells.append(cell(f"{d.day:2d}", f"{g.month:02d}-{g.day:02d}"))

    title = f"{engine} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, weeks_from(first, cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Goddess-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--engine", default="mmg", help="registered engine name (default: mmg)")
    p.add_argument("--cycle", type=int, default=1, help="Cycle of the Goddess month (default: 1)")
    p.add_argument("--goddess", nargs=2, type=int, metavar=("Y", "M"),
                   help="Goddess month to print: Y M (e.g. 113 3)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2019 7)")
    args = p.parse_args(argv)

    if not args.goddess and not args.greg:
        today = goddesscal.day_info(date.today(), engine=args.engine).goddess
        goddess_month_calendar(args.engine, today.cycle, today.year, today.month)
        return 0

    if args.goddess:
        Y, M = args.goddess
        goddess_month_calendar(args.engine, args.cycle, Y, M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy, gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
