from __future__ import annotations

from datetime import date
import argparse

import goddesscal
from goddesscal.core import structure as st


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of each Goddess New Year (1 Athena) over a range of years."
    )
    p.add_argument("--engine", default="mmg")
    p.add_argument("--cycle", type=int, default=1)
    p.add_argument("--from-year", type=int, default=100)
    p.add_argument("--to-year", type=int, default=130)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=0,
        help="After the table, list the New Years that fall in this Gregorian month (0 = skip).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if not (1 <= Y0 and Y1 <= st.CYCLE_YEARS):
        raise SystemExit(f"years must lie in 1..{st.CYCLE_YEARS}")

    def fmt(d: date) -> str:
        return f"{d.month:02d}-{d.day:02d}" if args.dates == "mmdd" else d.isoformat()

    headers = ["Year", "New Year", "Length", "Days"]
    colw = [5, 10, 6, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[date, int]] = []
    for Y in range(Y0, Y1 + 1):
        ny = goddesscal.new_year_day(Y, cycle=args.cycle, engine=args.engine)
        d = ny["date"]
        row = [str(Y), fmt(d), ny["length"], str(ny["days"])]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if d.month == args.list_month:
            hits.append((d, Y))

    if args.list_month:
        print(f"\nNew Year occurrences in month={args.list_month:02d}:")
        if not hits:
            print("(none)")
        for d, Y in hits:
            print(f"{d.isoformat()}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
