from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import Iterator, List

import goddesscal
from goddesscal.core import structure as st
from goddesscal.core.types import GoddessDate


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def all_days(cycle: int) -> Iterator[GoddessDate]:
    """Every valid day of one cycle, in calendar order."""
    for Y in st.YEARS:
        days = st.month_days(st.length_of(Y))
        for M in st.MONTHS:
            for D in range(1, days[M - 1] + 1):
                yield GoddessDate(cycle, Y, M, D)


def cycle_test(engine: str, cycle: int, *, max_failures: int) -> int:
    """Goddess -> instant -> Goddess for every day of a cycle, and check days are contiguous."""
    eng = goddesscal.get_engine(engine)
    failures = 0
    prev_jdn = None

    for g in all_days(cycle):
        t = eng.to_timestamp(g)
        back = eng.from_timestamp(t)
        last_second = eng.from_timestamp(t + st.DAY_SECONDS - 1)
        jdn = eng.to_jdn(g)
        contiguous = prev_jdn is None or jdn == prev_jdn + 1
        prev_jdn = jdn

        if back != g or last_second != g or not contiguous:
            failures += 1
            print("\nFAIL (cycle)")
            print("engine:", engine)
            print("goddess:", g)
            print("timestamp:", t)
            print("back:", back)
            print("last second:", last_second)
            print("contiguous:", contiguous)
            if failures >= max_failures:
                return failures

    return failures


def random_test(engine: str, N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """Gregorian -> Goddess -> Gregorian on random civil dates."""
    random.seed(seed)
    span = (end - start).days
    failures = 0

    for _ in range(N):
        d0 = start + timedelta(days=random.randint(0, span))
        info = goddesscal.day_info(d0, engine=engine)
        back = goddesscal.to_gregorian(info.goddess, engine=engine)
        if back != d0:
            failures += 1
            print("\nFAIL (random)")
            print("engine:", engine)
            print("d0:", d0)
            print("goddess:", info.goddess)
            print("back:", back)
            print("explain:", goddesscal.explain(d0, engine=engine))
            if failures >= max_failures:
                return failures

    return failures


def parse_engines(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: goddess -> instant -> goddess, gregorian -> goddess -> gregorian.")
    p.add_argument("--engines", type=str, default="mmg", help="Comma-separated engine list.")
    p.add_argument("--cycles", type=int, default=1, help="Number of full cycles to sweep (default: 1).")
    p.add_argument("--N", type=int, default=2000, help="Random Gregorian trials per engine.")
    p.add_argument("--start", type=str, default="1901-08-14", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2900-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for eng in parse_engines(args.engines):
        for cycle in range(1, args.cycles + 1):
            print(f"Sweeping {eng} cycle {cycle} ...")
            total_fail += cycle_test(eng, cycle, max_failures=args.max_failures)
        print(f"Testing {eng} on {args.N} random dates ...")
        total_fail += random_test(eng, args.N, start, end, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
