# tests/test_round_trip.py

import random
from datetime import date, timedelta
from fractions import Fraction

import pytest

from goddesscal import CYCLE_SECONDS, DAY_SECONDS, EPOCH_TIMESTAMP, GoddessDate, OutOfRangeError
from goddesscal.diagnostics.round_trip import all_days


def test_full_cycle_round_trip():
    """Every day of cycle 1: coordinates -> instant -> coordinates, with no gaps."""
    prev = None
    count = 0
    for g in all_days(1):
        t = g.to_timestamp()
        assert GoddessDate.from_timestamp(t) == g
        assert GoddessDate.from_timestamp(t + DAY_SECONDS - 1) == g
        if prev is not None:
            assert t == prev + DAY_SECONDS
        prev = t
        count += 1
    assert count == 180432
    assert prev + DAY_SECONDS == EPOCH_TIMESTAMP + CYCLE_SECONDS


@pytest.mark.parametrize("cycle", [2, 3])
def test_boundary_days_in_later_cycles(cycle):
    firsts_lasts = [
        GoddessDate(cycle, 1, 1, 1),
        GoddessDate(cycle, 1, 1, 30),
        GoddessDate(cycle, 1, 13, 30),
        GoddessDate(cycle, 10, 13, 29),
        GoddessDate(cycle, 235, 13, 29),
        GoddessDate(cycle, 236, 1, 1),
        GoddessDate(cycle, 470, 1, 1),
        GoddessDate(cycle, 470, 13, 29),
    ]
    for g in firsts_lasts:
        assert GoddessDate.from_timestamp(g.to_timestamp()) == g
        assert GoddessDate.from_datetime(g.to_datetime()) == g
        assert GoddessDate.from_date(g.to_date()) == g


def test_cycle_17_reaches_past_year_9999():
    # Cycle 17 starts in 9805; from year 235 on, its days lie beyond datetime.MAXYEAR.
    for g in (GoddessDate(17, 1, 1, 1), GoddessDate(17, 10, 13, 29)):
        assert GoddessDate.from_timestamp(g.to_timestamp()) == g
        assert GoddessDate.from_datetime(g.to_datetime()) == g
        assert GoddessDate.from_date(g.to_date()) == g

    for g in (GoddessDate(17, 235, 13, 29), GoddessDate(17, 236, 1, 1), GoddessDate(17, 470, 13, 29)):
        assert GoddessDate.from_timestamp(g.to_timestamp()) == g
        with pytest.raises(OutOfRangeError):
            g.to_datetime()
        with pytest.raises(OutOfRangeError):
            g.to_date()

    assert GoddessDate(17, 235, 13, 29).to_timestamp() == 255065760000


def test_cycle_rollover_instants():
    start = EPOCH_TIMESTAMP + CYCLE_SECONDS
    assert GoddessDate.from_timestamp(start - 1) == GoddessDate(1, 470, 13, 29)
    assert GoddessDate.from_timestamp(start) == GoddessDate(2, 1, 1, 1)
    assert GoddessDate.from_timestamp(Fraction(start) - Fraction(1, 10**6)) == GoddessDate(1, 470, 13, 29)


def test_random_gregorian_round_trip():
    random.seed(42)
    start = date(1901, 8, 14)
    for _ in range(5000):
        d = start + timedelta(days=random.randint(0, 400_000))
        g = GoddessDate.from_date(d)
        assert g.to_date() == d


def test_random_fractional_instants():
    random.seed(7)
    for _ in range(2000):
        t = EPOCH_TIMESTAMP + random.uniform(0, 5 * CYCLE_SECONDS)
        g = GoddessDate.from_timestamp(t)
        day_start = g.to_timestamp()
        assert day_start <= Fraction(t) < day_start + DAY_SECONDS
