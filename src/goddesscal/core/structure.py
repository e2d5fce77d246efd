"""
goddesscal.core.structure
-------------------------
Structural arithmetic of the McKenna-Meyer Goddess Calendar.

A cycle is 470 years. Each year has 13 months alternating 30 and 29 days;
the 13th month has 30 days in a normal year and 29 in a short one. Years
whose ordinal is divisible by 10 or by 235 are short.

The per-month day counts are the only hand-written table. Every other table
(year totals, cycle totals, running sums) is folded from them at import time
and stored as a tuple, so lookups are read-only and need no locking.

All offsets are seconds since the calendar epoch (1901-08-14 00:00:00 UTC).
"""

from __future__ import annotations

import math
from bisect import bisect_right
from fractions import Fraction
from itertools import accumulate
from typing import Dict, Literal, Tuple

from .errors import InvalidMonth, PreEpochError
from .time import NumT

Length = Literal["normal", "short"]
LENGTHS: Tuple[Length, ...] = ("normal", "short")

# ============================================================
# Day
# ============================================================

DAY_SECONDS = 86400

# ============================================================
# Month
# ============================================================

MONTH_COUNT = 13
MONTHS = range(1, MONTH_COUNT + 1)

MONTH_NAMES: Tuple[str, ...] = (
    "Athena", "Brigid", "Cerridwen", "Miranda", "Kathia", "Freya", "Gaea",
    "Hathor", "Inanna", "Juno", "Kore", "Lilith", "Maria",
)


def _month_day_table(length: Length) -> Tuple[int, ...]:
    days = []
    for m in MONTHS:
        if m == MONTH_COUNT:
            days.append(30 if length == "normal" else 29)
        else:
            days.append(30 if m % 2 else 29)
    return tuple(days)


_MONTH_DAYS: Dict[Length, Tuple[int, ...]] = {L: _month_day_table(L) for L in LENGTHS}
_MONTH_ACC_DAYS: Dict[Length, Tuple[int, ...]] = {
    L: tuple(accumulate(_MONTH_DAYS[L])) for L in LENGTHS
}
_MONTH_ACC_SECONDS: Dict[Length, Tuple[int, ...]] = {
    L: tuple(d * DAY_SECONDS for d in _MONTH_ACC_DAYS[L]) for L in LENGTHS
}


def month_days(length: Length) -> Tuple[int, ...]:
    """Day count of months 1..13 in a year of the given length."""
    return _MONTH_DAYS[length]


def month_accumulated_days(length: Length) -> Tuple[int, ...]:
    """Running day count through the end of each month 1..13."""
    return _MONTH_ACC_DAYS[length]


def month_accumulated_seconds(length: Length) -> Tuple[int, ...]:
    """Running second count through the end of each month 1..13."""
    return _MONTH_ACC_SECONDS[length]


def days_in_month(month: int, length: Length) -> int:
    if not (1 <= month <= MONTH_COUNT):
        raise InvalidMonth(month)
    return _MONTH_DAYS[length][month - 1]


def days_before_month(month: int, length: Length) -> int:
    """Sum of the day counts of the months preceding `month`."""
    if not (1 <= month <= MONTH_COUNT):
        raise InvalidMonth(month)
    return _MONTH_ACC_DAYS[length][month - 2] if month > 1 else 0


def month_name(month: int) -> str:
    if not (1 <= month <= MONTH_COUNT):
        raise InvalidMonth(month)
    return MONTH_NAMES[month - 1]

# ============================================================
# Year
# ============================================================

SHORT_YEAR_MODULI: Tuple[int, ...] = (10, 235)


def length_of(year: int) -> Length:
    """Length of the year with the given ordinal. Defined for every integer >= 1."""
    return "short" if any(year % k == 0 for k in SHORT_YEAR_MODULI) else "normal"


def is_short(year: int) -> bool:
    return length_of(year) == "short"


def year_days(length: Length) -> int:
    return sum(_MONTH_DAYS[length])


def year_seconds(length: Length) -> int:
    return year_days(length) * DAY_SECONDS


NORMAL_YEAR_DAYS = year_days("normal")           # 384
SHORT_YEAR_DAYS = year_days("short")             # 383
NORMAL_YEAR_SECONDS = year_seconds("normal")     # 33177600
SHORT_YEAR_SECONDS = year_seconds("short")       # 33091200

# ============================================================
# Cycle
# ============================================================

CYCLE_YEARS = 470
YEARS = range(1, CYCLE_YEARS + 1)

_CYCLE_YEARS_BY_LENGTH: Dict[Length, Tuple[int, ...]] = {
    L: tuple(y for y in YEARS if length_of(y) == L) for L in LENGTHS
}


def cycle_years(length: Length) -> Tuple[int, ...]:
    """Ordinals of the years of the given length within one cycle, ascending."""
    return _CYCLE_YEARS_BY_LENGTH[length]


NORMAL_YEAR_COUNT = len(cycle_years("normal"))   # 422
SHORT_YEAR_COUNT = len(cycle_years("short"))     # 48

CYCLE_DAYS = sum(year_days(length_of(y)) for y in YEARS)         # 180432
CYCLE_SECONDS = sum(year_seconds(length_of(y)) for y in YEARS)   # 15589324800

# Seconds from the start of the cycle through the end of each year 1..470.
CYCLE_ACCUMULATED_SECONDS: Tuple[int, ...] = tuple(
    accumulate(year_seconds(length_of(y)) for y in YEARS)
)


def seconds_before_year(year: int) -> int:
    """Seconds from the start of the cycle to the start of `year`, using each prior year's own length."""
    return CYCLE_ACCUMULATED_SECONDS[year - 2] if year > 1 else 0

# ============================================================
# Decomposition / composition
# ============================================================

def normalize(cycle: int, year: int, month: int, day: int) -> Tuple[int, int, int, int]:
    """
    Carry a day that overshoots its month into the next month,
    rolling month into year and year into cycle.
    """
    limit = days_in_month(month, length_of(year))
    if day > limit:
        day -= limit
        month += 1
        if month > MONTH_COUNT:
            month = 1
            year += 1
            if year > CYCLE_YEARS:
                year = 1
                cycle += 1
    return cycle, year, month, day


def decompose(offset: NumT) -> Tuple[int, int, int, int]:
    """
    Seconds since the epoch -> (cycle, year, month, day).

    Each level subtracts the running-sum prefix of the coarser unit and
    searches the next finer table. Arithmetic is exact (Fraction), so
    fractional offsets never drift across a day boundary.
    """
    offset = Fraction(offset)
    if offset < 0:
        raise PreEpochError(offset)

    cycle = math.floor(offset / CYCLE_SECONDS) + 1
    in_cycle = offset - (cycle - 1) * CYCLE_SECONDS

    # Years already completed in this cycle.
    done = bisect_right(CYCLE_ACCUMULATED_SECONDS, in_cycle)
    year = done + 1
    in_year = in_cycle - (CYCLE_ACCUMULATED_SECONDS[done - 1] if done else 0)

    table = month_accumulated_seconds(length_of(year))
    done = bisect_right(table, in_year)
    month = done + 1
    in_month = in_year - (table[done - 1] if done else 0)

    day = math.floor(in_month / DAY_SECONDS) + 1
    return normalize(cycle, year, month, day)


def compose(cycle: int, year: int, month: int, day: int) -> int:
    """(cycle, year, month, day) -> seconds since the epoch at the start of that day."""
    days = days_before_month(month, length_of(year)) + (day - 1)
    return (cycle - 1) * CYCLE_SECONDS + seconds_before_year(year) + days * DAY_SECONDS
