from __future__ import annotations
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone
from fractions import Fraction
from typing import Union

from .errors import OutOfRangeError

NumT = Union[int, float, Fraction]

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Day 1 of month 1 of year 1 of cycle 1.
EPOCH = datetime(1901, 8, 14, tzinfo=timezone.utc)


def exact_seconds(t: NumT) -> Fraction:
    """A numeric instant as an exact Fraction; anything that is not a number is a TypeError."""
    if isinstance(t, bool) or not isinstance(t, (int, float, Fraction)):
        raise TypeError(f"instant must be int, float or Fraction, not {type(t).__name__}")
    return Fraction(t)


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    if not (MINYEAR <= year <= MAXYEAR):
        raise OutOfRangeError(f"JDN {jdn} falls in Gregorian year {year}, outside {MINYEAR}..{MAXYEAR}.")
    return date(year, month, day)


def timedelta_seconds(td: timedelta) -> Fraction:
    """Exact length of a timedelta in seconds (microseconds kept as a fraction)."""
    return Fraction(td.days * 86400 + td.seconds) + Fraction(td.microseconds, 1_000_000)


def datetime_to_timestamp(dt: datetime) -> Fraction:
    """
    datetime -> exact seconds since the Unix epoch. Requires a timezone-aware datetime.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return timedelta_seconds(dt.astimezone(timezone.utc) - UNIX_EPOCH)


def timestamp_to_datetime(t: NumT) -> datetime:
    """
    Seconds since the Unix epoch -> timezone-aware datetime in UTC.

    Integral timestamps are converted exactly; fractional ones are rounded
    to the microsecond by timedelta. Instants outside years 1..9999 raise
    OutOfRangeError.
    """
    try:
        if isinstance(t, int):
            return UNIX_EPOCH + timedelta(seconds=t)
        return UNIX_EPOCH + timedelta(seconds=float(t))
    except OverflowError as e:
        raise OutOfRangeError(f"Timestamp {t} lies outside the years {MINYEAR}..{MAXYEAR}.") from e


EPOCH_JDN = to_jdn(EPOCH.date())                       # 2415611
EPOCH_TIMESTAMP = int(datetime_to_timestamp(EPOCH))    # -2158012800
