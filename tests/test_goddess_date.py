# tests/test_goddess_date.py

from datetime import date, datetime, timedelta, timezone
from fractions import Fraction

import pytest

import goddesscal

from goddesscal import (
    EPOCH,
    EPOCH_JDN,
    EPOCH_TIMESTAMP,
    GoddessDate,
    InvalidCycle,
    InvalidDay,
    InvalidMonth,
    InvalidYear,
    PreEpochError,
    ValidationError,
)

# Gregorian UTC date -> (cycle, year, month, day)
SCENARIOS = [
    (date(1901, 8, 14), (1, 1, 1, 1)),
    (date(2019, 5, 4), (1, 113, 1, 1)),
    (date(2019, 7, 25), (1, 113, 3, 24)),
    (date(2020, 5, 21), (1, 113, 13, 30)),
    (date(2147, 7, 28), (1, 235, 1, 1)),
    (date(2148, 8, 13), (1, 235, 13, 29)),
    (date(2148, 4, 25), (1, 235, 10, 7)),
    (date(2394, 7, 29), (1, 470, 1, 1)),
    (date(2395, 8, 15), (1, 470, 13, 29)),
    (date(2279, 5, 26), (1, 360, 6, 15)),
]


def test_epoch_constants():
    assert EPOCH == datetime(1901, 8, 14, tzinfo=timezone.utc)
    assert EPOCH_TIMESTAMP == -2158012800
    assert EPOCH_JDN == 2415611
    assert GoddessDate.from_datetime(EPOCH) == GoddessDate(1, 1, 1, 1)
    assert GoddessDate.from_timestamp(EPOCH_TIMESTAMP) == GoddessDate(1, 1, 1, 1)


@pytest.mark.parametrize("d, coords", SCENARIOS)
def test_gregorian_scenarios(d, coords):
    g = GoddessDate(*coords)
    midnight = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)

    assert GoddessDate.from_date(d) == g
    assert GoddessDate.from_datetime(midnight) == g
    assert GoddessDate.from_datetime(midnight + timedelta(hours=23, minutes=59, seconds=59)) == g
    assert GoddessDate.from_timestamp(midnight.timestamp()) == g

    assert g.to_date() == d
    assert g.to_datetime() == midnight
    assert g.to_timestamp() == int(midnight.timestamp())


def test_make_defaults_to_cycle_one():
    g = GoddessDate.make(113, 3, 24)
    assert g == GoddessDate(1, 113, 3, 24)
    assert GoddessDate.make(113, 3, 24, cycle=2).cycle == 2
    assert g.as_tuple() == (1, 113, 3, 24)


@pytest.mark.parametrize(
    "kwargs, exc",
    [
        (dict(year=0, month=1, day=1), InvalidYear),
        (dict(year=471, month=1, day=1), InvalidYear),
        (dict(year=1, month=0, day=1), InvalidMonth),
        (dict(year=1, month=14, day=1), InvalidMonth),
        (dict(year=1, month=2, day=31), InvalidDay),
        (dict(year=1, month=2, day=30), InvalidDay),
        (dict(year=1, month=1, day=0), InvalidDay),
        (dict(year=10, month=13, day=30), InvalidDay),
        (dict(year=1, month=1, day=1, cycle=0), InvalidCycle),
    ],
)
def test_validation(kwargs, exc):
    with pytest.raises(exc) as info:
        GoddessDate.make(**kwargs)
    assert isinstance(info.value, ValidationError)
    assert isinstance(info.value, ValueError)


def test_validation_order_and_value():
    # Year is checked before month, month before day.
    with pytest.raises(InvalidYear) as info:
        GoddessDate.make(0, 14, 99)
    assert info.value.value == 0
    with pytest.raises(InvalidMonth):
        GoddessDate.make(1, 14, 99)
    with pytest.raises(InvalidDay) as info:
        GoddessDate.make(1, 2, 30)
    assert info.value.days_in_month == 29


def test_last_day_of_normal_and_short_years():
    assert GoddessDate.make(113, 13, 30).days_in_month == 30
    assert GoddessDate.make(235, 13, 29).days_in_month == 29
    assert GoddessDate.make(235, 13, 29).length == "short"
    assert GoddessDate.make(113, 1, 1).length == "normal"


def test_day_in_year():
    assert GoddessDate.make(1, 1, 1).day_in_year == 1
    assert GoddessDate.make(113, 3, 24).day_in_year == 30 + 29 + 24
    assert GoddessDate.make(113, 13, 30).day_in_year == 384
    assert GoddessDate.make(470, 13, 29).day_in_year == 383


def test_render():
    g = GoddessDate.make(113, 3, 24)
    assert g.render("short") == "113-3-24"
    assert g.render("medium") == "113-Cerridwen-24"
    assert g.render("full") == "1-113-Cerridwen-24 MMG"
    assert g.render() == g.full_string
    assert g.short_string == "113-3-24"
    assert g.medium_string == "113-Cerridwen-24"
    assert str(g) == "1-113-3-24 MMG"
    assert GoddessDate.make(1, 13, 1).month_name == "Maria"
    with pytest.raises(ValueError):
        g.render("long")


def test_ordering_and_hashing():
    a = GoddessDate(1, 113, 3, 24)
    b = GoddessDate(1, 113, 4, 1)
    c = GoddessDate(2, 1, 1, 1)
    assert a < b < c
    assert sorted([c, a, b]) == [a, b, c]
    assert len({a, GoddessDate(1, 113, 3, 24)}) == 1


def test_instant_within_day():
    g = GoddessDate.make(113, 3, 24)
    t = g.to_timestamp()
    assert GoddessDate.from_timestamp(t + 0.5) == g
    assert GoddessDate.from_timestamp(t + 86399.999) == g
    assert GoddessDate.from_timestamp(t + 86400) == GoddessDate.make(113, 3, 25)
    assert GoddessDate.from_timestamp(t - 0.001) == GoddessDate.make(113, 3, 23)


def test_aware_non_utc_datetime():
    tz = timezone(timedelta(hours=-7))
    dt = datetime(2019, 7, 24, 17, 0, tzinfo=tz)  # 2019-07-25 00:00 UTC
    assert GoddessDate.from_datetime(dt) == GoddessDate.make(113, 3, 24)


def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        GoddessDate.from_datetime(datetime(2019, 7, 25))


def test_pre_epoch_rejected():
    with pytest.raises(PreEpochError):
        GoddessDate.from_timestamp(EPOCH_TIMESTAMP - 1)
    with pytest.raises(PreEpochError):
        GoddessDate.from_date(date(1901, 8, 13))


def test_pre_epoch_message_in_decimal_seconds():
    with pytest.raises(PreEpochError) as info:
        GoddessDate.from_timestamp(Fraction(EPOCH_TIMESTAMP) - Fraction(1, 4))
    assert "0.25 seconds before the calendar epoch" in str(info.value)
    assert info.value.offset == Fraction(-1, 4)


@pytest.mark.parametrize("bad", ["1563840000", None, b"0", True])
def test_non_numeric_timestamp_rejected(bad):
    with pytest.raises(TypeError):
        GoddessDate.from_timestamp(bad)
    with pytest.raises(TypeError):
        goddesscal.from_timestamp(bad)


def test_second_cycle():
    g = GoddessDate(2, 1, 1, 1)
    assert g.to_date() == date(1901, 8, 14) + timedelta(days=180432)
    assert GoddessDate.from_date(g.to_date()) == g
    assert GoddessDate.from_date(g.to_date() - timedelta(days=1)) == GoddessDate(1, 470, 13, 29)
