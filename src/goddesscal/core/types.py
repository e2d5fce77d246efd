from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from typing import Any, Dict, Literal, Optional, Sequence, Tuple

from . import structure as st
from .errors import InvalidCycle, InvalidDay, InvalidMonth, InvalidYear
from .time import (
    EPOCH_JDN,
    EPOCH_TIMESTAMP,
    NumT,
    datetime_to_timestamp,
    exact_seconds,
    from_jdn,
    timestamp_to_datetime,
    to_jdn,
)

logger = logging.getLogger(__name__)

Style = Literal["short", "medium", "full"]

# The calendar time-zone as a 3-letter abbreviation.
TIME_ZONE = "MMG"
SHORT_NAME = "Goddess Calendar"
FULL_NAME = "McKenna-Meyer Goddess Calendar"


def render(
    cycle: int,
    year: int,
    month: int,
    day: int,
    style: Style = "full",
    *,
    month_names: Sequence[str] = st.MONTH_NAMES,
    time_zone: str = TIME_ZONE,
) -> str:
    """
    short  -> "113-3-24"
    medium -> "113-Cerridwen-24"
    full   -> "1-113-Cerridwen-24 MMG"
    """
    if style == "short":
        return f"{year}-{month}-{day}"
    if style == "medium":
        return f"{year}-{month_names[month - 1]}-{day}"
    if style == "full":
        return f"{cycle}-{year}-{month_names[month - 1]}-{day} {time_zone}"
    raise ValueError("style must be 'short', 'medium' or 'full'")


@dataclass(frozen=True)
class EngineId:
    family: Literal["mmg", "custom"]
    name: str
    version: str


@dataclass(frozen=True, order=True)
class GoddessDate:
    """
    A day of the Goddess calendar.

    Construction validates year, month and day (in that order) and then
    the cycle; an invalid coordinate raises the matching ValidationError.
    Years do not roll over into the next cycle here: callers carry the
    cycle themselves.
    """
    cycle: int
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not (1 <= self.year <= st.CYCLE_YEARS):
            logger.debug("Year %s does not exist in the calendar.", self.year)
            raise InvalidYear(self.year)
        if not (1 <= self.month <= st.MONTH_COUNT):
            logger.debug("Month %s does not exist in the calendar.", self.month)
            raise InvalidMonth(self.month)
        n = st.days_in_month(self.month, st.length_of(self.year))
        if not (1 <= self.day <= n):
            logger.debug("Day %s does not exist in month %s of year %s.", self.day, self.month, self.year)
            raise InvalidDay(self.day, n)
        if self.cycle < 1:
            logger.debug("Cycle %s does not exist in the calendar.", self.cycle)
            raise InvalidCycle(self.cycle)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def make(cls, year: int, month: int, day: int, cycle: int = 1) -> GoddessDate:
        return cls(cycle, year, month, day)

    @classmethod
    def from_seconds_since_epoch(cls, offset: NumT) -> GoddessDate:
        return cls(*st.decompose(offset))

    @classmethod
    def from_timestamp(cls, t: NumT) -> GoddessDate:
        """Seconds since the Unix epoch -> the Goddess day containing that instant."""
        return cls.from_seconds_since_epoch(exact_seconds(t) - EPOCH_TIMESTAMP)

    @classmethod
    def from_datetime(cls, dt: datetime) -> GoddessDate:
        """Timezone-aware datetime -> the Goddess day containing that instant."""
        return cls.from_timestamp(datetime_to_timestamp(dt))

    @classmethod
    def from_date(cls, d: date) -> GoddessDate:
        """Gregorian civil date (taken at 00:00 UTC) -> Goddess day."""
        return cls.from_seconds_since_epoch((to_jdn(d) - EPOCH_JDN) * st.DAY_SECONDS)

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def seconds_since_epoch(self) -> int:
        return st.compose(self.cycle, self.year, self.month, self.day)

    def to_timestamp(self) -> int:
        """Seconds since the Unix epoch at 00:00 UTC of this day."""
        return EPOCH_TIMESTAMP + self.seconds_since_epoch()

    def to_datetime(self) -> datetime:
        return timestamp_to_datetime(self.to_timestamp())

    def to_date(self) -> date:
        return from_jdn(EPOCH_JDN + self.seconds_since_epoch() // st.DAY_SECONDS)

    # ---------------------------------------------------------
    # Derived views
    # ---------------------------------------------------------

    @property
    def length(self) -> st.Length:
        return st.length_of(self.year)

    @property
    def month_name(self) -> str:
        return st.month_name(self.month)

    @property
    def days_in_month(self) -> int:
        return st.days_in_month(self.month, self.length)

    @property
    def day_in_year(self) -> int:
        return self.day + st.days_before_month(self.month, self.length)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.cycle, self.year, self.month, self.day)

    def render(self, style: Style = "full") -> str:
        return render(self.cycle, self.year, self.month, self.day, style)

    @property
    def short_string(self) -> str:
        return self.render("short")

    @property
    def medium_string(self) -> str:
        return self.render("medium")

    @property
    def full_string(self) -> str:
        return self.render("full")

    def __str__(self) -> str:
        return f"{self.cycle}-{self.year}-{self.month}-{self.day} {TIME_ZONE}"


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    engine: EngineId
    goddess: GoddessDate
    day_in_year: int
    month_name: str
    year_length: st.Length
    debug: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a Goddess calendar engine."""
    id: EngineId
    epoch: datetime
    month_names: Tuple[str, ...] = st.MONTH_NAMES
    time_zone: str = TIME_ZONE
    short_name: str = SHORT_NAME
    full_name: str = FULL_NAME
    meta: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if self.epoch.tzinfo is None:
            raise ValueError("epoch must be timezone-aware (UTC)")
        e = self.epoch.astimezone(timezone.utc)
        if (e.hour, e.minute, e.second, e.microsecond) != (0, 0, 0, 0):
            raise ValueError("epoch must fall on 00:00:00 UTC")
        if len(self.month_names) != st.MONTH_COUNT:
            raise ValueError(f"month_names must have {st.MONTH_COUNT} entries")
        if not (len(self.time_zone) == 3 and self.time_zone.isalpha() and self.time_zone.isupper()):
            raise ValueError("time_zone must be a 3-letter upper-case tag")

    def tweak(self, **changes: Any) -> CalendarSpec:
        return replace(self, **changes)
