"""goddesscal public API.

Keep this surface small: users should mostly interact with GoddessDate and
the functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    to_gregorian,
    explain,
    from_timestamp,
    from_datetime,
    to_timestamp,
    to_datetime,
    render,
    list_engines,
    engine_info,
    get_engine,
    make_engine,
    register_engine,
    month_bounds,
    months_in_year,
    days_in_month,
    first_day_of_month,
    last_day_of_month,
    next_month,
    prev_month,
    new_year_day,
)
from .core.errors import (
    GoddessCalError,
    ValidationError,
    InvalidCycle,
    InvalidYear,
    InvalidMonth,
    InvalidDay,
    PreEpochError,
    OutOfRangeError,
    UnknownEngineError,
)
from .core.structure import (
    DAY_SECONDS,
    MONTH_COUNT,
    MONTH_NAMES,
    CYCLE_YEARS,
    NORMAL_YEAR_COUNT,
    SHORT_YEAR_COUNT,
    CYCLE_DAYS,
    CYCLE_SECONDS,
    NORMAL_YEAR_DAYS,
    SHORT_YEAR_DAYS,
    NORMAL_YEAR_SECONDS,
    SHORT_YEAR_SECONDS,
    length_of,
)
from .core.time import EPOCH, EPOCH_JDN, EPOCH_TIMESTAMP
from .core.types import GoddessDate, DayInfo, CalendarSpec, EngineId, TIME_ZONE, SHORT_NAME, FULL_NAME

__all__ = [
    "day_info",
    "to_gregorian",
    "explain",
    "from_timestamp",
    "from_datetime",
    "to_timestamp",
    "to_datetime",
    "render",
    "list_engines",
    "engine_info",
    "get_engine",
    "make_engine",
    "register_engine",
    "month_bounds",
    "months_in_year",
    "days_in_month",
    "first_day_of_month",
    "last_day_of_month",
    "next_month",
    "prev_month",
    "new_year_day",
    "GoddessCalError",
    "ValidationError",
    "InvalidCycle",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
    "PreEpochError",
    "OutOfRangeError",
    "UnknownEngineError",
    "DAY_SECONDS",
    "MONTH_COUNT",
    "MONTH_NAMES",
    "CYCLE_YEARS",
    "NORMAL_YEAR_COUNT",
    "SHORT_YEAR_COUNT",
    "CYCLE_DAYS",
    "CYCLE_SECONDS",
    "NORMAL_YEAR_DAYS",
    "SHORT_YEAR_DAYS",
    "NORMAL_YEAR_SECONDS",
    "SHORT_YEAR_SECONDS",
    "length_of",
    "EPOCH",
    "EPOCH_JDN",
    "EPOCH_TIMESTAMP",
    "GoddessDate",
    "DayInfo",
    "CalendarSpec",
    "EngineId",
    "TIME_ZONE",
    "SHORT_NAME",
    "FULL_NAME",
]
