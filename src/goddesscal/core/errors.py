from __future__ import annotations

class GoddessCalError(Exception):
    """Base error."""


class ValidationError(GoddessCalError, ValueError):
    """Raised when calendar coordinates do not name a day in the calendar."""

    def __init__(self, value: int, message: str):
        super().__init__(message)
        self.value = value


class InvalidCycle(ValidationError):
    def __init__(self, value: int):
        super().__init__(value, f"Cycle {value} does not exist in the calendar.")


class InvalidYear(ValidationError):
    def __init__(self, value: int):
        super().__init__(value, f"Year {value} does not exist in the calendar.")


class InvalidMonth(ValidationError):
    def __init__(self, value: int):
        super().__init__(value, f"Month {value} does not exist in the calendar.")


class InvalidDay(ValidationError):
    def __init__(self, value: int, days_in_month: int | None = None):
        if days_in_month is None:
            msg = f"Day {value} does not exist in the month."
        else:
            msg = f"Day {value} does not exist in the month (1..{days_in_month})."
        super().__init__(value, msg)
        self.days_in_month = days_in_month


class PreEpochError(GoddessCalError, ValueError):
    """Raised for instants before 1901-08-14 00:00:00 UTC, which the calendar does not cover."""

    def __init__(self, offset):
        super().__init__(f"Instant lies {float(-offset)} seconds before the calendar epoch.")
        self.offset = offset


class UnknownEngineError(GoddessCalError, KeyError):
    """Raised when a calendar engine name is not registered."""


class OutOfRangeError(GoddessCalError, ValueError):
    """Raised when a Goddess date falls outside what `datetime` can represent (years 1..9999)."""
