"""
goddesscal.engines.calendar
---------------------------
The Orchestrator. Anchors the fixed cycle/year/month structure at a spec's
epoch and translates between Goddess dates and absolute instants
(Unix seconds, aware datetimes, Julian Day Numbers).
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict

from goddesscal.core import structure as st
from goddesscal.core.time import NumT, datetime_to_timestamp, exact_seconds, from_jdn, timestamp_to_datetime, to_jdn
from goddesscal.core.types import CalendarSpec, DayInfo, GoddessDate, Style, render

logger = logging.getLogger(__name__)


class GoddessEngine:
    """
    All offsets handed to the structure layer are seconds since this engine's
    epoch; instants before the epoch raise PreEpochError.
    """
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.id = spec.id
        self.epoch_timestamp = int(datetime_to_timestamp(spec.epoch))
        self.epoch_jdn = to_jdn(timestamp_to_datetime(self.epoch_timestamp).date())
        logger.debug(
            "Built engine %s (epoch %s, JDN %d)", spec.id.name, spec.epoch.isoformat(), self.epoch_jdn
        )

    # ---------------------------------------------------------
    # Inverse: instant to Goddess date
    # ---------------------------------------------------------

    def from_timestamp(self, t: NumT) -> GoddessDate:
        return GoddessDate(*st.decompose(exact_seconds(t) - self.epoch_timestamp))

    def from_datetime(self, dt: datetime) -> GoddessDate:
        return self.from_timestamp(datetime_to_timestamp(dt))

    def from_jdn(self, jdn: int) -> GoddessDate:
        return GoddessDate(*st.decompose((jdn - self.epoch_jdn) * st.DAY_SECONDS))

    # ---------------------------------------------------------
    # Forward: Goddess date to instant
    # ---------------------------------------------------------

    def to_timestamp(self, g: GoddessDate) -> int:
        return self.epoch_timestamp + g.seconds_since_epoch()

    def to_datetime(self, g: GoddessDate) -> datetime:
        return timestamp_to_datetime(self.to_timestamp(g))

    def to_jdn(self, g: GoddessDate) -> int:
        return self.epoch_jdn + g.seconds_since_epoch() // st.DAY_SECONDS

    def render(self, g: GoddessDate, style: Style = "full") -> str:
        return render(
            g.cycle, g.year, g.month, g.day, style,
            month_names=self.spec.month_names, time_zone=self.spec.time_zone,
        )

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "name": self.spec.full_name,
            "short_name": self.spec.short_name,
            "epoch": self.spec.epoch.isoformat(),
            "epoch_jdn": self.epoch_jdn,
            "time_zone": self.spec.time_zone,
            "cycle_years": st.CYCLE_YEARS,
            "cycle_days": st.CYCLE_DAYS,
            "meta": dict(self.spec.meta),
        }

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        jdn = to_jdn(d)
        g = self.from_jdn(jdn)
        dbg = None
        if debug:
            dbg = {
                "jdn": jdn,
                "days_since_epoch": jdn - self.epoch_jdn,
                "seconds_since_epoch": g.seconds_since_epoch(),
                "days_in_month": g.days_in_month,
                "rendered": self.render(g),
            }
        return DayInfo(
            civil_date=d,
            engine=self.id,
            goddess=g,
            day_in_year=g.day_in_year,
            month_name=self.spec.month_names[g.month - 1],
            year_length=g.length,
            debug=dbg,
        )

    def to_gregorian(self, g: GoddessDate) -> date:
        return from_jdn(self.to_jdn(g))

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
