from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .core import structure as st
from .core.engine import CalendarEngine, EngineRegistry
from .core.time import NumT, from_jdn
from .core.types import CalendarSpec, DayInfo, GoddessDate, Style
from .engines.factory import make_engine as _make_engine

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(engine: str = "mmg") -> CalendarEngine:
    return _reg().get(engine)

def make_engine(spec: CalendarSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def day_info(d: date, *, engine: str = "mmg", debug: bool = False) -> DayInfo:
    return _reg().get(engine).day_info(d, debug=debug)

def to_gregorian(g: GoddessDate, *, engine: str = "mmg") -> date:
    return _reg().get(engine).to_gregorian(g)

def explain(d: date, *, engine: str = "mmg") -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

def from_timestamp(t: NumT, *, engine: str = "mmg") -> GoddessDate:
    return _reg().get(engine).from_timestamp(t)

def from_datetime(dt: datetime, *, engine: str = "mmg") -> GoddessDate:
    return _reg().get(engine).from_datetime(dt)

def to_timestamp(g: GoddessDate, *, engine: str = "mmg") -> int:
    return _reg().get(engine).to_timestamp(g)

def to_datetime(g: GoddessDate, *, engine: str = "mmg") -> datetime:
    return _reg().get(engine).to_datetime(g)

def render(g: GoddessDate, style: Style = "full", *, engine: str = "mmg") -> str:
    return _reg().get(engine).render(g, style)

# ============================================================
# Month-level API
# ============================================================

def month_bounds(year: int, month: int, *, cycle: int = 1, engine: str = "mmg", as_date: bool = True) -> Dict[str, Any]:
    eng = _reg().get(engine)
    first = GoddessDate(cycle, year, month, 1)
    first_jdn = eng.to_jdn(first)
    last_jdn = first_jdn + first.days_in_month - 1

    out = {
        "cycle": cycle, "year": year, "month": month,
        "name": eng.spec.month_names[month - 1],
        "days": first.days_in_month,
        "first_jdn": first_jdn, "last_jdn": last_jdn,
    }
    if as_date:
        out["first_date"] = from_jdn(first_jdn)
        out["last_date"] = from_jdn(last_jdn)
    return out

def first_day_of_month(year: int, month: int, *, cycle: int = 1, engine: str = "mmg") -> date:
    return month_bounds(year, month, cycle=cycle, engine=engine)["first_date"]

def last_day_of_month(year: int, month: int, *, cycle: int = 1, engine: str = "mmg") -> date:
    return month_bounds(year, month, cycle=cycle, engine=engine)["last_date"]

def months_in_year(year: int, *, cycle: int = 1, engine: str = "mmg") -> List[Dict[str, Any]]:
    return [month_bounds(year, m, cycle=cycle, engine=engine) for m in st.MONTHS]

def days_in_month(year: int, month: int, *, cycle: int = 1, engine: str = "mmg") -> List[Dict[str, Any]]:
    eng = _reg().get(engine)
    b = month_bounds(year, month, cycle=cycle, engine=engine, as_date=False)

    rows = []
    for day, jdn in enumerate(range(b["first_jdn"], b["last_jdn"] + 1), start=1):
        g = GoddessDate(cycle, year, month, day)
        rows.append({
            "date": from_jdn(jdn),
            "jdn": jdn,
            "goddess": g,
            "day": day,
            "day_in_year": g.day_in_year,
            "label": eng.render(g, "medium"),
        })
    return rows

def next_month(year: int, month: int, *, cycle: int = 1) -> Dict[str, int]:
    GoddessDate(cycle, year, month, 1)
    month += 1
    if month > st.MONTH_COUNT:
        month, year = 1, year + 1
        if year > st.CYCLE_YEARS:
            year, cycle = 1, cycle + 1
    return {"cycle": cycle, "year": year, "month": month}

def prev_month(year: int, month: int, *, cycle: int = 1) -> Dict[str, int]:
    """Raises InvalidCycle when stepping back from the first month of cycle 1."""
    GoddessDate(cycle, year, month, 1)
    month -= 1
    if month < 1:
        month, year = st.MONTH_COUNT, year - 1
        if year < 1:
            year, cycle = st.CYCLE_YEARS, cycle - 1
    GoddessDate(cycle, year, month, 1)
    return {"cycle": cycle, "year": year, "month": month}

# ============================================================
# Year-level API
# ============================================================

def new_year_day(year: int, *, cycle: int = 1, engine: str = "mmg", as_date: bool = True) -> Dict[str, Any]:
    eng = _reg().get(engine)
    jdn = eng.to_jdn(GoddessDate(cycle, year, 1, 1))
    length = st.length_of(year)

    out = {"cycle": cycle, "year": year, "jdn": jdn, "length": length, "days": st.year_days(length)}
    if as_date:
        out["date"] = from_jdn(jdn)
    return out
