"""
goddesscal.engines.factory
--------------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations

from goddesscal.core.types import CalendarSpec
from goddesscal.engines.calendar import GoddessEngine


def make_engine(spec: CalendarSpec) -> GoddessEngine:
    """The universal entry point."""
    if not isinstance(spec, CalendarSpec):
        raise TypeError(f"Unknown spec type: {type(spec)}")
    return GoddessEngine(spec)
