from __future__ import annotations

from typing import Dict

from ..core.time import EPOCH
from ..core.types import CalendarSpec, EngineId

# ============================================================
# McKENNA-MEYER
# ============================================================

MMG = CalendarSpec(
    id=EngineId(family="mmg", name="mmg", version="1"),
    epoch=EPOCH,
    meta={
        "designers": ("Terence McKenna", "Peter Meyer"),
        "reference": "http://www.fractal-timewave.com",
    },
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "mmg": MMG,
}
