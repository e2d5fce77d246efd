from __future__ import annotations
from typing import Mapping

from goddesscal.core.engine import EngineRegistry
from goddesscal.core.types import CalendarSpec
from goddesscal.engines.specs import ALL_SPECS
from goddesscal.engines.factory import make_engine

def build_registry(specs: Mapping[str, CalendarSpec] = ALL_SPECS) -> EngineRegistry:
    return EngineRegistry({name: make_engine(spec) for name, spec in specs.items()})
