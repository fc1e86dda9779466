from __future__ import annotations

import dataclasses
import logging
import time
from enum import Enum
from fractions import Fraction
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.fixed import Fixed
from .core.registry import CalendarRegistry, CalendarSpec
from .day_count import UnixMoment

logger = logging.getLogger(__name__)

_registry: Optional[CalendarRegistry] = None


def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


def _as_fixed(x: Union[Fixed, int, float, Fraction]) -> Fixed:
    if isinstance(x, Fixed):
        return x
    return Fixed.new(x)


def list_calendars() -> List[str]:
    return _reg().list()


def get_calendar(name: str) -> type:
    return _reg().get(name).calendar


def register_calendar(spec: CalendarSpec, *, overwrite: bool = False) -> None:
    _reg().register(spec, overwrite=overwrite)


def calendar_info(name: str) -> Dict[str, Any]:
    spec = _reg().get(name)
    lo, hi = effective_bounds(name)
    out = spec.info()
    out["epoch"] = spec.calendar.epoch().value
    out["effective_min"] = fields(lo)
    out["effective_max"] = fields(hi)
    return out


def from_fixed(name: str, fixed: Union[Fixed, int, float, Fraction]) -> Any:
    """Value of calendar `name` at a timeline point (checked if given as a scalar)."""
    return _reg().get(name).calendar.from_fixed(_as_fixed(fixed))


def to_fixed(value: Any) -> Fixed:
    return value.to_fixed()


def convert(value: Any, name: str) -> Any:
    """Convert any calendar value to calendar `name` through the timeline."""
    return from_fixed(name, value.to_fixed())


def today(name: str = "gregorian", *, now: Optional[float] = None) -> Any:
    seconds = int(time.time() if now is None else now)
    return from_fixed(name, UnixMoment(seconds).to_fixed())


def effective_bounds(name: str) -> Tuple[Any, Any]:
    cal = _reg().get(name).calendar
    return cal.effective_min(), cal.effective_max()


# ============================================================
# Plain views for display layers
# ============================================================

def _plain(v: Any) -> Any:
    if isinstance(v, bool):
        return v
    if isinstance(v, Enum):
        return int(v.value)
    if isinstance(v, Fraction):
        return int(v) if v.denominator == 1 else float(v)
    return v


def fields(value: Any) -> Dict[str, Any]:
    """Numeric fields of a calendar value, enums flattened to ints."""
    if not dataclasses.is_dataclass(value):
        raise TypeError(f"{type(value).__name__} is not a calendar value")
    return {f.name: _plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
