from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class CalendarSpec:
    """A registered calendar: the class plus what the facade needs to describe it."""
    name: str
    calendar: type
    description: str = ""
    shape: str = "common"   # "common", "week", "roman", "count"

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "class": self.calendar.__name__,
            "shape": self.shape,
            "description": self.description,
        }


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarSpec] = field(default_factory=dict)

    def get(self, name: str) -> CalendarSpec:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, spec: CalendarSpec, *, overwrite: bool = False) -> None:
        if (not overwrite) and (spec.name in self._calendars):
            raise KeyError(f"Calendar '{spec.name}' already exists. Use overwrite=True to replace.")
        self._calendars[spec.name] = spec

    def name_of(self, calendar: type) -> str:
        for name, spec in self._calendars.items():
            if spec.calendar is calendar:
                return name
        raise KeyError(f"Calendar class {calendar.__name__} is not registered")
