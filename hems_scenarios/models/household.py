# hems_scenarios/models/household.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Sequence


class UsageMode(str, Enum):
    ALWAYS_ON = "ALWAYS_ON"
    ON_DEMAND = "ON_DEMAND"

    def __str__(self) -> str:
        return self.value


class Region(str, Enum):
    US = "US"
    EU = "EU"
    ASIA = "ASIA"
    NOT_SPECIFIED = "Not Specified"

    def __str__(self) -> str:
        return self.value


def format_number(value: float) -> str:
    """Render whole numbers without a trailing ``.0`` (150.0 -> "150")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Appliance:
    """A catalog entry; shared by reference between the catalog and households."""

    name: str
    power_consumption: float
    embodied_emissions: float
    usage_mode: UsageMode
    parameters: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"{self.name}: Power consumption: {format_number(self.power_consumption)}, "
            f"Embodied emissions: {format_number(self.embodied_emissions)}, "
            f"Usage mode: {self.usage_mode}."
        )


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime  # not checked against start

    def __str__(self) -> str:
        return f"{self.start.strftime('%x, %X')} - {self.end.strftime('%x, %X')}"


class Household:
    """Region, time window and the appliances in use."""

    def __init__(self, region: Region, time_window: TimeWindow, appliances: Sequence[Appliance]):
        self._region = region
        self._time_window = time_window
        self._appliances: List[Appliance] = list(appliances)

    @property
    def region(self) -> Region:
        return self._region

    @property
    def time_window(self) -> TimeWindow:
        return self._time_window

    @property
    def appliances(self) -> List[Appliance]:
        # new list each call, elements are the shared catalog objects
        return list(self._appliances)

    def __str__(self) -> str:
        formatted_appliances = "\n".join(str(a) for a in self._appliances)
        return f"{self._region}, {self._time_window},\n{formatted_appliances}"

    def __repr__(self) -> str:
        return (
            f"Household(region={self._region.name}, time_window={self._time_window!r}, "
            f"appliances={[a.name for a in self._appliances]!r})"
        )
