# hems_scenarios/models/scenario.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from hems_scenarios.models.household import Appliance, Household, format_number
from hems_scenarios.utils.constants import CO2_PLACEHOLDER_SCALE


@dataclass(frozen=True)
class CO2Contribution:
    appliance: Appliance
    value: float

    def __str__(self) -> str:
        return f"{self.appliance.name}: {format_number(self.value)}"


def placeholder_co2_value(rng: random.Random) -> int:
    """Coin flip scaled by 100: ``round(random()) * 100`` with 0.5 rounding up."""
    return int(rng.random() + 0.5) * CO2_PLACEHOLDER_SCALE


@dataclass
class Scenario:
    """A named household configuration. Names are not required to be unique."""

    name: str
    household: Household

    def evaluate(self, rng: Optional[random.Random] = None) -> List[CO2Contribution]:
        """Return one contribution per household appliance, in household order.

        Not an emissions model: each value is 0 or 100 at random.
        """
        rng = rng or random.Random()
        return [
            CO2Contribution(appliance, placeholder_co2_value(rng))
            for appliance in self.household.appliances
        ]

    def __str__(self) -> str:
        return f"Scenario: {self.name}: Household: {self.household}."
