# hems_scenarios/models/__init__.py
from hems_scenarios.models.household import Appliance, Household, Region, TimeWindow, UsageMode
from hems_scenarios.models.scenario import CO2Contribution, Scenario

__all__ = ["Appliance", "Household", "Region", "TimeWindow", "UsageMode", "CO2Contribution", "Scenario"]
