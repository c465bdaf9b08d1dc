# hems_scenarios/evaluation/report.py
from typing import Sequence

import pandas as pd

from hems_scenarios.models.household import format_number
from hems_scenarios.models.scenario import CO2Contribution

REPORT_COLUMNS = ["appliance", "usage_mode", "co2_contribution"]


def contributions_to_frame(contributions: Sequence[CO2Contribution]) -> pd.DataFrame:
    rows = [
        {
            "appliance": c.appliance.name,
            "usage_mode": c.appliance.usage_mode.value,
            "co2_contribution": c.value,
        }
        for c in contributions
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def format_report(scenario_name: str, contributions: Sequence[CO2Contribution]) -> str:
    lines = [f"CO2 report for {scenario_name}:"]
    if not contributions:
        lines.append("No contributions (the household has no appliances).")
        return "\n".join(lines)

    df = contributions_to_frame(contributions)
    df.index = range(1, len(df) + 1)
    lines.append(df.to_string())
    lines.append(f"Total: {format_number(float(df['co2_contribution'].sum()))}")
    return "\n".join(lines)
