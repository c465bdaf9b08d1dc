# hems_scenarios/cli/prompts.py
from __future__ import annotations

from datetime import date, datetime
from typing import Callable, List, Optional, Sequence

from hems_scenarios.models.household import Appliance, Region, TimeWindow
from hems_scenarios.utils.constants import (
    DEFAULT_END_TIME,
    DEFAULT_START_TIME,
    DONE_KEYWORD,
    REGION_MENU,
)


class UserInputAbort(Exception):
    """A required answer was missing or unusable; the command stops here.

    An empty message means the abort is silent.
    """


class InvalidSelectionError(ValueError):
    pass


class Prompter:
    """Console reads and writes, with ``prompt(message, default)`` semantics.

    An empty answer returns the default when there is one, otherwise ``None``.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self._input = input_func
        self._output = output_func

    def say(self, message: str = "") -> None:
        self._output(message)

    def ask(self, message: str, default: Optional[str] = None) -> Optional[str]:
        suffix = f" [{default}] " if default is not None else " "
        answer = self._input(message + suffix).strip()
        if answer:
            return answer
        return default

    def require(self, message: str, default: Optional[str] = None) -> str:
        answer = self.ask(message, default)
        if not answer:
            raise UserInputAbort("")
        return answer


def ask_scenario_name(prompter: Prompter, current_name: str) -> str:
    return prompter.ask("Enter a new name for the scenario:", current_name) or current_name


def _check_shape(value: str, sep: str, widths) -> None:
    parts = value.split(sep)
    if len(parts) != len(widths):
        raise ValueError(f"Unexpected format: {value}")
    for part, width in zip(parts, widths):
        if not (part.isdigit() and len(part) == width):
            raise ValueError(f"Unexpected format: {value}")


def _parse_timestamp(day: str, time_of_day: str) -> datetime:
    """Parse ``YYYY-MM-DD`` and ``HH:MM`` exactly; ranges are checked by strptime."""
    _check_shape(day, "-", (4, 2, 2))
    _check_shape(time_of_day, ":", (2, 2))
    return datetime.strptime(f"{day}T{time_of_day}", "%Y-%m-%dT%H:%M")


def ask_time_window(prompter: Prompter, today: Optional[date] = None) -> TimeWindow:
    today_str = (today or date.today()).isoformat()
    prompter.say("Setting time window...")
    start_day = prompter.require("Enter start date (YYYY-MM-DD):", today_str)
    start_time = prompter.require("Enter start time (HH:MM):", DEFAULT_START_TIME)
    end_day = prompter.require("Enter end date (YYYY-MM-DD):", today_str)
    end_time = prompter.require("Enter end time (HH:MM):", DEFAULT_END_TIME)

    try:
        start = _parse_timestamp(start_day, start_time)
        end = _parse_timestamp(end_day, end_time)
    except ValueError:
        raise UserInputAbort("Invalid date or time format.")

    return TimeWindow(start, end)


def ask_region(prompter: Prompter) -> Region:
    menu = "\n".join(f"{number}. {Region[member]}" for number, member in REGION_MENU.items())
    prompter.say(f"\nSelect a region:\n{menu}")
    answer = prompter.ask(f"Enter region number (1-{len(REGION_MENU)}):")
    member = REGION_MENU.get(answer or "")
    if member is None:
        return Region.NOT_SPECIFIED
    return Region[member]


def parse_appliance_index(raw: str, catalog_size: int) -> int:
    """Turn a 1-based menu number into a 0-based catalog index."""
    try:
        index = int(raw) - 1
    except ValueError:
        raise InvalidSelectionError(raw)
    if index < 0 or index >= catalog_size:
        raise InvalidSelectionError(raw)
    return index


def ask_appliances(prompter: Prompter, catalog: Sequence[Appliance]) -> List[Appliance]:
    selected: List[Appliance] = []
    while True:
        answer = prompter.ask(f"Enter appliance number or '{DONE_KEYWORD}':")
        if not answer or answer.lower() == DONE_KEYWORD:
            break
        try:
            index = parse_appliance_index(answer, len(catalog))
        except InvalidSelectionError:
            prompter.say("Invalid appliance number. Please try again.")
            continue
        selected.append(catalog[index])
        prompter.say(f"Added {catalog[index]}")
    return selected
