# hems_scenarios/cli/app.py
from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from hems_scenarios.cli.prompts import (
    Prompter,
    UserInputAbort,
    ask_appliances,
    ask_region,
    ask_scenario_name,
    ask_time_window,
)
from hems_scenarios.evaluation.report import format_report
from hems_scenarios.models.household import Appliance, Household, Region, TimeWindow
from hems_scenarios.models.scenario import Scenario
from hems_scenarios.utils.constants import COMMANDS, EXIT_COMMAND
from hems_scenarios.utils.logger import get_logger

logger = get_logger()


class ScenarioNotFoundError(LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Scenario {name} not found.")


class ScenarioApp:
    """Owns the catalog and the scenarios created during one session."""

    def __init__(
        self,
        possible_appliances: Sequence[Appliance],
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        rng: Optional[random.Random] = None,
    ):
        self._possible_appliances: List[Appliance] = list(possible_appliances)
        self._scenarios: List[Scenario] = []
        self._prompter = Prompter(input_func, output_func)
        self._rng = rng or random.Random()
        self._commands: Dict[str, Callable[[], object]] = {
            "list_appliances": self.list_appliances,
            "list_scenarios": self.list_scenarios,
            "create_scenario": self.create_scenario,
            "edit_scenario": self.edit_scenario,
            "delete_scenario": self.delete_scenario,
            "show_scenario_report": self.show_scenario_report,
        }

    @property
    def possible_appliances(self) -> List[Appliance]:
        return list(self._possible_appliances)

    @property
    def scenarios(self) -> List[Scenario]:
        return list(self._scenarios)

    def _command_list(self) -> str:
        return ", ".join([EXIT_COMMAND, *COMMANDS])

    def run(self) -> None:
        self._prompter.say(f"Available commands: {self._command_list()}\n")

        while True:
            try:
                raw = self._prompter.ask("Enter a command and press Enter:")
                if not raw:
                    continue
                command_name = raw.strip().lower()

                if command_name == EXIT_COMMAND:
                    self._prompter.say("Goodbye!")
                    break

                command = self._commands.get(command_name)
                if command is None:
                    self._prompter.say(f"Unknown command.\n Available commands: {self._command_list()}\n")
                    continue

                logger.debug("Running command %s", command_name)
                try:
                    command()
                except (UserInputAbort, ScenarioNotFoundError) as e:
                    logger.debug("Command %s stopped: %r", command_name, e)
                    if str(e):
                        self._prompter.say(str(e))
            except EOFError:
                self._prompter.say("Goodbye!")
                break

    # ---------- Listing ----------
    def list_appliances(self) -> None:
        if not self._possible_appliances:
            self._prompter.say("No possible appliances found or error reading file")
            return

        self._prompter.say("\nPossible appliances:")
        for index, appliance in enumerate(self._possible_appliances, start=1):
            self._prompter.say(f"{index}. {appliance}")

    def list_scenarios(self) -> None:
        if not self._scenarios:
            self._prompter.say("No scenarios found or error reading file")
            return

        self._prompter.say("\nScenarios:")
        for index, scenario in enumerate(self._scenarios, start=1):
            self._prompter.say(f"{index}. {scenario}")

    # ---------- Lookup ----------
    def find_scenario(self, name: str) -> Scenario:
        for s in self._scenarios:
            if s.name == name:
                return s
        raise ScenarioNotFoundError(name)

    def _ask_existing_scenario(self, action: str) -> Optional[Scenario]:
        """List the scenarios and ask for one by exact name; None when there are none."""
        self.list_scenarios()
        if not self._scenarios:
            return None
        name = self._prompter.require(f"Enter the name of the scenario to {action}:")
        return self.find_scenario(name)

    # ---------- Mutations ----------
    def create_scenario(self) -> Scenario:
        name = f"scenario-{len(self._scenarios) + 1}"
        now = datetime.now()
        household = Household(Region.ASIA, TimeWindow(now, now), [])
        scenario = Scenario(name, household)
        self._scenarios.append(scenario)
        logger.info("Created %s", name)
        self._prompter.say("Scenario created.")
        return scenario

    def edit_scenario(self) -> Optional[Scenario]:
        original = self._ask_existing_scenario("edit")
        if original is None:
            return None

        name = ask_scenario_name(self._prompter, original.name)
        time_window = ask_time_window(self._prompter)
        region = ask_region(self._prompter)

        self.list_appliances()
        if not self._possible_appliances:
            raise UserInputAbort("No appliances available to add.")
        self._prompter.say("\nAdd appliances to the scenario (enter 'done' when finished):")
        appliances = ask_appliances(self._prompter, self._possible_appliances)

        # the original stays as it was; the edit is a new scenario
        edited = Scenario(name, Household(region, time_window, appliances))
        self._scenarios.append(edited)
        logger.info("Created %s as a duplicate of %s", name, original.name)
        self._prompter.say(f"Scenario {name} created as a duplicate of {original.name} with your changes.")
        return edited

    def delete_scenario(self) -> Optional[List[Scenario]]:
        scenario = self._ask_existing_scenario("delete")
        if scenario is None:
            return None

        self._scenarios = [s for s in self._scenarios if s.name != scenario.name]
        logger.info("Deleted %s", scenario.name)
        self._prompter.say(f"Scenario {scenario.name} deleted.")
        return self.scenarios

    # ---------- Reporting ----------
    def show_scenario_report(self) -> None:
        scenario = self._ask_existing_scenario("show report")
        if scenario is None:
            return

        contributions = scenario.evaluate(self._rng)
        self._prompter.say(format_report(scenario.name, contributions))
