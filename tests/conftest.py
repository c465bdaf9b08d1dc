import json

import pytest


FRIDGE = {
    "name": "Fridge",
    "powerConsumption": 150,
    "embodiedEmissions": 50,
    "usageMode": "ALWAYS_ON",
}


@pytest.fixture
def write_catalog(tmp_path):
    """Write a JSON document to a temporary catalog file and return its path."""

    def _write(payload, name="appliances.json"):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


class ScriptedInput:
    """Feeds canned answers to an input() replacement; EOF when they run out."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, message=""):
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class FixedRandom:
    """Stands in for random.Random, returning values from a fixed cycle."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value
