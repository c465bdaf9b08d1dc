"""Tests for configuration, logging and the entry point."""

import io
import logging

import pytest

from conftest import FRIDGE
from hems_scenarios.main import main
from hems_scenarios.utils.constants import DEFAULT_APPLIANCES_PATH, LOGGER_NAME
from hems_scenarios.utils.env import get_appliances_path, get_log_level
from hems_scenarios.utils.logger import configure_logging, get_logger, reset_logger


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("HEMS_APPLIANCES_FILE", raising=False)
    monkeypatch.delenv("HEMS_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfig:
    def test_defaults(self):
        assert get_appliances_path() == DEFAULT_APPLIANCES_PATH
        assert get_log_level() == "WARNING"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("HEMS_APPLIANCES_FILE", "/data/catalog.json")
        monkeypatch.setenv("HEMS_LOG_LEVEL", " debug ")
        assert get_appliances_path() == "/data/catalog.json"
        assert get_log_level() == "DEBUG"


class TestLogging:
    def test_logger_cached(self):
        assert get_logger("hems-test") is get_logger("hems-test")
        reset_logger("hems-test")

    def test_configure_level(self):
        assert configure_logging("DEBUG").level == logging.DEBUG
        assert configure_logging("NOT_A_LEVEL").level == logging.WARNING
        assert configure_logging("warning").name == LOGGER_NAME


class TestMain:
    def test_missing_catalog_exits_with_error(self, tmp_path, capsys):
        code = main(str(tmp_path / "missing.json"))
        assert code == 1
        assert "Could not load appliances" in capsys.readouterr().out

    def test_schema_failure_exits_with_error(self, write_catalog, capsys):
        path = write_catalog([{**FRIDGE, "powerConsumption": -5}])
        assert main(str(path)) == 1
        assert "powerConsumption" in capsys.readouterr().out

    def test_malformed_json_exits_with_error(self, write_catalog):
        assert main(str(write_catalog("{oops"))) == 1

    def test_runs_loop_from_env_path(self, write_catalog, monkeypatch, capsys):
        path = write_catalog([FRIDGE])
        monkeypatch.setenv("HEMS_APPLIANCES_FILE", str(path))
        monkeypatch.setattr("sys.stdin", io.StringIO("list_appliances\nexit\n"))
        assert main() == 0
        out = capsys.readouterr().out
        assert "1. Fridge: Power consumption: 150" in out
        assert "Goodbye!" in out
