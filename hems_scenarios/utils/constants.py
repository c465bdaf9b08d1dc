# hems_scenarios/utils/constants.py
DEFAULT_APPLIANCES_PATH = "./appliances.json"
DEFAULT_LOG_LEVEL = "WARNING"
LOGGER_NAME = "hems-scenarios"

COMMANDS = [
    "list_appliances",
    "list_scenarios",
    "create_scenario",
    "edit_scenario",
    "delete_scenario",
    "show_scenario_report",
]
EXIT_COMMAND = "exit"

DEFAULT_START_TIME = "00:00"
DEFAULT_END_TIME = "23:59"
DONE_KEYWORD = "done"

# menu number -> Region member name
REGION_MENU = {
    "1": "US",
    "2": "EU",
    "3": "ASIA",
    "4": "NOT_SPECIFIED",
}

CO2_PLACEHOLDER_SCALE = 100
