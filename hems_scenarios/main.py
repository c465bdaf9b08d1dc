# hems_scenarios/main.py
import sys
from typing import Optional

from hems_scenarios.cli.app import ScenarioApp
from hems_scenarios.utils.data_loader import load_appliances_from_file
from hems_scenarios.utils.env import get_appliances_path, get_log_level, load_env
from hems_scenarios.utils.logger import configure_logging
from hems_scenarios.utils.result import try_catch


def main(appliances_path: Optional[str] = None) -> int:
    load_env()
    logger = configure_logging(get_log_level())

    path = appliances_path or get_appliances_path()
    result = try_catch(load_appliances_from_file, path)
    if not result.ok:
        logger.error("Startup failed while loading %s: %r", path, result.error)
        print(f"Could not load appliances: {result.error}")
        return 1

    app = ScenarioApp(result.data)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
