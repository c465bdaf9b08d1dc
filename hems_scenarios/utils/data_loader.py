# hems_scenarios/utils/data_loader.py
import json
from pathlib import Path
from typing import List, Union

from hems_scenarios.models.household import Appliance
from hems_scenarios.utils.logger import get_logger
from hems_scenarios.utils.schema_validator import SchemaValidationError, validate_catalog

logger = get_logger()


class FileReadError(RuntimeError):
    def __init__(self, path, cause: OSError):
        self.path = str(path)
        super().__init__(f"Error reading file {self.path}: {cause}")


def _reject_constant(name: str):
    # NaN / Infinity / -Infinity are Python extensions, not JSON
    raise ValueError(f"Invalid JSON value: {name}")


def load_appliances_from_file(path: Union[str, Path]) -> List[Appliance]:
    """Read, parse and validate an appliance catalog.

    Malformed JSON raises ``json.JSONDecodeError`` unchanged, and the non-JSON
    literals ``NaN``/``Infinity`` raise ``ValueError``. Nothing is cached:
    every call goes back to disk.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FileReadError(path, e) from e

    data = json.loads(text, parse_constant=_reject_constant)

    try:
        records = validate_catalog(data)
    except SchemaValidationError as e:
        logger.warning("Catalog %s has %d schema violation(s)", path, len(e.errors))
        raise

    appliances = [
        Appliance(
            name=r.name,
            power_consumption=r.power_consumption,
            embodied_emissions=r.embodied_emissions,
            usage_mode=r.usage_mode,
            parameters=dict(r.parameters),
        )
        for r in records
    ]
    logger.info("Loaded %d appliance(s) from %s", len(appliances), path)
    return appliances
