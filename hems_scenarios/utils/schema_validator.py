# hems_scenarios/utils/schema_validator.py
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from typing import Any, Dict, List

from hems_scenarios.models.household import UsageMode


class SchemaValidationError(ValueError):
    """The catalog parsed as JSON but does not match the appliance schema."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        lines = [f"{_format_location(e.get('loc', ()))}: {e.get('msg', 'invalid value')}" for e in errors]
        super().__init__("Appliance catalog failed validation:\n" + "\n".join(lines))


def _format_location(loc) -> str:
    if not loc:
        return "<root>"
    return ".".join(f"[{p}]" if isinstance(p, int) else str(p) for p in loc)


class ApplianceRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(strict=True)
    power_consumption: float = Field(alias="powerConsumption", ge=0, strict=True, allow_inf_nan=False)
    embodied_emissions: float = Field(alias="embodiedEmissions", ge=0, strict=True, allow_inf_nan=False)
    usage_mode: UsageMode = Field(alias="usageMode")
    parameters: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        s = v.strip()
        if not s:
            raise ValueError("Name must not be empty")
        return s


_CATALOG_ADAPTER = TypeAdapter(List[ApplianceRecord])


def validate_catalog(data: Any) -> List[ApplianceRecord]:
    """Validate a parsed JSON document as a list of appliance records."""
    try:
        return _CATALOG_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise SchemaValidationError(e.errors()) from e
