"""Core input model: the building record entered by the user."""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Self

from core.rules import KeywordRule, first_match

# Raw user input: a number, a (possibly comma-decimal) string, or nothing
type RawNumber = float | int | str | None


class HeatingSystem(StrEnum):
    ELECTRIC = "electric"
    GAS = "gas"
    DISTRICT = "district"
    HEAT_PUMP = "heat-pump"


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


_HEATING_SYSTEM_RULES: tuple[KeywordRule[HeatingSystem], ...] = (
    KeywordRule(("heat-pump", "heat pump", "hpump", "тепловой насос", "насос"), HeatingSystem.HEAT_PUMP),
    KeywordRule(("gas", "газ"), HeatingSystem.GAS),
    KeywordRule(("district", "центральн", "тэц"), HeatingSystem.DISTRICT),
    KeywordRule(("electric", "элект"), HeatingSystem.ELECTRIC),
)


def parse_heating_system(raw: object) -> HeatingSystem:
    """Resolve a heating-system descriptor, defaulting to electric."""
    if isinstance(raw, HeatingSystem):
        return raw
    return first_match(_HEATING_SYSTEM_RULES, raw, HeatingSystem.ELECTRIC)


@dataclass(frozen=True)
class BuildingRecord:
    """Everything the user told us about the building.

    All fields are optional and may hold free text; defaults are applied
    when the record is resolved by the model, never here.
    """

    # --- Geometry ---
    floors: RawNumber = None
    area: RawNumber = None  # m² per floor
    height: RawNumber = None  # m

    # --- Envelope ---
    wall_description: str | None = None
    construction_key: str | None = None
    additional_insulation: RawNumber = None  # m of extra mineral wool
    window_area: RawNumber = None  # m²
    window_type: str | None = None

    # --- Airflow ---
    infiltration: RawNumber = None  # ACH
    tightness: str | None = None
    wind_speed: RawNumber = None  # m/s
    heat_recovery: RawNumber = None  # fraction 0..0.9

    # --- Climate ---
    city: str | None = None
    winter_severity: str | None = None
    uncertainty: RawNumber = None  # ±°C

    # --- Use ---
    indoor_temp: RawNumber = None  # °C
    occupancy: str | None = None
    appliances: str | None = None
    orientation: str | None = None
    shading: RawNumber = None  # fraction of open-sky irradiance
    heating_system: str | None = None
    humidity: RawNumber = None  # % RH indoors

    # --- Operational measures ---
    night_setback: bool = False
    trv: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build a record from a flat mapping, ignoring unknown keys."""
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    def replace(self, **changes: Any) -> Self:
        """Copy of this record with some fields changed."""
        return dataclasses.replace(self, **changes)
