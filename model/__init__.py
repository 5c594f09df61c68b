"""Building heat-load model.

Resolves envelope and climate from coarse user input and computes the
steady-state design load, annual energy and derived series.

Example usage:

    from core.models import BuildingRecord
    from model import compute_load

    result = compute_load(BuildingRecord(area=120, city="Kazan", wall_description="газобетон 400"))
    print(f"{result.design_load_w / 1000:.1f} kW, {result.annual_energy_kwh:.0f} kWh/yr")
"""

from model.climate import climate_record, design_climate, hourly_climate, hourly_temperatures, iter_hourly_climate
from model.condensation import condensation_risk, dew_point, inner_surface_temperature, saturation_vapour_pressure
from model.config import DEFAULT as DEFAULT_MODEL_CONFIG
from model.config import ModelConfig
from model.economy import DEFAULT_TARIFFS, Tariffs, compute_economy
from model.envelope import resolve_wall, resolve_window
from model.heat_balance import ResolvedInputs, compute_load, resolve_inputs
from model.hourly import compute_hourly_load
from model.types import (
    Airflow,
    ClimateDesignData,
    CondensationRisk,
    CurvePoint,
    EconomyResult,
    Geometry,
    HourlyClimatePoint,
    HourlyLoadResult,
    LoadBreakdown,
    LoadResult,
    ProfilePoint,
    ResolvedEnvelope,
    TariffComparison,
    WallLayer,
)

__all__ = [
    "DEFAULT_MODEL_CONFIG",
    "DEFAULT_TARIFFS",
    "Airflow",
    "ClimateDesignData",
    "CondensationRisk",
    "CurvePoint",
    "EconomyResult",
    "Geometry",
    "HourlyClimatePoint",
    "HourlyLoadResult",
    "LoadBreakdown",
    "LoadResult",
    "ModelConfig",
    "ProfilePoint",
    "ResolvedEnvelope",
    "ResolvedInputs",
    "TariffComparison",
    "Tariffs",
    "WallLayer",
    "climate_record",
    "compute_economy",
    "compute_hourly_load",
    "compute_load",
    "condensation_risk",
    "design_climate",
    "dew_point",
    "hourly_climate",
    "hourly_temperatures",
    "inner_surface_temperature",
    "iter_hourly_climate",
    "resolve_inputs",
    "resolve_wall",
    "resolve_window",
    "saturation_vapour_pressure",
]
