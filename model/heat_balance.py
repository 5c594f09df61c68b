"""Steady-state heat balance: design load, annual energy and load curves.

The building is a single zone. At the design point

    Q = Qwalls + Qwindows + Qinfiltration + Qventilation - Qsolar - Qinternal

and the load is scaled linearly with the indoor-outdoor temperature
difference through the per-degree coefficient k = Q / dT. Annual energy
uses the degree-day method with the same coefficient.

Every numeric input is optional and tolerant of free text; the engine
never raises for record content and always returns a best-effort result.
"""

import logging
import math
from dataclasses import dataclass

from core.models import BuildingRecord, HeatingSystem, parse_heating_system
from core.rules import parse_number
from data.catalog import CATALOG, Catalog
from model.airflow import air_heat_loss, base_infiltration_ach, clamp_heat_recovery, infiltration_ach, ventilation_ach
from model.climate import design_climate
from model.condensation import condensation_risk
from model.config import DEFAULT, ModelConfig
from model.envelope import resolve_wall, resolve_window
from model.gains import internal_gain_specific, solar_gains
from model.schedules import daily_multipliers
from model.types import (
    Airflow,
    CurvePoint,
    Geometry,
    LoadBreakdown,
    LoadResult,
    ProfilePoint,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Input resolution
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ResolvedInputs:
    """Numeric view of a building record with defaults applied."""

    floors: int
    area_m2: float
    height_m: float
    window_area_m2: float
    indoor_temp_c: float
    uncertainty_c: float
    wind_speed_m_s: float
    humidity_pct: float
    base_infiltration_ach: float
    heat_recovery: float
    heating_system: HeatingSystem


def _positive(raw: object, default: float) -> float:
    value = parse_number(raw, default)
    return value if value > 0 else default


def resolve_inputs(record: BuildingRecord, config: ModelConfig = DEFAULT) -> ResolvedInputs:
    """Apply documented defaults to every numeric field of ``record``."""
    area = _positive(record.area, config.default_area_m2)
    return ResolvedInputs(
        floors=max(1, round(_positive(record.floors, config.default_floors))),
        area_m2=area,
        height_m=_positive(record.height, config.default_height_m),
        window_area_m2=max(parse_number(record.window_area, area * config.default_window_fraction), 0.0),
        indoor_temp_c=parse_number(record.indoor_temp, config.default_indoor_temp_c),
        uncertainty_c=max(parse_number(record.uncertainty, 0.0), 0.0),
        wind_speed_m_s=max(parse_number(record.wind_speed, config.default_wind_speed_m_s), 0.0),
        humidity_pct=parse_number(record.humidity, config.default_humidity_pct),
        base_infiltration_ach=base_infiltration_ach(record.infiltration, record.tightness, config),
        heat_recovery=clamp_heat_recovery(record.heat_recovery, config),
        heating_system=parse_heating_system(record.heating_system),
    )


def mean_setpoint_reduction(record: BuildingRecord, config: ModelConfig = DEFAULT) -> float:
    """Season-mean setpoint reduction (K) from operational measures."""
    reduction = 0.0
    if record.night_setback:
        reduction += config.night_setback_k * config.night_setback_hours / 24
    if record.trv:
        reduction += config.trv_reduction_k
    return reduction


def per_degree_coefficient(design_load_w: float, delta_t: float, config: ModelConfig = DEFAULT) -> float:
    """k = Q / dT (W/K); zero when dT is too small to divide by."""
    if abs(delta_t) < config.dt_epsilon_k:
        return 0.0
    return design_load_w / delta_t


def annual_energy_kwh(
    coefficient_w_k: float,
    hdd: float,
    setpoint_reduction_k: float = 0.0,
    config: ModelConfig = DEFAULT,
) -> float:
    """Degree-day annual heating energy (kWh).

    A lower mean setpoint shortens the effective degree-days in proportion
    to the assumed mean indoor-outdoor difference.
    """
    effective_hdd = hdd * max(0.0, 1 - setpoint_reduction_k / config.mean_heating_delta_k)
    return coefficient_w_k * effective_hdd * 24 / 1000


# -----------------------------------------------------------------------------
# Series
# -----------------------------------------------------------------------------


def load_curve(
    coefficient_w_k: float,
    indoor_c: float,
    design_temp_c: float,
    band_c: float,
    config: ModelConfig = DEFAULT,
) -> tuple[CurvePoint, ...]:
    """Load at outdoor temperatures from +5 °C down to 5 K below design."""
    points: list[CurvePoint] = []
    lowest = design_temp_c - config.curve_margin_c
    temp = config.curve_start_c
    while temp >= lowest:
        load = coefficient_w_k * (indoor_c - temp)
        spread = coefficient_w_k * band_c
        points.append(CurvePoint(temp, load, load - spread, load + spread))
        temp -= 1.0
    return tuple(points)


def daily_profile(design_load_w: float, occupancy: str | None) -> tuple[ProfilePoint, ...]:
    return tuple(
        ProfilePoint(hour=hour, multiplier=m, load_w=max(0.0, design_load_w * m))
        for hour, m in enumerate(daily_multipliers(occupancy).tolist())
    )


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------


def compute_load(
    record: BuildingRecord,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> LoadResult:
    """Compute the design heating load and derived series for a building.

    Args:
        record: User-entered building description
        config: Model tunables (uses defaults if omitted)
        catalog: Static catalogs (materials, windows, climates)

    Returns:
        LoadResult; never raises for record content.
    """
    inputs = resolve_inputs(record, config)

    # Geometry
    volume = inputs.area_m2 * inputs.floors * inputs.height_m
    wall_area = config.shape_factor * inputs.area_m2
    window_area = inputs.window_area_m2

    # Envelope
    envelope = resolve_wall(
        record.construction_key,
        record.wall_description,
        record.additional_insulation,
        config,
        catalog,
    )
    window = resolve_window(record.window_type, catalog)
    frame_perimeter = 4 * math.sqrt(max(window_area, config.min_window_area_m2))

    # Climate
    climate = design_climate(record.city, record.winter_severity, inputs.uncertainty_c, config, catalog)
    delta_t = inputs.indoor_temp_c - climate.design_temp_c

    # Conduction
    q_walls = envelope.u_value * wall_area * delta_t
    q_windows = window.u_value * window_area * delta_t + window.psi * frame_perimeter * delta_t

    # Air exchange
    ach_inf = infiltration_ach(record.infiltration, record.tightness, inputs.wind_speed_m_s, inputs.floors, config)
    ach_vent = ventilation_ach(record.occupancy, config)
    q_inf = air_heat_loss(volume, ach_inf, delta_t, config)
    q_vent = air_heat_loss(volume, ach_vent, delta_t, config) * (1 - inputs.heat_recovery)

    # Free gains
    q_solar = solar_gains(window_area, window.g_value, record.orientation, record.shading, config)
    q_internal = internal_gain_specific(record.occupancy, record.appliances, config) * inputs.area_m2

    # Negative loads are legitimate for very efficient buildings; not clamped
    design_load = q_walls + q_windows + q_inf + q_vent - q_solar - q_internal

    k = per_degree_coefficient(design_load, delta_t, config)
    spread = k * inputs.uncertainty_c
    e_year = annual_energy_kwh(k, climate.hdd, mean_setpoint_reduction(record, config), config)

    logger.debug(
        "Design load %.0f W at %.1f °C (U=%.3f, ACH=%.2f+%.2f, k=%.1f W/K)",
        design_load,
        climate.design_temp_c,
        envelope.u_value,
        ach_inf,
        ach_vent,
        k,
    )

    return LoadResult(
        design_load_w=design_load,
        load_min_w=design_load - spread,
        load_max_w=design_load + spread,
        annual_energy_kwh=e_year,
        loss_coefficient_w_k=k,
        indoor_temp_c=inputs.indoor_temp_c,
        uncertainty_c=inputs.uncertainty_c,
        breakdown=LoadBreakdown(
            walls=q_walls,
            windows=q_windows,
            infiltration=q_inf,
            ventilation=q_vent,
            solar=q_solar,
            internal=q_internal,
        ),
        geometry=Geometry(
            volume_m3=volume,
            wall_area_m2=wall_area,
            window_area_m2=window_area,
            floor_area_m2=inputs.area_m2 * inputs.floors,
        ),
        airflow=Airflow(
            infiltration_ach=ach_inf,
            ventilation_ach=ach_vent,
            heat_recovery=inputs.heat_recovery,
        ),
        envelope=envelope,
        window=window,
        climate=climate,
        condensation=condensation_risk(
            inputs.indoor_temp_c,
            climate.design_temp_c,
            inputs.humidity_pct,
            envelope.u_value,
            config,
        ),
        curve=load_curve(k, inputs.indoor_temp_c, climate.design_temp_c, inputs.uncertainty_c, config),
        daily_profile=daily_profile(design_load, record.occupancy),
    )
