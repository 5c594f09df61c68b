"""Centralised model tunables.

Every magic number of the heat-balance model lives here.
Create a custom ``ModelConfig`` to tweak values for testing::

    cfg = ModelConfig(shape_factor=3.0)
    result = compute_load(record, config=cfg)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelConfig:
    """All model tunables, grouped by category."""

    # --- Record defaults (applied when a field is missing or unparsable) ---
    default_floors: int = 1
    default_area_m2: float = 100.0
    default_height_m: float = 2.7
    default_indoor_temp_c: float = 22.0
    default_window_fraction: float = 0.2  # window area as share of floor area
    default_wind_speed_m_s: float = 3.0
    default_humidity_pct: float = 50.0
    default_shading: float = 0.6  # fraction of open-sky irradiance

    # --- Geometry ---
    shape_factor: float = 2.6  # exterior wall area per m² of floor area
    min_window_area_m2: float = 0.01  # floor for the frame perimeter estimate

    # --- Envelope ---
    r_si: float = 0.13  # interior surface film, m²·K/W
    r_se: float = 0.04  # exterior surface film, m²·K/W
    penalty_u_value: float = 5.0  # used when R_total <= 0
    default_layer_m: float = 0.1  # thickness of a layer given without a number
    default_wall_layer_m: float = 0.38  # brick wall assumed when nothing parses
    mm_threshold: float = 10.0  # bare numbers >= this are millimeters

    # --- Climate ---
    cold_winter_offset_c: float = 3.0
    anomalous_winter_offset_c: float = 5.0
    mean_heating_delta_k: float = 20.0  # mean indoor-outdoor difference over the season
    diurnal_amplitude_c: float = 3.0
    diurnal_peak_hour: float = 15.0
    seasonal_phase_days: float = 20.0

    # --- Air ---
    air_density: float = 1.2  # kg/m³
    air_cp: float = 1005.0  # J/(kg·K)
    default_infiltration_ach: float = 0.5
    reference_wind_m_s: float = 3.0
    wind_sensitivity: float = 0.3  # ACH multiplier change per m/s over reference
    stack_sensitivity: float = 0.05  # ACH multiplier change per floor above ground
    min_infiltration_ach: float = 0.1
    max_infiltration_ach: float = 2.0
    ventilation_ach: float = 0.35
    high_occupancy_ventilation_ach: float = 0.7
    max_heat_recovery: float = 0.9

    # --- Gains ---
    design_irradiance_w_m2: float = 150.0  # winter design irradiance on facades
    base_internal_gain_w_m2: float = 3.0

    # --- Load calculation ---
    dt_epsilon_k: float = 1e-6  # temperature differences below this count as zero
    curve_start_c: float = 5.0
    curve_margin_c: float = 5.0  # curve continues this far below the design temperature
    # Whether the uncertainty band lowers the design temperature before the
    # symmetric ± band is applied to the load
    band_shifts_design_temp: bool = True

    # --- Operational measures (mean setpoint reduction, K) ---
    night_setback_k: float = 3.0
    night_setback_hours: float = 8.0
    trv_reduction_k: float = 0.5

    # --- Hourly model ---
    hours_per_year: int = 8760
    hours_per_month: int = 730

    # --- Economy ---
    tariff_per_kwh: float = 6.0  # single-rate electricity; retrofit payback and default electric tariff


DEFAULT = ModelConfig()
