"""Tests for the steady-state heat balance.

Covers the reference apartment block and its variants:
1. Baseline load and design temperature
2. Extra insulation
3. Unknown city
4. Zero temperature difference
"""

import math

import pytest

from core.models import BuildingRecord
from data import SAMPLE_RECORD
from model.airflow import air_heat_loss, clamp_heat_recovery, infiltration_ach, ventilation_ach
from model.config import ModelConfig
from model.gains import internal_gain_specific, orientation_factor, solar_gains
from model.heat_balance import (
    annual_energy_kwh,
    compute_load,
    mean_setpoint_reduction,
    per_degree_coefficient,
    resolve_inputs,
)

# -----------------------------------------------------------------------------
# Reference scenarios
# -----------------------------------------------------------------------------


def test_reference_building_load() -> None:
    result = compute_load(SAMPLE_RECORD)

    assert result.design_temp_c == pytest.approx(-26.0)
    # Air exchange dominates: infiltration 0.7 ACH and ventilation 0.35 ACH over 10 935 m³
    assert result.design_load_w == pytest.approx(202_277, rel=0.01)
    assert result.annual_energy_kwh > 0
    assert result.envelope.u_value == pytest.approx(1 / (0.38 / 0.81 + 0.1 / 0.04 + 0.17))
    assert result.geometry.volume_m3 == pytest.approx(450 * 9 * 2.7)
    assert result.geometry.wall_area_m2 == pytest.approx(2.6 * 450)


def test_breakdown_sums_to_design_load() -> None:
    result = compute_load(SAMPLE_RECORD)
    b = result.breakdown

    assert b.losses - b.gains == pytest.approx(result.design_load_w)
    assert b.walls == pytest.approx(result.envelope.u_value * 1170 * 48)
    assert b.internal == pytest.approx(3.0 * 450)


def test_extra_insulation_lowers_load() -> None:
    base = compute_load(SAMPLE_RECORD)
    insulated = compute_load(SAMPLE_RECORD.replace(additional_insulation=0.1))

    assert insulated.design_load_w < base.design_load_w
    assert insulated.annual_energy_kwh < base.annual_energy_kwh


def test_unknown_city_falls_back_to_default_climate() -> None:
    result = compute_load(SAMPLE_RECORD.replace(city="Атлантида"))

    assert result.climate.record.key == "moscow"
    assert result.design_temp_c == pytest.approx(-26.0)


def test_zero_temperature_difference_is_finite() -> None:
    result = compute_load(SAMPLE_RECORD.replace(indoor_temp=-26))

    assert result.loss_coefficient_w_k == 0.0
    assert result.annual_energy_kwh == 0.0
    assert math.isfinite(result.design_load_w)
    assert all(math.isfinite(p.load_w) for p in result.curve)


def test_compute_load_is_pure() -> None:
    assert compute_load(SAMPLE_RECORD) == compute_load(SAMPLE_RECORD)


def test_empty_record_uses_defaults() -> None:
    result = compute_load(BuildingRecord())

    assert result.indoor_temp_c == 22.0
    assert result.geometry.floor_area_m2 == 100.0
    assert result.geometry.window_area_m2 == pytest.approx(20.0)
    assert result.envelope.source == "default"
    assert result.window.key == "double_glazed"
    assert result.design_load_w > 0


def test_garbage_numbers_fall_back_to_defaults() -> None:
    messy = BuildingRecord(area="lots", floors="many", height="", indoor_temp="warm", window_area="?")
    assert compute_load(messy) == compute_load(BuildingRecord())


def test_numbers_in_text_fields_do_not_raise() -> None:
    record = BuildingRecord.from_mapping(
        {
            "wall_description": 380,
            "window_type": 2,
            "construction_key": 7,
            "city": 5,
            "winter_severity": 1,
            "tightness": 0.5,
            "occupancy": 3,
            "appliances": 4,
            "orientation": 90,
            "heating_system": 1,
        }
    )
    result = compute_load(record)

    assert result.envelope.source == "text"
    assert result.envelope.layers[0].material_key == "brick_solid"
    assert result.envelope.layers[0].thickness_m == pytest.approx(0.38)
    assert result.envelope.description == "380"
    assert result.window.key == "double_glazed"
    assert result.climate.record.key == "moscow"
    assert math.isfinite(result.design_load_w)


def test_comma_decimal_input() -> None:
    a = compute_load(SAMPLE_RECORD.replace(height="2,7", area="450,0"))
    assert a.design_load_w == pytest.approx(compute_load(SAMPLE_RECORD).design_load_w)


def test_negative_load_is_not_clamped() -> None:
    # Tiny temperature difference and large gains: gains outweigh losses
    record = BuildingRecord(area=100, floors=1, construction_key="frame_insulated", indoor_temp=-20, appliances="high")
    result = compute_load(record)

    assert result.design_load_w < 0
    assert result.design_load_w == pytest.approx(-399, abs=5)
    assert result.annual_energy_kwh < 0
    assert all(p.load_w == 0 for p in result.daily_profile)


# -----------------------------------------------------------------------------
# Uncertainty band
# -----------------------------------------------------------------------------


def test_band_is_symmetric_around_design_load() -> None:
    result = compute_load(SAMPLE_RECORD.replace(uncertainty=2))
    k = result.loss_coefficient_w_k

    assert result.design_temp_c == pytest.approx(-28.0)
    assert result.load_min_w == pytest.approx(result.design_load_w - 2 * k)
    assert result.load_max_w == pytest.approx(result.design_load_w + 2 * k)
    assert result.load_min_w <= result.design_load_w <= result.load_max_w


def test_band_raises_design_load() -> None:
    assert compute_load(SAMPLE_RECORD.replace(uncertainty=2)).design_load_w > compute_load(SAMPLE_RECORD).design_load_w


def test_band_without_design_temperature_shift() -> None:
    cfg = ModelConfig(band_shifts_design_temp=False)
    banded = compute_load(SAMPLE_RECORD.replace(uncertainty=3), config=cfg)
    plain = compute_load(SAMPLE_RECORD, config=cfg)

    assert banded.design_temp_c == pytest.approx(-26.0)
    assert banded.design_load_w == pytest.approx(plain.design_load_w)
    assert banded.load_max_w - banded.load_min_w == pytest.approx(6 * banded.loss_coefficient_w_k)


def test_zero_band_collapses() -> None:
    result = compute_load(SAMPLE_RECORD)
    assert result.load_min_w == result.design_load_w == result.load_max_w


def test_negative_band_is_ignored() -> None:
    assert compute_load(SAMPLE_RECORD.replace(uncertainty=-4)).uncertainty_c == 0.0


# -----------------------------------------------------------------------------
# Series
# -----------------------------------------------------------------------------


def test_load_curve_spans_design_temperature() -> None:
    result = compute_load(SAMPLE_RECORD)
    temps = [p.outdoor_temp_c for p in result.curve]

    assert len(result.curve) == 37
    assert temps[0] == 5.0
    assert temps[-1] == -31.0

    at_design = next(p for p in result.curve if p.outdoor_temp_c == -26.0)
    assert at_design.load_w == pytest.approx(result.design_load_w)


def test_load_curve_increases_as_it_gets_colder() -> None:
    loads = [p.load_w for p in compute_load(SAMPLE_RECORD).curve]
    assert all(b > a for a, b in zip(loads, loads[1:]))


def test_daily_profile_has_24_non_negative_points() -> None:
    result = compute_load(SAMPLE_RECORD.replace(occupancy="вечером дома"))

    assert [p.hour for p in result.daily_profile] == list(range(24))
    assert all(p.load_w >= 0 for p in result.daily_profile)
    assert all(p.load_w == pytest.approx(result.design_load_w * p.multiplier) for p in result.daily_profile)


# -----------------------------------------------------------------------------
# Annual energy and operational measures
# -----------------------------------------------------------------------------


def test_annual_energy_degree_day_method() -> None:
    assert annual_energy_kwh(100.0, 5400) == pytest.approx(100 * 5400 * 24 / 1000)


def test_per_degree_coefficient_guards_small_difference() -> None:
    assert per_degree_coefficient(1000.0, 0.0) == 0.0
    assert per_degree_coefficient(1000.0, 1e-9) == 0.0
    assert per_degree_coefficient(1000.0, 50.0) == pytest.approx(20.0)


def test_setpoint_reduction_from_measures() -> None:
    assert mean_setpoint_reduction(BuildingRecord()) == 0.0
    assert mean_setpoint_reduction(BuildingRecord(night_setback=True)) == pytest.approx(1.0)
    assert mean_setpoint_reduction(BuildingRecord(night_setback=True, trv=True)) == pytest.approx(1.5)


def test_measures_cut_annual_energy_not_design_load() -> None:
    base = compute_load(SAMPLE_RECORD)
    managed = compute_load(SAMPLE_RECORD.replace(night_setback=True, trv=True))

    assert managed.design_load_w == pytest.approx(base.design_load_w)
    assert managed.annual_energy_kwh == pytest.approx(base.annual_energy_kwh * (1 - 1.5 / 20))


# -----------------------------------------------------------------------------
# Input resolution
# -----------------------------------------------------------------------------


def test_resolve_inputs_rounds_floors() -> None:
    assert resolve_inputs(BuildingRecord(floors="2,6")).floors == 3
    assert resolve_inputs(BuildingRecord(floors=0)).floors == 1


def test_resolve_inputs_window_area_default_and_floor() -> None:
    assert resolve_inputs(BuildingRecord(area=50)).window_area_m2 == pytest.approx(10.0)
    assert resolve_inputs(BuildingRecord(area=50, window_area=-3)).window_area_m2 == 0.0


# -----------------------------------------------------------------------------
# Airflow
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("tightness", "expected"),
    [
        (None, 0.5),
        ("низкая", 0.8),
        ("leaky", 0.8),
        ("высокая", 0.3),
        ("герметичная", 0.25),
        ("старый дом", 1.0),
    ],
)
def test_infiltration_from_tightness(tightness: str | None, expected: float) -> None:
    assert infiltration_ach(None, tightness, 3.0, 1) == pytest.approx(expected)


def test_user_infiltration_wins_over_tightness() -> None:
    assert infiltration_ach("1,2", "высокая", 3.0, 1) == pytest.approx(1.2)


def test_infiltration_wind_and_stack() -> None:
    assert infiltration_ach(0.5, None, 10.0, 1) == pytest.approx(0.5 * (1 + 0.3 * 7))
    assert infiltration_ach(0.5, None, 3.0, 9) == pytest.approx(0.7)


def test_infiltration_is_clamped() -> None:
    assert infiltration_ach(0.5, None, 20.0, 1) == 2.0
    assert infiltration_ach(0.5, None, 0.0, 1) == 0.1


def test_ventilation_doubles_for_high_occupancy() -> None:
    assert ventilation_ach(None) == 0.35
    assert ventilation_ach("офис") == 0.7
    assert ventilation_ach("crowded flat") == 0.7


@pytest.mark.parametrize(("raw", "expected"), [(None, 0.0), (0.8, 0.8), ("80", 0.8), (0.95, 0.9), (-1, 0.0)])
def test_heat_recovery_clamp(raw: object, expected: float) -> None:
    assert clamp_heat_recovery(raw) == pytest.approx(expected)


def test_heat_recovery_reduces_ventilation_loss() -> None:
    base = compute_load(SAMPLE_RECORD)
    recovered = compute_load(SAMPLE_RECORD.replace(heat_recovery=0.8))

    assert recovered.breakdown.ventilation == pytest.approx(base.breakdown.ventilation * 0.2)
    assert recovered.breakdown.infiltration == pytest.approx(base.breakdown.infiltration)


def test_air_heat_loss() -> None:
    assert air_heat_loss(3600.0, 1.0, 10.0) == pytest.approx(1.2 * 1005 * 10)


# -----------------------------------------------------------------------------
# Gains
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("orientation", "expected"),
    [("юго-восток", 0.9), ("South", 1.0), ("south-west", 0.9), ("north", 0.3), ("восток", 0.7), (None, 0.7)],
)
def test_orientation_factor(orientation: str | None, expected: float) -> None:
    assert orientation_factor(orientation) == expected


def test_solar_gains() -> None:
    assert solar_gains(10.0, 0.5, "south", 1.0) == pytest.approx(750.0)
    assert solar_gains(10.0, 0.5, "south", 2.0) == pytest.approx(750.0)
    assert solar_gains(10.0, 0.5, "south", None) == pytest.approx(450.0)
    assert solar_gains(0.0, 0.5, "south", 1.0) == 0.0


def test_internal_gains_add_up() -> None:
    assert internal_gain_specific(None, None) == 3.0
    assert internal_gain_specific("всегда дома", "высокая") == 9.0
    assert internal_gain_specific("evening", "low") == 3.0


def test_internal_gains_never_negative() -> None:
    cfg = ModelConfig(base_internal_gain_w_m2=0.0)
    assert internal_gain_specific(None, "low", cfg) == 0.0
