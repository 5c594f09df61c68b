"""Climate provider: design conditions and a synthetic hourly year.

The hourly series is a placeholder for real weather files: a seasonal
sinusoid with a 20-day phase offset plus a diurnal sinusoid with its zero
crossing at 15:00. With these phases the coldest synthetic day falls in
late October.
"""

import logging
from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from core.rules import KeywordRule, normalize_text, parse_number, sum_matches
from data.catalog import CATALOG, Catalog
from data.climate import ClimateRecord
from model.config import DEFAULT, ModelConfig
from model.types import ClimateDesignData, HourlyClimatePoint

logger = logging.getLogger(__name__)


def _severity_rules(config: ModelConfig) -> tuple[KeywordRule[float], ...]:
    # Both rules may fire; offsets add up
    return (
        KeywordRule(("холод", "cold", "harsh"), config.cold_winter_offset_c),
        KeywordRule(("аном", "anomal", "extreme"), config.anomalous_winter_offset_c),
    )


def climate_record(city: str | None, catalog: Catalog = CATALOG) -> ClimateRecord:
    """Catalog climate whose name variants occur in ``city``; default otherwise."""
    text = normalize_text(city)
    if text:
        for record in catalog.climates:
            if any(name in text for name in record.names):
                return record
        logger.debug("City %r not in climate catalog, using %s", city, catalog.default_climate_key)
    return catalog.default_climate


def heating_hours(hdd: float, config: ModelConfig = DEFAULT) -> int:
    """Approximate heating-season length from degree-days."""
    return round(hdd * 24 / config.mean_heating_delta_k)


def design_climate(
    city: str | None,
    winter_severity: str | None = None,
    uncertainty: object = None,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> ClimateDesignData:
    """Design temperature for ``city`` adjusted for severity and uncertainty.

    Severity keywords lower the design temperature by fixed offsets. A
    positive uncertainty band is subtracted as a conservative bias when
    ``config.band_shifts_design_temp`` is set.
    """
    record = climate_record(city, catalog)
    design_temp = record.design_temp_c - sum_matches(_severity_rules(config), winter_severity)

    band = parse_number(uncertainty, 0.0)
    if config.band_shifts_design_temp and band > 0:
        design_temp -= band

    return ClimateDesignData(
        record=record,
        design_temp_c=design_temp,
        heating_hours=heating_hours(record.hdd, config),
    )


def hourly_temperatures(
    city: str | None,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> NDArray[np.float64]:
    """Synthetic outdoor temperature for each hour of the year (°C, 0.1 °C steps)."""
    record = climate_record(city, catalog)
    index = np.arange(config.hours_per_year, dtype=np.float64)
    day_fraction = index / 24
    hour = index % 24

    seasonal = record.seasonal_amplitude_c * np.sin(2 * np.pi * (day_fraction - config.seasonal_phase_days) / 365)
    diurnal = config.diurnal_amplitude_c * np.sin(2 * np.pi * (hour - config.diurnal_peak_hour) / 24)
    return np.round(record.mean_annual_temp_c + seasonal + diurnal, 1)


def iter_hourly_climate(
    city: str | None,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> Iterator[HourlyClimatePoint]:
    """Yield the synthetic hourly year point by point."""
    temps = hourly_temperatures(city, config, catalog)
    for i, temp in enumerate(temps.tolist()):
        yield HourlyClimatePoint(index=i, day=i // 24 + 1, hour=i % 24, temperature_c=temp)


def hourly_climate(
    city: str | None,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> list[HourlyClimatePoint]:
    return list(iter_hourly_climate(city, config, catalog))
