"""Hour-by-hour heating load over the synthetic climate year."""

import numpy as np

from core.models import BuildingRecord
from data.catalog import CATALOG, Catalog
from model.climate import hourly_temperatures
from model.config import DEFAULT, ModelConfig
from model.heat_balance import compute_load
from model.types import HourlyLoadResult, LoadResult


def compute_hourly_load(
    record: BuildingRecord,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
    load: LoadResult | None = None,
) -> HourlyLoadResult:
    """Scale the design-point coefficient over 8760 synthetic hours.

    Hours where free gains exceed losses contribute no load. Months are
    fixed blocks of ``config.hours_per_month`` hours; the last month takes
    the remainder of the year.
    """
    if load is None:
        load = compute_load(record, config, catalog)

    temps = hourly_temperatures(record.city, config, catalog)
    loads = np.clip(load.loss_coefficient_w_k * (load.indoor_temp_c - temps), 0.0, None)

    block = config.hours_per_month
    monthly = [float(loads[m * block : (m + 1) * block].sum()) / 1000 for m in range(11)]
    monthly.append(float(loads[11 * block :].sum()) / 1000)

    return HourlyLoadResult(
        loads_w=tuple(loads.tolist()),
        monthly_kwh=tuple(monthly),
        total_kwh=float(loads.sum()) / 1000,
    )
