"""Retrofit improvement evaluation ranked by simple payback.

Each catalog action modifies a copy of the building record; the annual
energy saving against the unmodified record is priced at a flat tariff and
divided into the action's capital cost.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from core.models import BuildingRecord
from data.catalog import CATALOG, Catalog
from data.windows import UPGRADE_WINDOW_KEY
from model.config import DEFAULT, ModelConfig
from model.envelope import insulation_thickness
from model.heat_balance import compute_load, resolve_inputs
from model.types import LoadResult

logger = logging.getLogger(__name__)

# Modification applied to the record; receives the baseline result for context
type RecordModifier = Callable[[BuildingRecord, LoadResult, ModelConfig], BuildingRecord]
type CostRule = Callable[[LoadResult], float]


@dataclass(frozen=True)
class Improvement:
    key: str
    name: str
    cost: CostRule
    apply: RecordModifier


@dataclass(frozen=True)
class ImprovementCandidate:
    """Evaluated retrofit action.

    ``payback_years`` is None when the action saves nothing (unbounded).
    """

    key: str
    name: str
    cost: float
    saving_kwh: float
    saving_currency: float
    payback_years: float | None
    annual_energy_after_kwh: float


# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------


def _add_insulation(thickness_m: float) -> RecordModifier:
    def apply(record: BuildingRecord, base: LoadResult, config: ModelConfig) -> BuildingRecord:
        current = insulation_thickness(record.additional_insulation, config)
        return record.replace(additional_insulation=current + thickness_m)

    return apply


def _upgrade_windows(record: BuildingRecord, base: LoadResult, config: ModelConfig) -> BuildingRecord:
    return record.replace(window_type=UPGRADE_WINDOW_KEY)


def _reduce_infiltration(delta_ach: float) -> RecordModifier:
    def apply(record: BuildingRecord, base: LoadResult, config: ModelConfig) -> BuildingRecord:
        current = resolve_inputs(record, config).base_infiltration_ach
        return record.replace(infiltration=max(config.min_infiltration_ach, current - delta_ach))

    return apply


def _heat_recovery(efficiency: float) -> RecordModifier:
    def apply(record: BuildingRecord, base: LoadResult, config: ModelConfig) -> BuildingRecord:
        return record.replace(heat_recovery=efficiency)

    return apply


def _install_trv(record: BuildingRecord, base: LoadResult, config: ModelConfig) -> BuildingRecord:
    return record.replace(trv=True)


def _night_setback(record: BuildingRecord, base: LoadResult, config: ModelConfig) -> BuildingRecord:
    return record.replace(night_setback=True)


IMPROVEMENTS: tuple[Improvement, ...] = (
    Improvement(
        "wall_50",
        "Add 50 mm wall insulation",
        cost=lambda base: base.geometry.wall_area_m2 * 950,
        apply=_add_insulation(0.05),
    ),
    Improvement(
        "wall_100",
        "Add 100 mm wall insulation",
        cost=lambda base: base.geometry.wall_area_m2 * 1400,
        apply=_add_insulation(0.10),
    ),
    Improvement(
        "windows_triple",
        "Replace windows with triple-glazed low-E",
        cost=lambda base: base.geometry.window_area_m2 * 6000,
        apply=_upgrade_windows,
    ),
    Improvement(
        "airtightness",
        "Seal windows and joints (-0.2 ACH)",
        cost=lambda base: 20000.0,
        apply=_reduce_infiltration(0.2),
    ),
    Improvement(
        "heat_recovery",
        "Ventilation heat recovery 80%",
        cost=lambda base: 120000.0,
        apply=_heat_recovery(0.8),
    ),
    Improvement(
        "trv",
        "Thermostatic radiator valves",
        cost=lambda base: 15000.0,
        apply=_install_trv,
    ),
    Improvement(
        "night_setback",
        "Night setback schedule",
        cost=lambda base: 0.0,
        apply=_night_setback,
    ),
)


# -----------------------------------------------------------------------------
# Evaluation
# -----------------------------------------------------------------------------


def evaluate_improvement(
    improvement: Improvement,
    record: BuildingRecord,
    base: LoadResult,
    tariff: float,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> ImprovementCandidate:
    modified = improvement.apply(record, base, config)
    after = compute_load(modified, config, catalog)

    saving_kwh = max(0.0, base.annual_energy_kwh - after.annual_energy_kwh)
    saving_currency = saving_kwh * tariff
    cost = improvement.cost(base)
    payback = cost / saving_currency if saving_currency > 0 else None

    return ImprovementCandidate(
        key=improvement.key,
        name=improvement.name,
        cost=cost,
        saving_kwh=saving_kwh,
        saving_currency=saving_currency,
        payback_years=payback,
        annual_energy_after_kwh=after.annual_energy_kwh,
    )


def evaluate_all(
    record: BuildingRecord,
    tariff: float | None = None,
    improvements: tuple[Improvement, ...] = IMPROVEMENTS,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> list[ImprovementCandidate]:
    """Every catalog action, finite paybacks ascending, unbounded ones last.

    The sort is stable, so ties keep catalog order.
    """
    if tariff is None:
        tariff = config.tariff_per_kwh
    base = compute_load(record, config, catalog)
    candidates = [evaluate_improvement(imp, record, base, tariff, config, catalog) for imp in improvements]
    return sorted(
        candidates,
        key=lambda c: (c.payback_years is None, c.payback_years if c.payback_years is not None else 0.0),
    )


def evaluate_improvements(
    record: BuildingRecord,
    top_n: int = 5,
    tariff: float | None = None,
    improvements: tuple[Improvement, ...] = IMPROVEMENTS,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> list[ImprovementCandidate]:
    """Best ``top_n`` retrofit actions by payback; actions saving nothing are dropped."""
    ranked = [c for c in evaluate_all(record, tariff, improvements, config, catalog) if c.payback_years is not None]
    if len(ranked) < len(improvements):
        logger.debug("%d of %d improvements save nothing", len(improvements) - len(ranked), len(improvements))
    return ranked[: max(top_n, 0)]
