"""Monte Carlo uncertainty analysis of the design load.

Each sample perturbs the numeric inputs of a building record with
independent Gaussian noise and re-runs the heat-balance engine. Samples are
independent, so they may be evaluated in any order or in parallel; the
summary only depends on the sorted set.

The noise source is an explicit ``numpy.random.Generator`` so runs can be
reproduced with a fixed seed.
"""

import functools
import logging
import math
from collections.abc import Iterator
from concurrent.futures import Executor
from dataclasses import dataclass

import numpy as np

from core.models import BuildingRecord
from data.catalog import CATALOG, Catalog
from model.config import DEFAULT, ModelConfig
from model.heat_balance import ResolvedInputs, compute_load, resolve_inputs

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Types
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldNoise:
    """Gaussian noise applied to one record field.

    Multiplicative noise scales the value by N(1, sigma); additive noise
    offsets it by N(0, sigma) in the field's own unit.
    """

    field: str
    sigma: float
    additive: bool = False


# Geometry is well known; airflow is the least certain input
DEFAULT_NOISE: tuple[FieldNoise, ...] = (
    FieldNoise("area", 0.03),
    FieldNoise("height", 0.05),
    FieldNoise("floors", 0.03),
    FieldNoise("window_area", 0.05),
    FieldNoise("infiltration", 0.3),
    FieldNoise("wind_speed", 0.15),
    FieldNoise("indoor_temp", 0.5, additive=True),
    FieldNoise("uncertainty", 0.3),
)


@dataclass(frozen=True)
class MonteCarloSample:
    design_temp_c: float
    design_load_w: float
    load_min_w: float
    load_max_w: float
    annual_energy_kwh: float


@dataclass(frozen=True)
class MonteCarloSummary:
    """Samples sorted by design load with representative percentiles."""

    samples: tuple[MonteCarloSample, ...]
    p10: MonteCarloSample | None
    p50: MonteCarloSample | None
    p90: MonteCarloSample | None
    mean_load_w: float | None
    std_load_w: float | None

    @property
    def count(self) -> int:
        return len(self.samples)


# -----------------------------------------------------------------------------
# Sampling
# -----------------------------------------------------------------------------


def gaussian(rng: np.random.Generator) -> float:
    """Standard normal draw via the Box–Muller transform."""
    u = 1.0 - rng.random()  # (0, 1], keeps log finite
    v = rng.random()
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


def _base_values(inputs: ResolvedInputs) -> dict[str, float]:
    return {
        "area": inputs.area_m2,
        "height": inputs.height_m,
        "floors": float(inputs.floors),
        "window_area": inputs.window_area_m2,
        "infiltration": inputs.base_infiltration_ach,
        "wind_speed": inputs.wind_speed_m_s,
        "indoor_temp": inputs.indoor_temp_c,
        "uncertainty": inputs.uncertainty_c,
    }


def perturb_record(
    record: BuildingRecord,
    inputs: ResolvedInputs,
    rng: np.random.Generator,
    noise: tuple[FieldNoise, ...] = DEFAULT_NOISE,
) -> BuildingRecord:
    """Copy of ``record`` with every noisy field replaced by a perturbed number."""
    base = _base_values(inputs)
    changes: dict[str, float | int] = {}
    for spec in noise:
        value = base[spec.field]
        z = gaussian(rng)
        value = value + spec.sigma * z if spec.additive else value * (1 + spec.sigma * z)
        if spec.field == "floors":
            changes[spec.field] = max(1, round(value))
        elif spec.additive:
            changes[spec.field] = value
        else:
            changes[spec.field] = max(value, 0.0)
    return record.replace(**changes)


def _evaluate(record: BuildingRecord, config: ModelConfig, catalog: Catalog) -> MonteCarloSample:
    result = compute_load(record, config, catalog)
    return MonteCarloSample(
        design_temp_c=result.design_temp_c,
        design_load_w=result.design_load_w,
        load_min_w=result.load_min_w,
        load_max_w=result.load_max_w,
        annual_energy_kwh=result.annual_energy_kwh,
    )


def iter_samples(
    record: BuildingRecord,
    sample_count: int,
    rng: np.random.Generator,
    noise: tuple[FieldNoise, ...] = DEFAULT_NOISE,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> Iterator[MonteCarloSample]:
    """Lazily yield ``sample_count`` samples; stop consuming to cancel."""
    inputs = resolve_inputs(record, config)
    for _ in range(sample_count):
        yield _evaluate(perturb_record(record, inputs, rng, noise), config, catalog)


def percentile_index(count: int, fraction: float) -> int:
    return min(math.floor(fraction * count), count - 1)


def summarize(samples: list[MonteCarloSample]) -> MonteCarloSummary:
    ordered = sorted(samples, key=lambda s: s.design_load_w)
    if not ordered:
        return MonteCarloSummary(samples=(), p10=None, p50=None, p90=None, mean_load_w=None, std_load_w=None)

    loads = np.asarray([s.design_load_w for s in ordered], dtype=np.float64)
    n = len(ordered)
    return MonteCarloSummary(
        samples=tuple(ordered),
        p10=ordered[percentile_index(n, 0.10)],
        p50=ordered[percentile_index(n, 0.50)],
        p90=ordered[percentile_index(n, 0.90)],
        mean_load_w=float(loads.mean()),
        std_load_w=float(loads.std()),
    )


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------


def run_monte_carlo(
    record: BuildingRecord,
    sample_count: int = 500,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    noise: tuple[FieldNoise, ...] = DEFAULT_NOISE,
    executor: Executor | None = None,
    config: ModelConfig = DEFAULT,
    catalog: Catalog = CATALOG,
) -> MonteCarloSummary:
    """Sample the design load under input uncertainty.

    Args:
        record: Building record to perturb
        sample_count: Number of perturbed records to evaluate
        rng: Noise source; a new generator seeded with ``seed`` if omitted
        seed: Seed used when ``rng`` is not given
        noise: Per-field noise specification
        executor: Optional executor to evaluate samples concurrently
        config: Model tunables
        catalog: Static catalogs

    Returns:
        MonteCarloSummary with samples sorted by design load and the
        entries at the 10th, 50th and 90th percentile positions.
    """
    if rng is None:
        rng = np.random.default_rng(seed)
    count = max(sample_count, 0)

    if executor is None:
        samples = list(iter_samples(record, count, rng, noise, config, catalog))
    else:
        # Draw all perturbations up front so results do not depend on scheduling
        inputs = resolve_inputs(record, config)
        records = [perturb_record(record, inputs, rng, noise) for _ in range(count)]
        evaluate = functools.partial(_evaluate, config=config, catalog=catalog)
        samples = list(executor.map(evaluate, records))

    summary = summarize(samples)
    if summary.p10 and summary.p50 and summary.p90:
        logger.debug(
            "Monte Carlo over %d samples: p10=%.0f W p50=%.0f W p90=%.0f W",
            summary.count,
            summary.p10.design_load_w,
            summary.p50.design_load_w,
            summary.p90.design_load_w,
        )
    return summary
