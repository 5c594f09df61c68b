"""Analyses that wrap the heat-load model: uncertainty and retrofit ranking."""

from analysis.improvements import (
    IMPROVEMENTS,
    Improvement,
    ImprovementCandidate,
    evaluate_all,
    evaluate_improvements,
)
from analysis.monte_carlo import (
    DEFAULT_NOISE,
    FieldNoise,
    MonteCarloSample,
    MonteCarloSummary,
    iter_samples,
    run_monte_carlo,
)

__all__ = [
    "DEFAULT_NOISE",
    "IMPROVEMENTS",
    "FieldNoise",
    "Improvement",
    "ImprovementCandidate",
    "MonteCarloSample",
    "MonteCarloSummary",
    "evaluate_all",
    "evaluate_improvements",
    "iter_samples",
    "run_monte_carlo",
]
