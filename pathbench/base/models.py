"""
Benchmark domain models public surface.

This module re-exports the one-class-per-file implementations under
``pathbench.base.models_parts`` so callers have a single stable import path.
"""

from .models_parts.endpoint import Endpoint
from .models_parts.sample import Sample
from .models_parts.round_result import RoundResult
from .models_parts.latency_series import LatencySeries
from .models_parts.statistics import Statistics
from .models_parts.comparison_result import ComparisonResult, StatisticComparison
from .models_parts.run_outcome import RunOutcome, RunStatus

METRICS = ("round_trip", "inner_latency")
STATISTICS = ("mean", "median", "p95")

__all__ = [
    "Endpoint",
    "Sample",
    "RoundResult",
    "LatencySeries",
    "Statistics",
    "ComparisonResult",
    "StatisticComparison",
    "RunOutcome",
    "RunStatus",
    "METRICS",
    "STATISTICS",
]
