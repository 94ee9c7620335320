"""Models parts package public surface.

Prefer importing from ``pathbench.base.models`` for the stable surface.
"""

from .endpoint import Endpoint
from .sample import Sample
from .round_result import RoundResult
from .latency_series import LatencySeries
from .statistics import Statistics
from .comparison_result import ComparisonResult, StatisticComparison
from .run_outcome import RunOutcome, RunStatus

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
]
