"""Comparison value objects.

``StatisticComparison`` captures the outcome for one statistic (mean, median
or p95) and ``ComparisonResult`` groups them for one metric axis (round-trip
or inner latency). Winners are ``"a"``, ``"b"`` or ``None`` for a tie.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .statistics import Statistics

Side = Optional[str]


@dataclass(frozen=True)
class StatisticComparison:
    """Winner and percent difference for a single statistic.

    ``percent_diff`` is expressed from the winner's perspective: how much lower
    the winning value is relative to the losing one. ``None`` on a tie.
    """

    statistic: str
    value_a: float
    value_b: float
    winner: Side
    percent_diff: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statistic": self.statistic,
            "value_a": self.value_a,
            "value_b": self.value_b,
            "winner": self.winner,
            "percent_diff": self.percent_diff,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Comparison of two endpoints on one metric.

    The headline ``winner`` / ``percent_diff`` mirror the ``mean`` entry of
    ``by_statistic``.
    """

    metric: str
    stats_a: Statistics
    stats_b: Statistics
    winner: Side
    percent_diff: Optional[float]
    by_statistic: Dict[str, StatisticComparison] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metric": self.metric,
            "stats_a": self.stats_a.to_dict(),
            "stats_b": self.stats_b.to_dict(),
            "winner": self.winner,
            "percent_diff": self.percent_diff,
            "by_statistic": {k: v.to_dict() for k, v in self.by_statistic.items()},
        }


__all__ = ["ComparisonResult", "StatisticComparison", "Side"]
