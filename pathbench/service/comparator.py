"""Comparator for paired statistic values.

``compare(mine, theirs)`` is the primitive: ``mine`` wins only when strictly
lower, and ``percent_diff`` is ``(theirs - mine) / theirs * 100``. A zero
``theirs`` makes the percentage undefined and raises ``ValueError``.

The pair helpers apply the primitive generically to any metric axis and any
statistic so no axis is special-cased.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from ..base.models import STATISTICS, ComparisonResult, StatisticComparison, Statistics


@dataclass(frozen=True)
class Comparison:
    """Result of comparing ``mine`` against ``theirs``."""

    is_winner: bool
    percent_diff: float


def percent_diff(mine: float, theirs: float) -> float:
    """Percentage by which ``mine`` is lower than ``theirs``.

    Raises
    ------
    ValueError
        If ``theirs`` is zero.
    """
    if theirs == 0:
        raise ValueError("percent difference is undefined when the reference value is 0")
    return (theirs - mine) / theirs * 100.0


def is_winner(mine: float, theirs: float) -> bool:
    """Strict comparison; equal values never win."""
    return mine < theirs


def compare(mine: float, theirs: float) -> Comparison:
    """Compare one statistic value against its counterpart."""
    return Comparison(is_winner=is_winner(mine, theirs), percent_diff=percent_diff(mine, theirs))


def compare_pair(statistic: str, value_a: float, value_b: float) -> StatisticComparison:
    """Decide the winner between two sides for one statistic.

    The winner is the strictly lower side and ``percent_diff`` is computed
    with the winner as ``mine``. Ties yield ``winner=None`` and no percentage.
    """
    winner: Optional[str] = None
    diff: Optional[float] = None
    if is_winner(value_a, value_b):
        winner, diff = "a", percent_diff(value_a, value_b)
    elif is_winner(value_b, value_a):
        winner, diff = "b", percent_diff(value_b, value_a)
    return StatisticComparison(
        statistic=statistic, value_a=value_a, value_b=value_b, winner=winner, percent_diff=diff
    )


def compare_statistics(
    metric: str,
    stats_a: Statistics,
    stats_b: Statistics,
    *,
    statistics: Iterable[str] = STATISTICS,
    headline: str = "mean",
) -> ComparisonResult:
    """Compare two :class:`Statistics` for one metric across each statistic.

    The headline winner and percentage come from the ``headline`` statistic.
    """
    by_statistic: Dict[str, StatisticComparison] = {
        name: compare_pair(name, stats_a.value(name), stats_b.value(name)) for name in statistics
    }
    lead = by_statistic.get(headline) or compare_pair(headline, stats_a.value(headline), stats_b.value(headline))
    return ComparisonResult(
        metric=metric,
        stats_a=stats_a,
        stats_b=stats_b,
        winner=lead.winner,
        percent_diff=lead.percent_diff,
        by_statistic=by_statistic,
    )


__all__ = ["Comparison", "percent_diff", "is_winner", "compare", "compare_pair", "compare_statistics"]
