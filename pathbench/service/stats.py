"""Statistics engine for latency sequences.

Reduces a non-empty sequence of millisecond samples to mean, median and p95.
Calling any reducer with an empty sequence is a precondition violation and
raises ``ValueError``; no sentinel (0 or NaN) is ever returned. The
orchestrator guards post-trim emptiness before reaching this module.
"""

from __future__ import annotations

import math
import statistics
from typing import Iterable, List, Sequence

from ..base.models import Statistics

P95 = 0.95


def _require_values(values: Iterable[float]) -> List[float]:
    out = [float(v) for v in values]
    if not out:
        raise ValueError("statistics require at least one sample")
    return out


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean."""
    data = _require_values(values)
    return sum(data) / len(data)


def median(values: Iterable[float]) -> float:
    """Middle value; the average of the two middle values for even counts."""
    return float(statistics.median(_require_values(values)))


def nearest_rank_index(count: int, fraction: float = P95) -> int:
    """Zero-based nearest-rank index ``ceil(count * fraction) - 1`` clamped to ``[0, count - 1]``."""
    if count < 1:
        raise ValueError("nearest-rank index requires a positive count")
    return min(max(math.ceil(count * fraction) - 1, 0), count - 1)


def percentile(sorted_values: Sequence[float], fraction: float) -> float:
    """Nearest-rank percentile from a pre-sorted, non-empty sequence (no interpolation)."""
    if not sorted_values:
        raise ValueError("percentile requires at least one sample")
    return float(sorted_values[nearest_rank_index(len(sorted_values), fraction)])


def p95(values: Iterable[float]) -> float:
    """95th percentile via the nearest-rank method."""
    return percentile(sorted(_require_values(values)), P95)


def compute_statistics(values: Iterable[float]) -> Statistics:
    """Compute :class:`Statistics` for a non-empty sequence.

    Raises
    ------
    ValueError
        If ``values`` is empty.
    """
    data = sorted(_require_values(values))
    return Statistics(
        count=len(data),
        mean=sum(data) / len(data),
        median=float(statistics.median(data)),
        p95=percentile(data, P95),
    )


__all__ = ["mean", "median", "p95", "percentile", "nearest_rank_index", "compute_statistics", "P95"]
