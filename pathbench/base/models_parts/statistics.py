"""Summary statistics snapshot.

Immutable value derived from a non-empty sequence of latencies; recomputed
per run and never cached.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class Statistics:
    """Aggregate statistics over one latency sequence (milliseconds).

    Attributes:
        count: Number of samples the statistics were computed from.
        mean: Arithmetic mean.
        median: Middle value (average of the two middle values for even counts).
        p95: 95th percentile using the nearest-rank method.
    """

    count: int
    mean: float
    median: float
    p95: float

    def value(self, statistic: str) -> float:
        """Return the named statistic (``mean``, ``median`` or ``p95``)."""
        if statistic not in ("mean", "median", "p95"):
            raise ValueError(f"unknown statistic '{statistic}'")
        return getattr(self, statistic)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


__all__ = ["Statistics"]
