"""Ordered, immutable sequence of sampling rounds.

Insertion order equals round issuance order and is meaningful: warm-up
trimming relies on it. The sampler builds rounds in a private list and only
publishes a :class:`LatencySeries` once every round has completed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .round_result import RoundResult


@dataclass(frozen=True)
class LatencySeries:
    """Immutable series of :class:`RoundResult` in issuance order."""

    rounds: Tuple[RoundResult, ...] = ()

    def __len__(self) -> int:
        return len(self.rounds)

    def __iter__(self) -> Iterator[RoundResult]:
        return iter(self.rounds)

    def __getitem__(self, index: int) -> RoundResult:
        return self.rounds[index]

    def round_trips(self, side: str) -> List[float]:
        """Round-trip durations (ms) for ``side`` in series order."""
        return [r.sample_for(side).round_trip_ms for r in self.rounds]

    def inner_latencies(self, side: str) -> List[float]:
        """Endpoint-reported inner latencies (ms) for ``side`` in series order."""
        return [r.sample_for(side).inner_latency_ms for r in self.rounds]

    def to_list(self) -> List[dict]:
        return [
            {
                "round": r.round_index,
                "a": {
                    "round_trip_ms": r.sample_a.round_trip_ms,
                    "inner_latency_ms": r.sample_a.inner_latency_ms,
                },
                "b": {
                    "round_trip_ms": r.sample_b.round_trip_ms,
                    "inner_latency_ms": r.sample_b.inner_latency_ms,
                },
            }
            for r in self.rounds
        ]


__all__ = ["LatencySeries"]
