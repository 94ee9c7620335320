"""Warm-up trimming for latency series.

The first round of a run pays connection establishment and is dropped.
Exactly one round is discarded regardless of the round count.
"""

from __future__ import annotations

from ..base.models import LatencySeries

WARMUP_ROUNDS = 1


def trim_warmup(series: LatencySeries) -> LatencySeries:
    """Return a new series without the warm-up round.

    Inputs of length <= 1 produce an empty series; the input is not modified.
    """
    if len(series) <= WARMUP_ROUNDS:
        return LatencySeries()
    return LatencySeries(rounds=series.rounds[WARMUP_ROUNDS:])


__all__ = ["trim_warmup", "WARMUP_ROUNDS"]
