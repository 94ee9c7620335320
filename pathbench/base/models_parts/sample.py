"""Single probe measurement.

A :class:`Sample` is produced once per probe call and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Sample:
    """Timing captured for one call to one endpoint.

    Attributes:
        endpoint_tag: Tag of the endpoint that produced the sample.
        round_trip_ms: Wall-clock duration across the full call boundary.
        inner_latency_ms: Duration the endpoint reports for its own bounded
            backend operation (``queryLatency``).
        api_processing_ms: Handler processing time reported by the endpoint
            (``apiProcessingTime``) when available.
    """

    endpoint_tag: str
    round_trip_ms: float
    inner_latency_ms: float
    api_processing_ms: Optional[float] = None


__all__ = ["Sample"]
