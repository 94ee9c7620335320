"""ProbeClient Protocol (single-class module).

Boundary between the sampling core and whatever performs the network call.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import Endpoint, Sample


@runtime_checkable
class ProbeClient(Protocol):
    """Performs exactly one timed call to an endpoint.

    Implementations return a :class:`Sample` whose ``round_trip_ms`` spans the
    full call boundary and whose ``inner_latency_ms`` is the duration the
    endpoint reports for its own operation. Any failure is raised as
    ``ProbeError``; implementations never retry. They must be safe to call
    from two threads at once.
    """

    def probe(self, endpoint: Endpoint) -> Sample:  # pragma: no cover - interface
        """Issue one call to ``endpoint`` and return its timing sample."""
        ...
