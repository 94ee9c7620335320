"""Deterministic scripted probe client for offline testing.

Purpose
-------
Implement the ``ProbeClient`` contract without network traffic. Each endpoint
tag maps to a script of steps consumed one per call, so sampler,
orchestrator, CLI and service tests run against exact, repeatable latencies.

Script steps
------------
- ``(round_trip_ms, inner_latency_ms)`` tuple -> returned as a ``Sample``.
- a bare number -> used as the round-trip time with ``inner_latency_ms=0.0``.
- an exception instance -> raised for that call.

External dependencies
---------------------
Standard library only.
"""

from __future__ import annotations

import threading
import time
from typing import Dict, List, Mapping, Sequence, Tuple, Union

from ..base.models import Endpoint, Sample

Step = Union[Tuple[float, float], float, int, BaseException]


class ScriptedProbeClient:
    """Probe client replaying per-endpoint scripts.

    Parameters
    ----------
    script:
        Mapping of endpoint tag to the ordered steps for that endpoint.
    delay_seconds:
        Optional sleep per call to make overlapping probes observable.
    """

    def __init__(self, script: Mapping[str, Sequence[Step]], *, delay_seconds: float = 0.0) -> None:
        self._script: Dict[str, List[Step]] = {tag: list(steps) for tag, steps in script.items()}
        self._positions: Dict[str, int] = {tag: 0 for tag in self._script}
        self._delay = delay_seconds
        self._lock = threading.Lock()
        self._in_flight = 0
        self.max_in_flight = 0
        self.calls: List[str] = []

    def calls_for(self, tag: str) -> int:
        """Number of probes issued to ``tag`` so far."""
        with self._lock:
            return self._positions.get(tag, 0)

    def probe(self, endpoint: Endpoint) -> Sample:
        with self._lock:
            steps = self._script.get(endpoint.tag)
            if steps is None:
                raise KeyError(f"no script for endpoint '{endpoint.tag}'")
            position = self._positions[endpoint.tag]
            if position >= len(steps):
                raise IndexError(f"script for '{endpoint.tag}' exhausted after {len(steps)} calls")
            self._positions[endpoint.tag] = position + 1
            self.calls.append(endpoint.tag)
            self._in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self._in_flight)
            step = steps[position]
        try:
            if self._delay:
                time.sleep(self._delay)
            if isinstance(step, BaseException):
                raise step
            if isinstance(step, tuple):
                round_trip, inner = step
            else:
                round_trip, inner = step, 0.0
            return Sample(endpoint_tag=endpoint.tag, round_trip_ms=float(round_trip), inner_latency_ms=float(inner))
        finally:
            with self._lock:
                self._in_flight -= 1


__all__ = ["ScriptedProbeClient"]
