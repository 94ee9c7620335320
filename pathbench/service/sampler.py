"""Paired sampler: sequential rounds of two concurrent probes.

Purpose
-------
Run ``round_count`` rounds strictly in order. Each round submits one probe to
endpoint A and one to endpoint B on a two-worker thread pool and joins both
before the next round starts, which bounds outstanding connections to two and
keeps rounds from interfering with each other.

Failure Modes & Semantics
-------------------------
- A failing probe fails the whole sampling operation with ``RoundError`` once
  its round has resolved (probes are not preemptible). Nothing sampled so far
  is surfaced. When both probes of a round fail, endpoint A is reported.
- Exceptions other than ``ProbeError`` raised by a probe client are wrapped in
  a ``ProbeError`` so callers always see endpoint and round context.
- Cancellation is observed before each round; the in-flight round completes
  and ``CancelledError`` is raised instead of starting the next one.

Progress
--------
``on_progress(current, total)`` is called once after each completed round with
``current`` running from 1 to ``total``.
"""

from __future__ import annotations

import concurrent.futures as cf
import logging
from typing import Callable, List, Optional

from ..base.cancellation import CancellationToken
from ..base.errors import ProbeError, RoundError, classify_exception
from ..base.interfaces import ProbeClient
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import Endpoint, LatencySeries, RoundResult, Sample

ProgressCallback = Callable[[int, int], None]


class PairedSampler:
    """Collect a :class:`LatencySeries` from two endpoints.

    Parameters
    ----------
    probe_client:
        Client used for both endpoints; must tolerate concurrent calls.
    """

    def __init__(self, probe_client: ProbeClient) -> None:
        self._probe_client = probe_client
        self._logger = get_logger("pathbench.sampler")

    def sample(
        self,
        endpoint_a: Endpoint,
        endpoint_b: Endpoint,
        round_count: int,
        *,
        on_progress: Optional[ProgressCallback] = None,
        cancel_token: Optional[CancellationToken] = None,
        log_context: Optional[LogContext] = None,
    ) -> LatencySeries:
        """Run all rounds and return the series in issuance order.

        Raises
        ------
        ValueError
            If ``round_count`` is negative.
        RoundError
            If any probe fails.
        CancelledError
            If ``cancel_token`` is cancelled before a round starts.
        """
        if round_count < 0:
            raise ValueError("round_count must be non-negative")
        ctx = log_context or LogContext(endpoint_a=endpoint_a.tag, endpoint_b=endpoint_b.tag)
        rounds: List[RoundResult] = []
        with cf.ThreadPoolExecutor(max_workers=2, thread_name_prefix="pathbench-probe") as executor:
            for round_index in range(round_count):
                if cancel_token is not None:
                    cancel_token.raise_if_cancelled(completed_rounds=len(rounds))
                result = self._run_round(executor, round_index, endpoint_a, endpoint_b)
                rounds.append(result)
                normalized_log_event(
                    self._logger,
                    "benchmark.round",
                    ctx.for_round(round_index),
                    phase="sample",
                    round_number=round_index + 1,
                    level=logging.DEBUG,
                    round_trip_a_ms=result.sample_a.round_trip_ms,
                    round_trip_b_ms=result.sample_b.round_trip_ms,
                )
                if on_progress is not None:
                    on_progress(round_index + 1, round_count)
        return LatencySeries(rounds=tuple(rounds))

    def _run_round(
        self,
        executor: cf.Executor,
        round_index: int,
        endpoint_a: Endpoint,
        endpoint_b: Endpoint,
    ) -> RoundResult:
        future_a = executor.submit(self._probe_client.probe, endpoint_a)
        future_b = executor.submit(self._probe_client.probe, endpoint_b)
        cf.wait((future_a, future_b), return_when=cf.ALL_COMPLETED)
        sample_a = self._resolve(future_a, round_index, endpoint_a)
        sample_b = self._resolve(future_b, round_index, endpoint_b)
        return RoundResult(round_index=round_index, sample_a=sample_a, sample_b=sample_b)

    @staticmethod
    def _resolve(future: "cf.Future[Sample]", round_index: int, endpoint: Endpoint) -> Sample:
        exc = future.exception()
        if exc is None:
            return future.result()
        if isinstance(exc, ProbeError):
            cause = exc
        else:
            cause = ProbeError(
                endpoint=endpoint.tag,
                cause=str(exc) or type(exc).__name__,
                code=classify_exception(exc),
                raw=exc,
            )
        raise RoundError(round_index=round_index, endpoint=endpoint.tag, cause=cause) from exc


__all__ = ["PairedSampler", "ProgressCallback"]
