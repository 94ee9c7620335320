"""End-to-end latency comparison between two endpoints.

Purpose
-------
Compose the paired sampler, warm-up trimming, the statistics engine and the
comparator into one run that yields exactly one :class:`RunOutcome`.

Failure Modes & Semantics
-------------------------
- Invalid ``round_count`` (< 1) or endpoints (empty tag or URL, duplicate
  tags) produce a failed outcome carrying ``ConfigError`` before any probe.
- ``round_count == 1`` leaves no samples after trimming; the outcome carries
  ``InsufficientSamplesError`` and statistics are never computed.
- A probe failure ends the run with a failed outcome carrying ``RoundError``.
  There is no retry and no partial result.
- Cancellation ends the run with the ``cancelled`` status.

This function is the single place where internal errors become a terminal
outcome; callers that prefer exceptions use ``RunOutcome.raise_for_status``.
Exceptions raised by the caller's own ``on_progress`` callback are not
benchmark errors and propagate unchanged.
"""

from __future__ import annotations

import logging
import uuid
from typing import Dict, Optional

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import ConfigError, InsufficientSamplesError, PathbenchError, RoundError
from ..base.interfaces import ProbeClient
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ComparisonResult, Endpoint, LatencySeries, RunOutcome, RunStatus
from ..config.defaults import DEFAULT_ROUND_COUNT
from .comparator import compare_statistics
from .sampler import PairedSampler, ProgressCallback
from .stats import compute_statistics
from .trimming import trim_warmup

ROUND_TRIP = "round_trip"
INNER_LATENCY = "inner_latency"


def validate_run_args(endpoint_a: Endpoint, endpoint_b: Endpoint, round_count: int) -> None:
    """Validate run arguments.

    Raises
    ------
    ConfigError
        If ``round_count`` is below 1, an endpoint has an empty tag or URL,
        or both endpoints share a tag.
    """
    if isinstance(round_count, bool) or not isinstance(round_count, int):
        raise ConfigError(f"round_count must be an integer, got {round_count!r}")
    if round_count < 1:
        raise ConfigError(f"round_count must be >= 1, got {round_count}")
    for label, endpoint in (("endpoint_a", endpoint_a), ("endpoint_b", endpoint_b)):
        if not endpoint.tag or not endpoint.tag.strip():
            raise ConfigError(f"{label} has an empty tag")
        if not endpoint.url or not endpoint.url.strip():
            raise ConfigError(f"{label} ({endpoint.tag}) has an empty url")
    if endpoint_a.tag == endpoint_b.tag:
        raise ConfigError(f"endpoints must have distinct tags, both are '{endpoint_a.tag}'")


def summarize(series: LatencySeries) -> Dict[str, ComparisonResult]:
    """Compute per-metric comparisons for a non-empty, already trimmed series.

    Raises
    ------
    ValueError
        If ``series`` is empty.
    """
    return {
        ROUND_TRIP: compare_statistics(
            ROUND_TRIP,
            compute_statistics(series.round_trips("a")),
            compute_statistics(series.round_trips("b")),
        ),
        INNER_LATENCY: compare_statistics(
            INNER_LATENCY,
            compute_statistics(series.inner_latencies("a")),
            compute_statistics(series.inner_latencies("b")),
        ),
    }


def run_comparison(
    probe_client: ProbeClient,
    endpoint_a: Endpoint,
    endpoint_b: Endpoint,
    *,
    round_count: int = DEFAULT_ROUND_COUNT,
    on_progress: Optional[ProgressCallback] = None,
    cancel_token: Optional[CancellationToken] = None,
    run_id: Optional[str] = None,
) -> RunOutcome:
    """Run a paired latency comparison and return its terminal outcome.

    Parameters
    ----------
    probe_client: ProbeClient
        Client used for both endpoints.
    endpoint_a, endpoint_b: Endpoint
        The two routes being compared (e.g., private and public path).
    round_count: int
        Rounds to sample, including the discarded warm-up round.
    on_progress: Optional[ProgressCallback]
        Called with ``(current_round, total_rounds)`` after each round.
        Exceptions it raises propagate unchanged and end the run.
    cancel_token: Optional[CancellationToken]
        Token checked between rounds.
    run_id: Optional[str]
        Correlation id for log events; generated when omitted.

    Returns
    -------
    RunOutcome
        Succeeded with one ``ComparisonResult`` per metric, failed with a
        structured error, or cancelled.
    """
    logger = get_logger("pathbench.benchmark")
    run_id = run_id or uuid.uuid4().hex
    ctx = LogContext(run_id=run_id, endpoint_a=endpoint_a.tag, endpoint_b=endpoint_b.tag)

    def _outcome(status: RunStatus, **fields) -> RunOutcome:
        return RunOutcome(
            status=status,
            run_id=run_id,
            round_count=round_count,
            endpoint_a=endpoint_a,
            endpoint_b=endpoint_b,
            **fields,
        )

    def _failed(error: PathbenchError, **log_fields) -> RunOutcome:
        normalized_log_event(
            logger,
            "benchmark.failed",
            ctx,
            phase="finalize",
            error_code=error.code.value,
            level=logging.WARNING,
            error=str(error),
            **log_fields,
        )
        return _outcome(RunStatus.FAILED, error=error)

    try:
        validate_run_args(endpoint_a, endpoint_b, round_count)
    except ConfigError as exc:
        return _failed(exc)

    normalized_log_event(logger, "benchmark.start", ctx, phase="start", rounds=round_count)
    try:
        series = PairedSampler(probe_client).sample(
            endpoint_a,
            endpoint_b,
            round_count,
            on_progress=on_progress,
            cancel_token=cancel_token,
            log_context=ctx,
        )
    except RoundError as exc:
        return _failed(exc, round_number=exc.round_number, endpoint=exc.endpoint)
    except CancelledError as exc:
        normalized_log_event(
            logger,
            "benchmark.cancelled",
            ctx,
            phase="finalize",
            completed_rounds=exc.completed_rounds,
            reason=exc.reason,
        )
        return _outcome(RunStatus.CANCELLED, cancel_reason=exc.reason)

    trimmed = trim_warmup(series)
    if not len(trimmed):
        return _failed(InsufficientSamplesError(round_count=round_count, sample_count=len(trimmed)))

    comparisons = summarize(trimmed)
    headline = comparisons[ROUND_TRIP]
    normalized_log_event(
        logger,
        "benchmark.finalize",
        ctx,
        phase="finalize",
        samples=len(trimmed),
        winner=headline.winner,
        mean_a_ms=headline.stats_a.mean,
        mean_b_ms=headline.stats_b.mean,
    )
    return _outcome(RunStatus.SUCCEEDED, comparisons=comparisons, series=trimmed)


__all__ = ["run_comparison", "summarize", "validate_run_args", "ROUND_TRIP", "INNER_LATENCY"]
