"""Terminal result of a comparison run.

A :class:`RunOutcome` is exactly one of succeeded (comparisons populated),
failed (``error`` populated) or cancelled. Cancellation is a status of its
own and is never reported as a failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .comparison_result import ComparisonResult
from .endpoint import Endpoint
from .latency_series import LatencySeries


class RunStatus(str, Enum):
    """Terminal run states."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class RunOutcome:
    """Bundled result returned by the orchestrator.

    Attributes:
        status: Terminal :class:`RunStatus`.
        run_id: Identifier correlating log events of the run.
        round_count: Number of rounds requested.
        endpoint_a: First endpoint of the pair.
        endpoint_b: Second endpoint of the pair.
        comparisons: One :class:`ComparisonResult` per metric on success.
        series: Post-trim series the statistics were computed from.
        error: Structured error on failure.
        cancel_reason: Reason given to the cancellation token, if any.
    """

    status: RunStatus
    run_id: str
    round_count: int
    endpoint_a: Endpoint
    endpoint_b: Endpoint
    comparisons: Dict[str, ComparisonResult] = field(default_factory=dict)
    series: LatencySeries = field(default_factory=LatencySeries)
    error: Optional[Exception] = None
    cancel_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.SUCCEEDED

    def raise_for_status(self) -> None:
        """Re-raise the carried error for failed runs; no-op otherwise."""
        if self.status is RunStatus.FAILED and self.error is not None:
            raise self.error

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        data: Dict[str, Any] = {
            "status": self.status.value,
            "run_id": self.run_id,
            "round_count": self.round_count,
            "endpoint_a": {"tag": self.endpoint_a.tag, "url": self.endpoint_a.url},
            "endpoint_b": {"tag": self.endpoint_b.tag, "url": self.endpoint_b.url},
            "comparisons": {k: v.to_dict() for k, v in self.comparisons.items()},
            "samples": self.series.to_list(),
        }
        if self.error is not None:
            to_dict = getattr(self.error, "to_dict", None)
            data["error"] = to_dict() if callable(to_dict) else {"message": str(self.error)}
        if self.cancel_reason is not None:
            data["cancel_reason"] = self.cancel_reason
        return data


__all__ = ["RunOutcome", "RunStatus"]
