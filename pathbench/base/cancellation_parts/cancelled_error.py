"""Cancellation error type.

Raised inside the sampling loop when a run observes a cancellation request
between rounds. The orchestrator maps it to the ``cancelled`` run status; it
never surfaces as a failure.
"""

from __future__ import annotations

from typing import Optional


class CancelledError(RuntimeError):
    """Raised when a run is cancelled cooperatively.

    Attributes:
        reason: Reason supplied to the token, if any.
        completed_rounds: Rounds fully sampled before the run stopped.
    """

    def __init__(self, reason: Optional[str] = None, *, completed_rounds: int = 0) -> None:
        super().__init__(reason or "run cancelled")
        self.reason = reason
        self.completed_rounds = completed_rounds


__all__ = ["CancelledError"]
