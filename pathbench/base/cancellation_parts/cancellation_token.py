"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` polled by the paired sampler between
rounds. Probes already in flight are not interrupted.
"""

from __future__ import annotations

from threading import Lock

from .cancelled_error import CancelledError


class CancellationToken:
    """A thread-safe cooperative cancellation flag.

    ``cancel`` may be called from any thread (e.g., a signal handler or an
    HTTP request handler); the sampler observes it before starting each round.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: str | None = None
        self._lock = Lock()

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation; later calls keep the first reason."""
        with self._lock:
            if self._cancelled:
                return
            # reason first: readers check ``cancelled`` without the lock
            self._reason = reason
            self._cancelled = True

    def raise_if_cancelled(self, *, completed_rounds: int = 0) -> None:
        """Raise ``CancelledError`` if the token is cancelled."""
        if self._cancelled:
            raise CancelledError(self._reason, completed_rounds=completed_rounds)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._cancelled}, reason={self._reason!r})"


__all__ = ["CancellationToken"]
