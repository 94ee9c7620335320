"""Round-level failure wrapping a :class:`ProbeError` with round context."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .error_code import ErrorCode
from .pathbench_error import PathbenchError
from .probe_error import ProbeError


@dataclass(eq=False)
class RoundError(PathbenchError):
    """A probe failed during a round; terminates the whole run.

    Attributes:
        round_index: Zero-based index of the failing round.
        endpoint: Tag of the endpoint whose probe failed.
        cause: The underlying :class:`ProbeError`.
    """

    round_index: int
    endpoint: str
    cause: ProbeError

    @property
    def code(self) -> ErrorCode:  # type: ignore[override]
        return self.cause.code

    @property
    def round_number(self) -> int:
        """One-based round number as shown in progress output."""
        return self.round_index + 1

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"round {self.round_number} failed on {self.endpoint}: {self.cause}"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            round_index=self.round_index,
            round_number=self.round_number,
            endpoint=self.endpoint,
            cause=self.cause.to_dict(),
        )
        return data


__all__ = ["RoundError"]
