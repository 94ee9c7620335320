"""Post-trim series is empty so statistics cannot be computed."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .error_code import ErrorCode
from .pathbench_error import PathbenchError


@dataclass(eq=False)
class InsufficientSamplesError(PathbenchError):
    """Not enough rounds remain after discarding the warm-up round."""

    round_count: int
    sample_count: int = 0
    code = ErrorCode.INSUFFICIENT_SAMPLES

    def __str__(self) -> str:  # pragma: no cover - trivial
        return (
            f"{self.sample_count} samples left after warm-up trimming of "
            f"{self.round_count} round(s); at least 2 rounds are required"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(round_count=self.round_count, sample_count=self.sample_count)
        return data


__all__ = ["InsufficientSamplesError"]
