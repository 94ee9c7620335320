"""
Structured probe error exception type.

Raised by probe clients when a single call fails: transport error, non-success
status or an unparsable body.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_code import ErrorCode
from .pathbench_error import PathbenchError


@dataclass(eq=False)
class ProbeError(PathbenchError):
    """A single probe call failed.

    Attributes:
        endpoint: Tag of the endpoint that was probed.
        cause: Human-readable description of the failure.
        code: Normalized :class:`ErrorCode` classification.
        status_code: HTTP status when the endpoint answered.
        raw: Original exception for diagnostics.
    """

    endpoint: str
    cause: str
    code: ErrorCode = ErrorCode.UNKNOWN
    status_code: Optional[int] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        status = f" (HTTP {self.status_code})" if self.status_code is not None else ""
        return f"probe {self.endpoint} {self.code.value}{status}: {self.cause}"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(endpoint=self.endpoint, cause=self.cause, status_code=self.status_code)
        return data


__all__ = ["ProbeError"]
