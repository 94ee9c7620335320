"""Common base class for structured benchmark errors."""
from __future__ import annotations

from typing import Any, Dict

from .error_code import ErrorCode


class PathbenchError(Exception):
    """Base for every error the benchmarking core raises deliberately.

    Subclasses expose a normalized ``code`` and a ``to_dict`` rendering so
    callers can inspect the endpoint and cause as structured data.
    """

    code: ErrorCode = ErrorCode.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        return {"type": type(self).__name__, "code": self.code.value, "message": str(self)}


__all__ = ["PathbenchError"]
