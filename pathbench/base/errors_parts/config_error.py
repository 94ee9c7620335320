"""Invalid run configuration detected before any network activity."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .error_code import ErrorCode
from .pathbench_error import PathbenchError


@dataclass(eq=False)
class ConfigError(PathbenchError):
    """Raised for an invalid round count or endpoint identifiers."""

    reason: str
    code = ErrorCode.CONFIG

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"invalid configuration: {self.reason}"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["reason"] = self.reason
        return data


__all__ = ["ConfigError"]
