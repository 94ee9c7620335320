"""Structured logging context object for benchmark runs.

This module defines :class:`LogContext`, a dataclass carrying the fields
shared by every event of a run (run id, endpoint tags, current round and
extra metadata). ``to_dict`` merges ``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for benchmark logging events."""

    run_id: Optional[str] = None
    endpoint_a: Optional[str] = None
    endpoint_b: Optional[str] = None
    round_index: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def for_round(self, round_index: int) -> "LogContext":
        """Return a copy bound to ``round_index``."""
        return replace(self, round_index=round_index, extra=dict(self.extra))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
