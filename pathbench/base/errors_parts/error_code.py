"""
Normalized benchmark error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the probe client, sampler and
orchestrator. Values are lowercase snake_case and are considered a stable
public contract for logging and JSON output.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNAVAILABLE = "unavailable"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    SERVER_ERROR = "server_error"
    MALFORMED_BODY = "malformed_body"
    CONFIG = "config"
    INSUFFICIENT_SAMPLES = "insufficient_samples"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
