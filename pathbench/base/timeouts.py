"""Unified timeout settings for probe calls.

This module centralizes the timeout values applied to every probe request so
no call site introduces its own numeric literals. Probes run on worker threads
where signal-based guards are unavailable, so enforcement is delegated to the
``httpx`` client timeout built by :func:`httpx_timeout`.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and whenever they change. Supported environment variables (all
    optional):
        PATHBENCH_PROBE_TIMEOUT_SECONDS
        PATHBENCH_CONNECT_TIMEOUT_SECONDS
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        probe_timeout_seconds: Read/write/pool timeout for one probe call.
        connect_timeout_seconds: Timeout for establishing a connection.
    """

    probe_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    guard = "/".join(
        [
            os.getenv("PATHBENCH_PROBE_TIMEOUT_SECONDS", ""),
            os.getenv("PATHBENCH_CONNECT_TIMEOUT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        probe_timeout_seconds=_parse_env_float("PATHBENCH_PROBE_TIMEOUT_SECONDS", 30.0),
        connect_timeout_seconds=_parse_env_float("PATHBENCH_CONNECT_TIMEOUT_SECONDS", 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


def httpx_timeout(cfg: TimeoutConfig | None = None) -> httpx.Timeout:
    """Build the ``httpx.Timeout`` applied to probe clients."""
    cfg = cfg or get_timeout_config()
    return httpx.Timeout(cfg.probe_timeout_seconds, connect=cfg.connect_timeout_seconds)


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "httpx_timeout",
]
