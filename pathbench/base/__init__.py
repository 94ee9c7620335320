"""
Benchmark Base Package

Exports the transport-agnostic building blocks shared by the probe client,
the sampling core and the outer surfaces:

- Models: endpoints, samples, series, statistics and run outcomes
- Errors: structured error taxonomy with normalized codes
- Interfaces: the ``ProbeClient`` boundary
- Cancellation and timeout configuration
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    ConfigError,
    ErrorCode,
    InsufficientSamplesError,
    PathbenchError,
    ProbeError,
    RoundError,
    classify_exception,
)
from .interfaces import ProbeClient
from .models import (
    ComparisonResult,
    Endpoint,
    LatencySeries,
    RoundResult,
    RunOutcome,
    RunStatus,
    Sample,
    StatisticComparison,
    Statistics,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "CancellationToken",
    "CancelledError",
    "ConfigError",
    "ErrorCode",
    "InsufficientSamplesError",
    "PathbenchError",
    "ProbeError",
    "RoundError",
    "classify_exception",
    "ProbeClient",
    "ComparisonResult",
    "Endpoint",
    "LatencySeries",
    "RoundResult",
    "RunOutcome",
    "RunStatus",
    "Sample",
    "StatisticComparison",
    "Statistics",
    "TimeoutConfig",
    "get_timeout_config",
]
