"""pathbench package

Paired latency benchmarking of two routes to the same backend operation,
typically a private-network path and a public-internet path.

Public API (re-exported):
    - Version: ``__version__``
    - Entry point: :func:`run_comparison`
    - Clients: :class:`HttpProbeClient`, :class:`ScriptedProbeClient`
    - Models: :class:`Endpoint`, :class:`RunOutcome`, :class:`RunStatus`
    - Errors: :class:`ProbeError`, :class:`RoundError`, :class:`ConfigError`,
      :class:`InsufficientSamplesError`, :class:`ErrorCode`
    - Cancellation: :class:`CancellationToken`
"""

from .base.cancellation import CancellationToken
from .base.errors import (
    ConfigError,
    ErrorCode,
    InsufficientSamplesError,
    PathbenchError,
    ProbeError,
    RoundError,
)
from .base.models import Endpoint, RunOutcome, RunStatus
from .mock import ScriptedProbeClient
from .probe import HttpProbeClient
from .service.benchmark import run_comparison

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "run_comparison",
    "HttpProbeClient",
    "ScriptedProbeClient",
    "Endpoint",
    "RunOutcome",
    "RunStatus",
    "CancellationToken",
    "ConfigError",
    "ErrorCode",
    "InsufficientSamplesError",
    "PathbenchError",
    "ProbeError",
    "RoundError",
]
