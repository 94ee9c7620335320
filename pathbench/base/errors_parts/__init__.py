"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `pathbench.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .pathbench_error import PathbenchError
from .probe_error import ProbeError
from .round_error import RoundError
from .config_error import ConfigError
from .insufficient_samples_error import InsufficientSamplesError
from .classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "PathbenchError",
    "ProbeError",
    "RoundError",
    "ConfigError",
    "InsufficientSamplesError",
    "classify_exception",
    "code_for_status",
]
