"""Unified benchmark error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``pathbench.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.pathbench_error import PathbenchError
from .errors_parts.probe_error import ProbeError
from .errors_parts.round_error import RoundError
from .errors_parts.config_error import ConfigError
from .errors_parts.insufficient_samples_error import InsufficientSamplesError
from .errors_parts.classification import classify_exception, code_for_status

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
