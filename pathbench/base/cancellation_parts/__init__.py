"""Cancellation parts package; import from ``pathbench.base.cancellation``."""

from .cancelled_error import CancelledError
from .cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
