"""Interface parts package; import from ``pathbench.base.interfaces``."""

from .probe_client import ProbeClient

__all__ = ["ProbeClient"]
