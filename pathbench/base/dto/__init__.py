"""DTO validation package for probe payloads."""

from .probe_payload import ProbeErrorBody, ProbeSuccessBody

__all__ = ["ProbeSuccessBody", "ProbeErrorBody"]
