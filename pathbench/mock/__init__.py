"""Scripted probe client used by tests and offline runs."""

from .client import ScriptedProbeClient

__all__ = ["ScriptedProbeClient"]
