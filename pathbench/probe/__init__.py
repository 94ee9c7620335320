"""Probe clients issuing single timed calls to benchmark endpoints."""

from .client import HttpProbeClient, parse_server_timing

__all__ = ["HttpProbeClient", "parse_server_timing"]
