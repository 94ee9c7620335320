"""
Benchmark interfaces (Protocols) public surface.

Re-exports Protocols split into single-class modules under
``pathbench.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import ProbeClient

__all__ = ["ProbeClient"]
