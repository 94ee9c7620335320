"""
Pydantic DTOs for probe endpoint response bodies.

Purpose
-------
Validate the JSON bodies returned by probe endpoints before they enter the
sampler. A success body carries ``queryLatency`` and ``apiProcessingTime``
(milliseconds); a failure body carries ``error``.

External dependencies: Pydantic only (no network calls).

Failure modes
-------------
Validation either succeeds or raises ``pydantic.ValidationError``; the probe
client converts that into a ``ProbeError`` with ``MALFORMED_BODY``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeSuccessBody(BaseModel):
    """Success body of a probe endpoint.

    ``query_latency`` may be absent when the endpoint reports it only through
    the ``Server-Timing`` header; the probe client resolves that case.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    query_latency: Optional[float] = Field(default=None, alias="queryLatency", ge=0)
    api_processing_time: Optional[float] = Field(default=None, alias="apiProcessingTime", ge=0)


class ProbeErrorBody(BaseModel):
    """Failure body of a probe endpoint."""

    model_config = ConfigDict(extra="ignore")

    error: Optional[str] = None


__all__ = ["ProbeSuccessBody", "ProbeErrorBody"]
