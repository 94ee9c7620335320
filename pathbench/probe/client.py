"""HTTP probe client.

Purpose
-------
Issue exactly one timed request to a probe endpoint and turn the response
into a :class:`Sample`. The endpoint runs one fixed-cost backend operation and
answers ``{"queryLatency": ms, "apiProcessingTime": ms}`` on success or
``{"error": "..."}`` on failure.

External Dependencies
---------------------
- ``httpx`` (pooled client from ``pathbench.base.http``) for the call.
- ``pydantic`` DTOs from ``pathbench.base.dto`` for body validation.

Timeout Strategy
----------------
Timeouts come from the pooled client (``get_timeout_config``); a timeout is
reported as ``ProbeError`` with ``ErrorCode.TIMEOUT``.

Failure Modes & Semantics
-------------------------
Transport errors, non-2xx statuses and unparsable bodies raise
``ProbeError``. No retry is attempted here or anywhere else in the core.
"""

from __future__ import annotations

import re
import time
from typing import Mapping, Optional

import httpx
from pydantic import ValidationError

from ..base.dto import ProbeErrorBody, ProbeSuccessBody
from ..base.errors import ErrorCode, ProbeError, classify_exception, code_for_status
from ..base.http import get_httpx_client
from ..base.logging import get_logger, normalized_log_event
from ..base.models import Endpoint, Sample

_DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Cache-Control": "no-store",
}
_SERVER_TIMING_ENTRY = re.compile(r"^\s*([\w.-]+)\s*(?:;(.*))?$")


def parse_server_timing(header: Optional[str]) -> dict[str, float]:
    """Parse a ``Server-Timing`` header into ``{name: dur_ms}``.

    Entries without a numeric ``dur`` parameter are skipped, e.g.
    ``"db;dur=1.20, api;dur=2.50"`` -> ``{"db": 1.2, "api": 2.5}``.
    """
    timings: dict[str, float] = {}
    if not header:
        return timings
    for entry in header.split(","):
        match = _SERVER_TIMING_ENTRY.match(entry)
        if match is None:
            continue
        name, params = match.group(1), match.group(2) or ""
        for param in params.split(";"):
            key, _, value = param.partition("=")
            if key.strip().lower() != "dur":
                continue
            try:
                timings[name] = float(value.strip().strip('"'))
            except ValueError:
                continue
    return timings


class HttpProbeClient:
    """Probe client backed by a pooled ``httpx.Client``.

    Parameters
    ----------
    base_url:
        Base URL against which relative endpoint URLs are resolved.
    method:
        HTTP method used for every probe (``POST`` by default).
    client:
        Explicit ``httpx.Client``; when omitted the shared pool is used.
    headers:
        Extra headers merged over the defaults.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        method: str = "POST",
        client: Optional[httpx.Client] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._client = client if client is not None else get_httpx_client(base_url, purpose="probe")
        self._method = method.upper()
        self._headers = {**_DEFAULT_HEADERS, **(headers or {})}
        self._logger = get_logger("pathbench.probe")

    @property
    def method(self) -> str:
        return self._method

    def probe(self, endpoint: Endpoint) -> Sample:
        """Issue one call to ``endpoint`` and return its timing sample.

        Raises
        ------
        ProbeError
            On transport failure, non-success status or unparsable body.
        """
        try:
            started = time.perf_counter()
            response = self._client.request(self._method, endpoint.url, headers=self._headers)
            # ``request`` has already read the body; the clock covers it.
            round_trip_ms = (time.perf_counter() - started) * 1000.0
        except httpx.HTTPError as exc:
            raise self._failed(endpoint, str(exc) or type(exc).__name__, classify_exception(exc), raw=exc) from exc

        if not response.is_success:
            raise self._failed(
                endpoint,
                self._error_message(response),
                code_for_status(response.status_code),
                status_code=response.status_code,
            )
        return self._to_sample(endpoint, response, round_trip_ms)

    def _to_sample(self, endpoint: Endpoint, response: httpx.Response, round_trip_ms: float) -> Sample:
        try:
            body = ProbeSuccessBody.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise self._failed(
                endpoint,
                f"unparsable response body: {exc}",
                ErrorCode.MALFORMED_BODY,
                status_code=response.status_code,
                raw=exc,
            ) from exc

        timings = parse_server_timing(response.headers.get("Server-Timing"))
        inner = body.query_latency if body.query_latency is not None else timings.get("db")
        if inner is None:
            raise self._failed(
                endpoint,
                "response carries no queryLatency",
                ErrorCode.MALFORMED_BODY,
                status_code=response.status_code,
            )
        api_ms = body.api_processing_time if body.api_processing_time is not None else timings.get("api")
        return Sample(
            endpoint_tag=endpoint.tag,
            round_trip_ms=round_trip_ms,
            inner_latency_ms=float(inner),
            api_processing_ms=api_ms,
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the endpoint's ``error`` field; fall back to the status line."""
        fallback = f"HTTP {response.status_code} {response.reason_phrase}".strip()
        try:
            body = ProbeErrorBody.model_validate(response.json())
        except (ValueError, ValidationError):
            return fallback
        return body.error or fallback

    def _failed(
        self,
        endpoint: Endpoint,
        cause: str,
        code: ErrorCode,
        *,
        status_code: Optional[int] = None,
        raw: Optional[BaseException] = None,
    ) -> ProbeError:
        normalized_log_event(
            self._logger,
            "probe.error",
            phase="probe",
            error_code=code.value,
            endpoint=endpoint.tag,
            status_code=status_code,
            cause=cause,
        )
        return ProbeError(endpoint=endpoint.tag, cause=cause, code=code, status_code=status_code, raw=raw)


__all__ = ["HttpProbeClient", "parse_server_timing"]
