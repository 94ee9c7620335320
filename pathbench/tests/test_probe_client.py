"""HTTP probe client against ``httpx.MockTransport`` (no real network)."""
from __future__ import annotations

import httpx
import pytest

from pathbench.base.errors import ErrorCode, ProbeError
from pathbench.base.models import Endpoint
from pathbench.probe import HttpProbeClient, parse_server_timing

ENDPOINT = Endpoint(tag="private", url="/api/compare-latency")


def _client(handler) -> HttpProbeClient:
    transport = httpx.MockTransport(handler)
    return HttpProbeClient(client=httpx.Client(base_url="http://bench.test", transport=transport))


def test_success_body_becomes_sample():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["cache"] = request.headers.get("cache-control")
        return httpx.Response(200, json={"queryLatency": 1.5, "apiProcessingTime": 2.25})

    sample = _client(handler).probe(ENDPOINT)

    assert sample.endpoint_tag == "private"  # nosec B101 - pytest assert in tests
    assert sample.inner_latency_ms == 1.5  # nosec B101 - pytest assert in tests
    assert sample.api_processing_ms == 2.25  # nosec B101 - pytest assert in tests
    assert sample.round_trip_ms >= 0  # nosec B101 - pytest assert in tests
    assert seen == {  # nosec B101 - pytest assert in tests
        "method": "POST",
        "url": "http://bench.test/api/compare-latency",
        "cache": "no-store",
    }


def test_server_timing_header_fills_missing_body_fields():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={}, headers={"Server-Timing": "db;dur=3.25, api;dur=4.50"})

    sample = _client(handler).probe(ENDPOINT)
    assert sample.inner_latency_ms == 3.25  # nosec B101 - pytest assert in tests
    assert sample.api_processing_ms == 4.5  # nosec B101 - pytest assert in tests


def test_error_status_uses_error_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "database unreachable"})

    with pytest.raises(ProbeError) as info:
        _client(handler).probe(ENDPOINT)

    err = info.value
    assert err.endpoint == "private" and err.status_code == 500  # nosec B101 - pytest assert in tests
    assert err.cause == "database unreachable"  # nosec B101 - pytest assert in tests
    assert err.code is ErrorCode.SERVER_ERROR  # nosec B101 - pytest assert in tests


def test_error_status_without_json_falls_back_to_status_line():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="<html>down</html>")

    with pytest.raises(ProbeError) as info:
        _client(handler).probe(ENDPOINT)

    assert info.value.cause == "HTTP 503 Service Unavailable"  # nosec B101 - pytest assert in tests
    assert info.value.code is ErrorCode.UNAVAILABLE  # nosec B101 - pytest assert in tests


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json=[1, 2, 3]),
        httpx.Response(200, json={"queryLatency": "fast"}),
        httpx.Response(200, json={"queryLatency": -1}),
        httpx.Response(200, json={"apiProcessingTime": 1.0}),
    ],
)
def test_unparsable_success_body_is_a_probe_error(response):
    with pytest.raises(ProbeError) as info:
        _client(lambda request: response).probe(ENDPOINT)
    assert info.value.code is ErrorCode.MALFORMED_BODY  # nosec B101 - pytest assert in tests


@pytest.mark.parametrize(
    "exc_type, code",
    [
        (httpx.ConnectError, ErrorCode.UNAVAILABLE),
        (httpx.ReadTimeout, ErrorCode.TIMEOUT),
        (httpx.RemoteProtocolError, ErrorCode.TRANSIENT),
    ],
)
def test_transport_errors_are_classified(exc_type, code):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("boom", request=request)

    with pytest.raises(ProbeError) as info:
        _client(handler).probe(ENDPOINT)

    assert info.value.code is code  # nosec B101 - pytest assert in tests
    assert isinstance(info.value.raw, exc_type)  # nosec B101 - pytest assert in tests


def test_custom_method_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["token"] = request.headers.get("x-bench")
        return httpx.Response(200, json={"queryLatency": 0.0})

    transport = httpx.MockTransport(handler)
    client = HttpProbeClient(
        client=httpx.Client(base_url="http://bench.test", transport=transport),
        method="get",
        headers={"X-Bench": "1"},
    )
    client.probe(ENDPOINT)
    assert seen == {"method": "GET", "token": "1"}  # nosec B101 - pytest assert in tests


def test_parse_server_timing():
    assert parse_server_timing("db;dur=1.20, api;dur=2.5") == {"db": 1.2, "api": 2.5}  # nosec B101
    assert parse_server_timing('cache;desc="hit", db;dur="0.75"') == {"db": 0.75}  # nosec B101
    assert parse_server_timing("db;dur=abc") == {}  # nosec B101
    assert parse_server_timing(None) == {}  # nosec B101
