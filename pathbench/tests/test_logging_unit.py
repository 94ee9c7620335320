"""Focused tests for pathbench.base.logging.

Covers:
- _parse_level string parsing
- normalized_log_event required keys and extra-field precedence
- configure_logger file handler attach/detach
- JsonFormatter hoisting of JSON messages
- console handler recovery after its stream is closed
- configure_logger level surviving later get_logger calls
"""
from __future__ import annotations

import io
import json
import logging

from pathbench.base.log_support import JsonFormatter, LogContext
from pathbench.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        self.messages.append(record.getMessage())


def _capture(name: str) -> _ListHandler:
    logger = get_logger(name)
    handler = _ListHandler()
    logger.handlers[:] = [handler]
    return handler


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_prefixes_base_name():
    assert get_logger("sampler").name == f"{BASE_LOGGER_NAME}.sampler"  # nosec B101
    assert get_logger("pathbench.probe").name == "pathbench.probe"  # nosec B101


def test_normalized_log_event_emits_required_keys():
    handler = _capture("tests.logging.normalized")
    ctx = LogContext(run_id="r1", endpoint_a="private", endpoint_b="public")

    normalized_log_event(
        get_logger("tests.logging.normalized"),
        "benchmark.failed",
        ctx,
        phase="finalize",
        round_number=7,
        error_code="timeout",
        structured=False,
        endpoint="public",
        skipped=None,
    )

    payload = json.loads(handler.messages[-1])
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload  # nosec B101
    assert payload["event"] == "benchmark.failed"  # nosec B101
    assert payload["round"] == 7 and payload["run_id"] == "r1"  # nosec B101
    assert payload["endpoint"] == "public" and payload["structured"] is True  # nosec B101
    assert "skipped" not in payload  # nosec B101


def test_normalized_log_event_without_error_omits_code_and_keeps_base_keys():
    handler = _capture("tests.logging.noerror")

    normalized_log_event(get_logger("tests.logging.noerror"), "benchmark.start", phase="start", round="x")

    payload = json.loads(handler.messages[-1])
    assert "error_code" not in payload  # nosec B101
    assert payload["round"] is None and payload["phase"] == "start"  # nosec B101


def test_log_event_drops_none_unless_kept():
    handler = _capture("tests.logging.none")
    logger = get_logger("tests.logging.none")

    log_event(logger, "e1", a=None, b=1)
    log_event(logger, "e2", keep_none=True, a=None)

    assert json.loads(handler.messages[0]) == {"event": "e1", "b": 1}  # nosec B101
    assert json.loads(handler.messages[1]) == {"event": "e2", "a": None}  # nosec B101


def test_log_context_for_round_copies():
    ctx = LogContext(run_id="r", extra={"k": "v"})
    bound = ctx.for_round(3)
    bound.extra["k2"] = "v2"
    assert ctx.round_index is None and "k2" not in ctx.extra  # nosec B101
    assert bound.to_dict() == {"run_id": "r", "round_index": 3, "k": "v", "k2": "v2"}  # nosec B101


def test_json_formatter_hoists_message_keys():
    record = logging.LogRecord("pathbench.x", logging.INFO, __file__, 1, json.dumps({"event": "e"}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e" and out["level"] == "INFO"  # nosec B101
    assert out["logger"] == "pathbench.x"  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "bench.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        assert logger.level == logging.DEBUG  # nosec B101
        log_event(get_logger("tests.logging.file"), "file.event", n=1)
        files = [h for h in logger.handlers if getattr(h, "baseFilename", None) == str(path)]
        assert len(files) == 1  # nosec B101
        files[0].flush()
        assert "file.event" in path.read_text(encoding="utf-8")  # nosec B101
    finally:
        configure_logger(level="INFO", file_path=None)
    assert not [h for h in logger.handlers if getattr(h, "baseFilename", None)]  # nosec B101


def _console_handlers() -> list:
    return [h for h in logging.getLogger(BASE_LOGGER_NAME).handlers if getattr(h, "_pathbench_console_handler", False)]


def test_closed_console_stream_is_replaced(endpoints, scripted_client):
    from pathbench.service.benchmark import run_comparison

    get_logger()
    dead = io.StringIO()
    for handler in _console_handlers():
        handler.setStream(dead)
    dead.close()

    a, b = endpoints
    outcome = run_comparison(scripted_client([1.0] * 3, [2.0] * 3), a, b, round_count=3)

    assert outcome.ok  # nosec B101
    handlers = _console_handlers()
    assert len(handlers) == 1 and not handlers[0].stream.closed  # nosec B101


def test_configured_level_survives_get_logger():
    configure_logger(level="DEBUG")
    get_logger("tests.logging.level")
    base = logging.getLogger(BASE_LOGGER_NAME)
    assert base.level == logging.DEBUG  # nosec B101
    assert all(h.level == logging.DEBUG for h in _console_handlers())  # nosec B101

    configure_logger(level="ERROR")
    get_logger("tests.logging.level", level=logging.INFO)
    assert base.level == logging.ERROR  # nosec B101


def test_env_level_overrides_configured_level(monkeypatch):
    configure_logger(level="ERROR")
    monkeypatch.setenv("PATHBENCH_LOG_LEVEL", "debug")
    get_logger("tests.logging.env")
    assert logging.getLogger(BASE_LOGGER_NAME).level == logging.DEBUG  # nosec B101
