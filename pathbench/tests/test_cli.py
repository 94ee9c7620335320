"""CLI behaviour with an injected scripted probe client (no network)."""
from __future__ import annotations

import json
import signal

import pytest

from pathbench.base.cancellation import CancellationToken
from pathbench.base.errors import ConfigError, InsufficientSamplesError, ProbeError, RoundError
from pathbench.base.models import Endpoint, RunOutcome, RunStatus
from pathbench.mock import ScriptedProbeClient
from pathbench.service.cli import main
from pathbench.service.cli.cli_actions import (
    EXIT_CANCELLED,
    EXIT_CONFIG,
    EXIT_FAILED,
    EXIT_OK,
    cancel_on_sigint,
    exit_code_for,
    handle_run,
)
from pathbench.service.cli.cli_parser import build_parser

A = Endpoint("private", "/api/compare-latency")
B = Endpoint("public", "/api/compare-latency-public")


def _factory(private, public):
    seen = {}

    def _build(cfg):
        seen["cfg"] = cfg
        return ScriptedProbeClient({cfg.private.tag: private, cfg.public.tag: public})

    _build.seen = seen
    return _build


def test_run_text_output_and_progress(capsys):
    args = build_parser().parse_args(["run", "--rounds", "3", "--base-url", "http://bench.test/"])
    factory = _factory([(10.0, 2.0)] * 3, [(5.0, 1.0)] * 3)

    code = handle_run(args, probe_client_factory=factory)

    out, err = capsys.readouterr()
    assert code == EXIT_OK  # nosec B101 - pytest assert in tests
    assert factory.seen["cfg"].base_url == "http://bench.test"  # nosec B101 - pytest assert in tests
    assert "Running Test (1/3)..." in err and "Running Test (3/3)..." in err  # nosec B101
    assert out.startswith("Results (2 samples per endpoint")  # nosec B101 - pytest assert in tests
    assert "Server <-> Database" in out and "Round-Trip Time" in out  # nosec B101
    assert "(+50.0%) 5.00ms" in out  # nosec B101 - pytest assert in tests
    assert "Winner: public (50.0% lower average round-trip time)" in out  # nosec B101


def test_run_json_output(capsys):
    args = build_parser().parse_args(["run", "--rounds", "2", "--json"])
    code = handle_run(args, probe_client_factory=_factory([4.0, 4.0], [8.0, 8.0]))

    out, _ = capsys.readouterr()
    data = json.loads(out)
    assert code == EXIT_OK  # nosec B101 - pytest assert in tests
    assert data["status"] == "succeeded"  # nosec B101 - pytest assert in tests
    assert data["comparisons"]["round_trip"]["winner"] == "a"  # nosec B101 - pytest assert in tests


def test_run_probe_failure_exit_code(capsys):
    args = build_parser().parse_args(["run", "--rounds", "3"])
    failing = [1.0, ProbeError(endpoint="private", cause="boom"), 1.0]
    code = handle_run(args, probe_client_factory=_factory(failing, [1.0] * 3))

    out, err = capsys.readouterr()
    assert code == EXIT_FAILED  # nosec B101 - pytest assert in tests
    assert out == ""  # nosec B101 - pytest assert in tests
    assert "Error: round 2 failed on private" in err  # nosec B101 - pytest assert in tests


def test_insufficient_rounds_exit_code(capsys):
    args = build_parser().parse_args(["run", "--rounds", "1", "--json"])
    code = handle_run(args, probe_client_factory=_factory([1.0], [1.0]))

    data = json.loads(capsys.readouterr().out)
    assert code == EXIT_CONFIG  # nosec B101 - pytest assert in tests
    assert data["error"]["code"] == "insufficient_samples"  # nosec B101 - pytest assert in tests


def test_main_rejects_zero_rounds_before_probing(capsys):
    code = main(["--rounds", "0", "--json"])

    data = json.loads(capsys.readouterr().out)
    assert code == EXIT_CONFIG  # nosec B101 - pytest assert in tests
    assert data["status"] == "failed"  # nosec B101 - pytest assert in tests
    assert data["error"]["code"] == "config"  # nosec B101 - pytest assert in tests


def test_bad_config_file_exit_code(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("PATHBENCH_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    args = build_parser().parse_args(["run"])
    code = handle_run(args, probe_client_factory=_factory([], []))

    err = capsys.readouterr().err
    assert code == EXIT_CONFIG  # nosec B101 - pytest assert in tests
    assert json.loads(err)["error"]["code"] == "config"  # nosec B101 - pytest assert in tests


def test_non_integer_rounds_flag_is_a_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["run", "--rounds", "many"])
    assert info.value.code == 2  # nosec B101 - pytest assert in tests


def _outcome(status, error=None):
    return RunOutcome(status=status, run_id="r", round_count=3, endpoint_a=A, endpoint_b=B, error=error)


@pytest.mark.parametrize(
    "outcome, expected",
    [
        (_outcome(RunStatus.SUCCEEDED), EXIT_OK),
        (_outcome(RunStatus.CANCELLED), EXIT_CANCELLED),
        (_outcome(RunStatus.FAILED, ConfigError("bad")), EXIT_CONFIG),
        (_outcome(RunStatus.FAILED, InsufficientSamplesError(round_count=1)), EXIT_CONFIG),
        (
            _outcome(RunStatus.FAILED, RoundError(0, "private", ProbeError(endpoint="private", cause="x"))),
            EXIT_FAILED,
        ),
    ],
)
def test_exit_code_for(outcome, expected):
    assert exit_code_for(outcome) == expected  # nosec B101 - pytest assert in tests


def test_sigint_cancels_token_and_restores_handler():
    token = CancellationToken()
    before = signal.getsignal(signal.SIGINT)
    with cancel_on_sigint(token):
        handler = signal.getsignal(signal.SIGINT)
        handler(signal.SIGINT, None)
    assert token.cancelled and token.reason == "interrupted"  # nosec B101 - pytest assert in tests
    assert signal.getsignal(signal.SIGINT) is before  # nosec B101 - pytest assert in tests


def test_serve_passes_flags_to_uvicorn(monkeypatch):
    import uvicorn

    calls = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, **kw: calls.update(app=app, **kw))
    monkeypatch.setenv("PATHBENCH_SERVICE_PORT", "9000")

    assert main(["serve", "--host", "0.0.0.0"]) == EXIT_OK  # nosec B101 - pytest assert in tests
    assert calls == {  # nosec B101 - pytest assert in tests
        "app": "pathbench.service.app:app",
        "host": "0.0.0.0",  # nosec B104 - test value only
        "port": 9000,
        "reload": False,
    }


def test_log_level_debug_emits_round_events(capsys):
    args = build_parser().parse_args(["run", "--rounds", "3", "--log-level", "DEBUG"])
    code = handle_run(args, probe_client_factory=_factory([1.0] * 3, [2.0] * 3))

    err = capsys.readouterr().err
    assert code == EXIT_OK  # nosec B101 - pytest assert in tests
    assert err.count('"event": "benchmark.round"') == 3  # nosec B101 - pytest assert in tests


def test_log_level_error_silences_info_events(capsys):
    args = build_parser().parse_args(["run", "--rounds", "3", "--log-level", "ERROR"])
    code = handle_run(args, probe_client_factory=_factory([1.0] * 3, [2.0] * 3))

    err = capsys.readouterr().err
    assert code == EXIT_OK  # nosec B101 - pytest assert in tests
    assert "benchmark.start" not in err and "benchmark.finalize" not in err  # nosec B101


def test_log_file_receives_debug_events(tmp_path, capsys):
    log_path = tmp_path / "run.log"
    args = build_parser().parse_args(
        ["run", "--rounds", "2", "--log-level", "DEBUG", "--log-file", str(log_path)]
    )
    assert handle_run(args, probe_client_factory=_factory([1.0] * 2, [2.0] * 2)) == EXIT_OK  # nosec B101

    text = log_path.read_text(encoding="utf-8")
    assert "benchmark.round" in text and "benchmark.finalize" in text  # nosec B101
