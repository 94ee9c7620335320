"""CLI action handlers.

Purpose
-------
Subcommand handlers for the ``pathbench`` CLI, keeping the entrypoint thin.
This module has no top-level side effects and is safe to import in tests.

Exit Codes
----------
- ``0``: run succeeded
- ``1``: run failed (probe / round error)
- ``2``: configuration error or insufficient samples
- ``130``: run cancelled (SIGINT between rounds)

Cancellation
------------
While a run executes on the main thread, SIGINT requests cooperative
cancellation: the round in flight completes, no further round starts and the
run ends with the ``cancelled`` status.
"""

from __future__ import annotations

import argparse
import json
import signal
import sys
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from ...base.cancellation import CancellationToken
from ...base.errors import ConfigError, InsufficientSamplesError
from ...base.interfaces import ProbeClient
from ...base.logging import configure_logger
from ...base.models import RunOutcome, RunStatus
from ...config import BenchConfig, get_bench_config
from ...probe import HttpProbeClient
from ..benchmark import run_comparison
from .cli_utils import format_outcome, progress_printer

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2
EXIT_CANCELLED = 130

ProbeClientFactory = Callable[[BenchConfig], ProbeClient]


def default_probe_client(cfg: BenchConfig) -> ProbeClient:
    """Build the HTTP probe client for a resolved config."""
    return HttpProbeClient(base_url=cfg.base_url, method=cfg.method)


@contextmanager
def cancel_on_sigint(token: CancellationToken) -> Iterator[None]:
    """Route SIGINT to ``token.cancel`` for the duration of the block.

    Signal handlers can only be installed from the main thread; elsewhere the
    block runs without the handler.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handler(signum, frame):  # noqa: ARG001
        token.cancel("interrupted")

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def exit_code_for(outcome: RunOutcome) -> int:
    """Map a run outcome to a process exit code."""
    if outcome.status is RunStatus.SUCCEEDED:
        return EXIT_OK
    if outcome.status is RunStatus.CANCELLED:
        return EXIT_CANCELLED
    if isinstance(outcome.error, (ConfigError, InsufficientSamplesError)):
        return EXIT_CONFIG
    return EXIT_FAILED


def handle_run(
    args: argparse.Namespace,
    *,
    probe_client_factory: Optional[ProbeClientFactory] = None,
) -> int:
    """Execute the ``run`` subcommand.

    Parameters
    ----------
    args: argparse.Namespace
        Parsed CLI arguments.
    probe_client_factory: Optional[ProbeClientFactory]
        Injection point for the probe client (improves testability).

    Returns
    -------
    int
        Process exit code (see module docstring).
    """
    if args.log_level or args.log_file:
        configure_logger(level=args.log_level, file_path=args.log_file)
    try:
        cfg = get_bench_config(
            {
                "base_url": args.base_url,
                "private_url": args.private_url,
                "public_url": args.public_url,
                "rounds": args.rounds,
                "method": args.method,
            }
        )
    except ConfigError as exc:
        print(json.dumps({"error": exc.to_dict()}), file=sys.stderr)
        return EXIT_CONFIG

    factory = probe_client_factory or default_probe_client
    token = CancellationToken()
    with cancel_on_sigint(token):
        outcome = run_comparison(
            factory(cfg),
            cfg.private,
            cfg.public,
            round_count=cfg.rounds,
            on_progress=progress_printer(sys.stderr),
            cancel_token=token,
        )

    if args.json:
        print(json.dumps(outcome.to_dict(), indent=2))
    else:
        stream = sys.stdout if outcome.ok else sys.stderr
        print(format_outcome(outcome), file=stream)
    return exit_code_for(outcome)


def handle_serve(args: argparse.Namespace) -> int:
    """Execute the ``serve`` subcommand (blocks until the server stops)."""
    from ..dev_server import main as serve_main

    serve_main(host=args.host, port=args.port, reload=args.reload or None)
    return EXIT_OK


__all__ = [
    "handle_run",
    "handle_serve",
    "default_probe_client",
    "cancel_on_sigint",
    "exit_code_for",
    "EXIT_OK",
    "EXIT_FAILED",
    "EXIT_CONFIG",
    "EXIT_CANCELLED",
]
