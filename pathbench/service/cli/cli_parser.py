"""CLI parser construction for the pathbench command.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ...config.defaults import DEFAULT_ROUND_COUNT

SUBCOMMANDS = {"run", "serve"}


def _int_arg(value: str) -> int:
    """Parse an integer argument; range checks are left to the orchestrator."""
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``run`` and ``serve`` subcommands.
    """
    p = argparse.ArgumentParser(
        prog="pathbench", description="Compare private-path and public-path latency to the same backend"
    )
    sub = p.add_subparsers(dest="cmd")

    p_run = sub.add_parser("run", help="Run a paired latency comparison (default)")
    p_run.add_argument("--base-url", default=None, help="Base URL for relative endpoint paths")
    p_run.add_argument("--private", dest="private_url", default=None, help="Private-path endpoint URL or path")
    p_run.add_argument("--public", dest="public_url", default=None, help="Public-path endpoint URL or path")
    p_run.add_argument(
        "--rounds",
        type=_int_arg,
        default=None,
        help=f"Rounds including the discarded warm-up round (default {DEFAULT_ROUND_COUNT})",
    )
    p_run.add_argument("--method", default=None, help="HTTP method for probes (default POST)")
    p_run.add_argument("--json", action="store_true", help="Print the outcome as JSON")
    p_run.add_argument("--log-level", default=None, help="Log level for structured logs on stderr")
    p_run.add_argument("--log-file", default=None, help="Also write structured logs to this file")

    p_serve = sub.add_parser("serve", help="Start the HTTP service")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.add_argument("--reload", action="store_true")

    return p


__all__ = ["build_parser", "SUBCOMMANDS"]
