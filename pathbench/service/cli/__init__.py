"""pathbench CLI (package entrypoint).

Wires argument parsing to action handlers kept in small, focused modules. It
performs no benchmarking logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_run, handle_serve
from .cli_parser import SUBCOMMANDS, build_parser


def main(argv: Optional[list[str]] = None) -> int:
	"""CLI entrypoint.

	Parameters
	----------
	argv: Optional[list[str]]
		Argument vector; when ``None`` uses ``sys.argv[1:]``.

	Returns
	-------
	int
		Process exit code (0 success, non-zero on error or cancellation).
	"""
	p = build_parser()
	# Inject the default subcommand "run" when omitted.
	argv_list = list(sys.argv[1:] if argv is None else argv)
	if not argv_list or argv_list[0].startswith("-") or argv_list[0] not in SUBCOMMANDS:
		if argv_list[:1] not in (["-h"], ["--help"]):
			argv_list = ["run"] + argv_list
	args = p.parse_args(argv_list)

	if args.cmd == "serve":
		return handle_serve(args)
	return handle_run(args)


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
