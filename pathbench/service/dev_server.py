from __future__ import annotations

import os
from typing import Optional

import uvicorn

from pathbench.config.defaults import PATHBENCH_SERVICE_DEFAULT_HOST, PATHBENCH_SERVICE_DEFAULT_PORT


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to a sane default."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main(host: Optional[str] = None, port: Optional[int] = None, reload: Optional[bool] = None) -> None:
    """Start the development server for the pathbench FastAPI app.

    Explicit arguments win over the environment:

    - PATHBENCH_SERVICE_HOST: interface to bind (default "127.0.0.1")
    - PATHBENCH_SERVICE_PORT: port to bind (default 8092)
    - PATHBENCH_SERVICE_RELOAD: "true"/"false" to toggle auto-reload (default false)
    """
    host = host or os.getenv("PATHBENCH_SERVICE_HOST", PATHBENCH_SERVICE_DEFAULT_HOST)
    port = port or _parse_port(os.getenv("PATHBENCH_SERVICE_PORT"), PATHBENCH_SERVICE_DEFAULT_PORT)
    if reload is None:
        reload = os.getenv("PATHBENCH_SERVICE_RELOAD", "false").lower() == "true"

    uvicorn.run(
        "pathbench.service.app:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
