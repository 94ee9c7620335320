from __future__ import annotations

import os
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathbench.config.defaults import PATHBENCH_SERVICE_CORS_DEFAULT_ORIGINS

from .app_parts.app_core import (
    ProbeClientFactory,
    RunBody,
    _config_response,
    _handle_run,
    _resolve_config,
    get_probe_client_factory,
)


app = FastAPI(title="pathbench", version="0.1.0")


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

cors_origins_env = os.getenv("PATHBENCH_SERVICE_CORS_ORIGINS", PATHBENCH_SERVICE_CORS_DEFAULT_ORIGINS)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> Dict[str, Any]:
    """Check the health status of the service."""
    return {"ok": True}


@app.get("/api/config")
def get_config() -> Dict[str, Any]:
    """Return the resolved run configuration (defaults, file and environment)."""
    return _config_response(_resolve_config(None))


@app.post("/api/compare-latency/run")
def post_run(
    body: Optional[RunBody] = None,
    factory: ProbeClientFactory = Depends(get_probe_client_factory),
) -> Dict[str, Any]:
    """Run a paired latency comparison and return the outcome.

    Failed runs answer 400 (configuration), 422 (insufficient samples) or 502
    (probe failure) with the structured outcome as ``detail``.
    """
    return _handle_run(body, factory)
