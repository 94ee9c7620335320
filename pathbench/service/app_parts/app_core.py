from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from fastapi import HTTPException
from pydantic import BaseModel, Field

from pathbench.base.errors import ConfigError, InsufficientSamplesError
from pathbench.base.interfaces import ProbeClient
from pathbench.base.models import RunOutcome, RunStatus
from pathbench.config import BenchConfig, get_bench_config
from pathbench.probe import HttpProbeClient
from pathbench.service.benchmark import run_comparison

ProbeClientFactory = Callable[[BenchConfig], ProbeClient]


class RunBody(BaseModel):
    """Request body for a comparison run.

    Every field is optional; omitted values fall back to the resolved
    configuration (defaults, config file, environment).
    """

    rounds: Optional[int] = Field(default=None)
    base_url: Optional[str] = None
    private_url: Optional[str] = None
    public_url: Optional[str] = None
    method: Optional[str] = None


def get_probe_client_factory() -> ProbeClientFactory:
    """FastAPI dependency returning the probe client factory."""

    def _factory(cfg: BenchConfig) -> ProbeClient:
        return HttpProbeClient(base_url=cfg.base_url, method=cfg.method)

    return _factory


def _status_for(outcome: RunOutcome) -> int:
    if isinstance(outcome.error, ConfigError):
        return 400
    if isinstance(outcome.error, InsufficientSamplesError):
        return 422
    return 502


def _config_response(cfg: BenchConfig) -> Dict[str, Any]:
    return {
        "ok": True,
        "config": {
            "base_url": cfg.base_url,
            "rounds": cfg.rounds,
            "method": cfg.method,
            "private": {"tag": cfg.private.tag, "url": cfg.private.url},
            "public": {"tag": cfg.public.tag, "url": cfg.public.url},
        },
    }


def _resolve_config(body: Optional[RunBody]) -> BenchConfig:
    """Merge the request body over the configured defaults or raise a 400."""
    overrides = body.model_dump() if body is not None else {}
    try:
        return get_bench_config(overrides)
    except ConfigError as e:
        raise HTTPException(status_code=400, detail={"ok": False, "error": e.to_dict()}) from e


def _handle_run(body: Optional[RunBody], factory: ProbeClientFactory) -> Dict[str, Any]:
    """Run one comparison and map its outcome onto an HTTP response."""
    cfg = _resolve_config(body)
    outcome = run_comparison(factory(cfg), cfg.private, cfg.public, round_count=cfg.rounds)
    payload = {"ok": outcome.ok, **outcome.to_dict()}
    if outcome.status is RunStatus.SUCCEEDED:
        return payload
    raise HTTPException(status_code=_status_for(outcome), detail=payload)
