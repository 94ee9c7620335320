"""Unified configuration layer for benchmark runs.

Goals
-----
* Centralize defaults (round count, endpoint paths, base URL, method).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``PATHBENCH_CONFIG_FILE``
    3. Environment variables
    4. In-code overrides passed to :func:`get_bench_config`

Environment Variables
---------------------
PATHBENCH_BASE_URL, PATHBENCH_PRIVATE_URL, PATHBENCH_PUBLIC_URL,
PATHBENCH_ROUNDS, PATHBENCH_METHOD

External Config File
--------------------
```
base_url: https://my-app.up.railway.app
rounds: 21
private:
  url: /api/compare-latency
public:
  url: /api/compare-latency-public
```

Public API
----------
* get_bench_config(overrides: dict | None = None) -> BenchConfig
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.errors import ConfigError
from ..base.models import Endpoint
from .defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_PRIVATE_PATH,
    DEFAULT_PRIVATE_TAG,
    DEFAULT_PROBE_METHOD,
    DEFAULT_PUBLIC_PATH,
    DEFAULT_PUBLIC_TAG,
    DEFAULT_ROUND_COUNT,
)


@dataclass(frozen=True)
class BenchConfig:
    """Resolved settings for one comparison run."""

    base_url: Optional[str]
    private: Endpoint
    public: Endpoint
    rounds: int
    method: str


DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "rounds": DEFAULT_ROUND_COUNT,
    "method": DEFAULT_PROBE_METHOD,
    "private_url": DEFAULT_PRIVATE_PATH,
    "public_url": DEFAULT_PUBLIC_PATH,
    "private_tag": DEFAULT_PRIVATE_TAG,
    "public_tag": DEFAULT_PUBLIC_TAG,
}

ENV_FIELD_MAP = {
    "base_url": "PATHBENCH_BASE_URL",
    "private_url": "PATHBENCH_PRIVATE_URL",
    "public_url": "PATHBENCH_PUBLIC_URL",
    "rounds": "PATHBENCH_ROUNDS",
    "method": "PATHBENCH_METHOD",
}


def _load_external_config() -> Dict[str, Any]:
    """Read ``PATHBENCH_CONFIG_FILE`` (JSON first, then YAML) into flat keys.

    Raises
    ------
    ConfigError
        If the file is set but missing or does not contain a mapping.
    """
    path = os.getenv("PATHBENCH_CONFIG_FILE")
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        raise ConfigError(f"config file not found: {p}")
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"config file {p} is neither JSON nor YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config file {p} must contain a mapping")
    flat: Dict[str, Any] = {k: v for k, v in data.items() if k in ("base_url", "rounds", "method")}
    for side in ("private", "public"):
        section = data.get(side)
        if isinstance(section, dict):
            if "url" in section:
                flat[f"{side}_url"] = section["url"]
            if "tag" in section:
                flat[f"{side}_tag"] = section["tag"]
        elif isinstance(section, str):
            flat[f"{side}_url"] = section
    return flat


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        val = os.getenv(env_name)
        if val is not None and val.strip():
            out[field] = val.strip()
    return out


def _coerce_rounds(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"rounds must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"rounds must be an integer, got {value!r}") from exc


def get_bench_config(overrides: Optional[Dict[str, Any]] = None) -> BenchConfig:
    """Return merged configuration for a run.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` override values are ignored so CLI flags left unset fall through.

    Raises
    ------
    ConfigError
        If the config file is unreadable or ``rounds`` is not an integer.
        Range checks on the round count are left to the orchestrator.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    base_url = cfg.get("base_url") or None
    return BenchConfig(
        base_url=str(base_url).rstrip("/") if base_url else None,
        private=Endpoint(tag=str(cfg["private_tag"]), url=str(cfg["private_url"])),
        public=Endpoint(tag=str(cfg["public_tag"]), url=str(cfg["public_url"])),
        rounds=_coerce_rounds(cfg["rounds"]),
        method=str(cfg["method"]).upper(),
    )


__all__ = ["BenchConfig", "get_bench_config", "DEFAULTS", "ENV_FIELD_MAP"]
