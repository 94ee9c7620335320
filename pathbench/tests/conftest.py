"""Pytest configuration for the pathbench test suite.

Keeps tests hermetic: ``PATHBENCH_*`` environment variables from the
developer's shell are cleared, and pooled HTTP clients are closed after each
test so no connection state leaks between tests. The shared logger is put
back to INFO without a file handler.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterator, Mapping, Sequence

import pytest

from pathbench.base.http import close_all_clients
from pathbench.base.logging import configure_logger
from pathbench.base.models import Endpoint
from pathbench.mock import ScriptedProbeClient

PRIVATE = Endpoint(tag="private", url="/api/compare-latency")
PUBLIC = Endpoint(tag="public", url="/api/compare-latency-public")


@pytest.fixture(autouse=True)
def clean_pathbench_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove ``PATHBENCH_*`` variables for the duration of a test."""
    for name in list(os.environ):
        if name.startswith("PATHBENCH_"):
            monkeypatch.delenv(name, raising=False)
    yield
    close_all_clients()
    configure_logger(level=logging.INFO, file_path=None)


@pytest.fixture()
def endpoints() -> tuple[Endpoint, Endpoint]:
    """The private/public endpoint pair used across tests."""
    return PRIVATE, PUBLIC


@pytest.fixture()
def scripted_client() -> Callable[..., ScriptedProbeClient]:
    """Factory building a ``ScriptedProbeClient`` for the private/public pair."""

    def _build(
        private: Sequence, public: Sequence, *, delay_seconds: float = 0.0
    ) -> ScriptedProbeClient:
        script: Mapping[str, Sequence] = {PRIVATE.tag: private, PUBLIC.tag: public}
        return ScriptedProbeClient(script, delay_seconds=delay_seconds)

    return _build
