"""pathbench.config.defaults
=========================

Central place for small, stable default values used across the sampling
core, the CLI and the service layer. They can be overridden via environment
variables or an external configuration file.

This module intentionally avoids importing from other pathbench packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Run defaults ----
# Rounds per run including the discarded warm-up round.
DEFAULT_ROUND_COUNT = 11
# HTTP method used for probe calls.
DEFAULT_PROBE_METHOD = "POST"

# ---- Endpoints ----
# Tags identify the two routes in samples, errors and output.
DEFAULT_PRIVATE_TAG = "private"
DEFAULT_PUBLIC_TAG = "public"
# Paths resolved against the configured base URL.
DEFAULT_PRIVATE_PATH = "/api/compare-latency"
DEFAULT_PUBLIC_PATH = "/api/compare-latency-public"
# Base URL of the application exposing both probe endpoints.
DEFAULT_BASE_URL = "http://127.0.0.1:3000"

# ---- Service / HTTP layer ----
# Comma-separated list of allowed origins for the dev server.
PATHBENCH_SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"
PATHBENCH_SERVICE_DEFAULT_HOST = "127.0.0.1"
PATHBENCH_SERVICE_DEFAULT_PORT = 8092
