"""Sampling core and outer surfaces (CLI, HTTP service)."""

from .benchmark import run_comparison, summarize
from .comparator import compare, compare_pair, compare_statistics, percent_diff
from .sampler import PairedSampler
from .stats import compute_statistics, mean, median, p95
from .trimming import trim_warmup

__all__ = [
    "run_comparison",
    "summarize",
    "compare",
    "compare_pair",
    "compare_statistics",
    "percent_diff",
    "PairedSampler",
    "compute_statistics",
    "mean",
    "median",
    "p95",
    "trim_warmup",
]
