"""Rendering helpers for CLI output.

- ``format_outcome(outcome)``: human-readable comparison tables.
- ``progress_printer(stream)``: progress callback writing
  ``Running Test (i/n)...`` lines.
"""

from __future__ import annotations

from typing import Callable, List, TextIO

from ...base.models import ComparisonResult, RunOutcome, RunStatus, StatisticComparison

_METRIC_TITLES = {
    "inner_latency": "Server <-> Database",
    "round_trip": "Round-Trip Time",
}
_STAT_LABELS = {"mean": "Average", "median": "Median", "p95": "p95"}


def progress_printer(stream: TextIO) -> Callable[[int, int], None]:
    """Return a progress callback that writes one line per completed round."""

    def _print(current: int, total: int) -> None:
        stream.write(f"Running Test ({current}/{total})...\n")
        stream.flush()

    return _print


def _cell(value: float, comparison: StatisticComparison, side: str) -> str:
    text = f"{value:.2f}ms"
    if comparison.winner == side and comparison.percent_diff is not None:
        text = f"(+{abs(comparison.percent_diff):.1f}%) {text}"
    return text


def _metric_lines(result: ComparisonResult, tag_a: str, tag_b: str) -> List[str]:
    lines = [
        _METRIC_TITLES.get(result.metric, result.metric),
        f"  {'':<8} {tag_a:>20} {tag_b:>20}",
    ]
    for name, comparison in result.by_statistic.items():
        lines.append(
            f"  {_STAT_LABELS.get(name, name):<8} "
            f"{_cell(comparison.value_a, comparison, 'a'):>20} "
            f"{_cell(comparison.value_b, comparison, 'b'):>20}"
        )
    return lines


def format_outcome(outcome: RunOutcome) -> str:
    """Render a run outcome for terminal display."""
    tag_a, tag_b = outcome.endpoint_a.tag, outcome.endpoint_b.tag
    if outcome.status is RunStatus.CANCELLED:
        return f"Cancelled: {outcome.cancel_reason or 'run cancelled'}"
    if outcome.status is RunStatus.FAILED:
        return f"Error: {outcome.error}"
    lines: List[str] = [f"Results ({len(outcome.series)} samples per endpoint, warm-up round discarded)"]
    for metric in ("inner_latency", "round_trip"):
        result = outcome.comparisons.get(metric)
        if result is None:
            continue
        lines.append("")
        lines.extend(_metric_lines(result, tag_a, tag_b))
    headline = outcome.comparisons.get("round_trip")
    if headline is not None:
        lines.append("")
        if headline.winner is None:
            lines.append("Winner: none (tie on average round-trip time)")
        else:
            winner_tag = tag_a if headline.winner == "a" else tag_b
            lines.append(f"Winner: {winner_tag} ({headline.percent_diff:.1f}% lower average round-trip time)")
    return "\n".join(lines)


__all__ = ["format_outcome", "progress_printer"]
