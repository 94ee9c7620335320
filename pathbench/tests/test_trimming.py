from __future__ import annotations

from pathbench.base.models import LatencySeries, RoundResult, Sample
from pathbench.service.trimming import trim_warmup


def _series(n: int) -> LatencySeries:
    return LatencySeries(
        rounds=tuple(
            RoundResult(
                round_index=i,
                sample_a=Sample("private", float(i), 0.5),
                sample_b=Sample("public", float(i) * 2, 1.5),
            )
            for i in range(n)
        )
    )


def test_trim_drops_only_the_first_round():
    series = _series(11)
    trimmed = trim_warmup(series)

    assert len(trimmed) == 10  # nosec B101 - pytest assert in tests
    assert list(trimmed) == list(series.rounds[1:])  # nosec B101 - pytest assert in tests
    assert [r.round_index for r in trimmed] == list(range(1, 11))  # nosec B101 - pytest assert in tests
    # input untouched
    assert len(series) == 11  # nosec B101 - pytest assert in tests


def test_trim_short_series_yields_empty_series():
    for n in (0, 1):
        trimmed = trim_warmup(_series(n))
        assert len(trimmed) == 0  # nosec B101 - pytest assert in tests
        assert trimmed.round_trips("a") == []  # nosec B101 - pytest assert in tests


def test_projections_follow_series_order():
    trimmed = trim_warmup(_series(4))
    assert trimmed.round_trips("a") == [1.0, 2.0, 3.0]  # nosec B101 - pytest assert in tests
    assert trimmed.round_trips("b") == [2.0, 4.0, 6.0]  # nosec B101 - pytest assert in tests
    assert trimmed.inner_latencies("b") == [1.5, 1.5, 1.5]  # nosec B101 - pytest assert in tests
