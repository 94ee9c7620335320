"""Paired result of one sampling round."""

from __future__ import annotations

from dataclasses import dataclass

from .sample import Sample


@dataclass(frozen=True)
class RoundResult:
    """Both samples of one round; a round never exists with only one side."""

    round_index: int
    sample_a: Sample
    sample_b: Sample

    def sample_for(self, side: str) -> Sample:
        """Return the sample for ``side`` (``"a"`` or ``"b"``)."""
        if side == "a":
            return self.sample_a
        if side == "b":
            return self.sample_b
        raise ValueError(f"unknown side '{side}'")


__all__ = ["RoundResult"]
