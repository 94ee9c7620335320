"""Probe endpoint identifier.

Defines :class:`Endpoint`, the immutable pairing of a short tag (used in
samples, errors and logs) with the URL the probe client calls. Kept separate
to enforce one-class-per-file governance.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    """One side of a paired comparison.

    Attributes:
        tag: Stable identifier for the route (e.g., ``"private"``).
        url: Absolute URL, or a path resolved against the probe client's
            base URL.
    """

    tag: str
    url: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.tag}({self.url})"


__all__ = ["Endpoint"]
