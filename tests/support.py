"""Test helpers shared across monadparse test modules."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any

from monadparse import producer_from_iterable


class CountingProducer:
    """Token producer that records how often it is called."""

    def __init__(self, pairs: Iterable[tuple[Hashable | None, Any]]) -> None:
        self._produce = producer_from_iterable(pairs)
        self.calls = 0

    def __call__(self) -> tuple[Hashable | None, Any]:
        self.calls += 1
        return self._produce()


def pairs_of(*classes: Hashable) -> list[tuple[Hashable, Any]]:
    """Tokens whose value repeats their class, e.g. pairs_of("a", ",")."""
    return [(cls, cls) for cls in classes]
