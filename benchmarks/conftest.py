"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def long_list_tokens() -> list[tuple[str, int | None]]:
    """A bracketed, comma-separated list of 10 000 numbers."""
    tokens: list[tuple[str, int | None]] = [("[", None)]
    for i in range(10_000):
        if i:
            tokens.append((",", None))
        tokens.append(("num", i))
    tokens.append(("]", None))
    return tokens


@pytest.fixture
def backtracking_tokens() -> list[tuple[str, int | None]]:
    """Statements that only the last of several alternatives accepts."""
    tokens: list[tuple[str, int | None]] = []
    for i in range(2_000):
        tokens.extend([("id", i), ("=", None), ("num", i), (";", None)])
    return tokens
