"""Shared fixtures for monadparse tests."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any

import pytest
from support import CountingProducer, pairs_of

from monadparse import ParseState, initial_state, reset_parse_config


@pytest.fixture
def producer() -> Callable[..., CountingProducer]:
    """Factory for counting producers over (class, value) pairs."""
    return CountingProducer


@pytest.fixture
def state_of() -> Callable[..., ParseState]:
    """Factory for an initial state over token classes."""

    def make(*classes: Hashable, user_data: Any = None) -> ParseState:
        return initial_state(CountingProducer(pairs_of(*classes)), user_data)

    return make


@pytest.fixture(autouse=True)
def _reset_config() -> Iterator[None]:
    """Keep tests from leaking ContextVar config into each other."""
    yield
    reset_parse_config()
