"""monadparse ParseAccumulator — opt-in profiling for parse runs.

This module provides accumulated metrics across ``parse`` calls:
- Total elapsed time
- Number of runs, successes and failures
- Tokens pulled from producers

Zero overhead when disabled (get_parse_accumulator() returns None).

Example:
    from monadparse import parse
    from monadparse.profiling import profiled_parse

    with profiled_parse() as metrics:
        parse(grammar, producer)

    print(metrics.summary())
    # {"total_ms": 0.2, "parse_calls": 1, "successes": 1, "failures": 0, "tokens_pulled": 4}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ParseAccumulator:
    """Accumulated metrics across parse runs.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: Number of parse() calls recorded.
        successes: Runs whose top-level combinator matched.
        failures: Runs ending in a soft or hard failure.
        tokens_pulled: Producer calls made by all recorded runs.

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    successes: int = 0
    failures: int = 0
    tokens_pulled: int = 0

    def record_parse(self, tokens_pulled: int, success: bool) -> None:
        """Record a parse call.

        Args:
            tokens_pulled: Number of producer calls made by the run.
            success: Whether the run matched.

        """
        self.parse_calls += 1
        self.tokens_pulled += tokens_pulled
        if success:
            self.successes += 1
        else:
            self.failures += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of parse metrics.

        Returns:
            Dict with total_ms, parse_calls, successes, failures, tokens_pulled.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "successes": self.successes,
            "failures": self.failures,
            "tokens_pulled": self.tokens_pulled,
        }


# Module-level ContextVar
_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Context manager for profiled parsing.

    Creates a ParseAccumulator and makes it available via
    get_parse_accumulator() for the duration of the with block.

    Yields:
        ParseAccumulator that will be populated during parse calls.

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
