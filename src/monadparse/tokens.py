"""Token definitions and producer adapters for monadparse.

The engine never lexes. It reads opaque ``(class, value)`` pairs from a
caller-supplied producer: a zero-argument callable returning one pair per
call. The class ``EOF`` (``None``) marks the end of the stream.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
Producers built by ``producer_from_iterable`` wrap a single iterator and
belong to one parse run.

"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any

# End-of-stream token class. A producer returns (EOF, ...) once exhausted.
EOF: None = None


@dataclass(frozen=True, slots=True)
class Token:
    """A token read from the producer.

    Attributes:
        cls: Token class, compared by primitive matchers
        value: Payload, never inspected by the engine

    """

    cls: Hashable | None
    value: Any = None

    @classmethod
    def from_pair(cls, pair: tuple[Hashable | None, Any] | Token) -> Token:
        """Build a token from a producer's ``(class, value)`` pair."""
        if isinstance(pair, Token):
            return pair
        token_cls, value = pair
        return cls(token_cls, value)

    @property
    def is_eof(self) -> bool:
        """True for the end-of-stream token."""
        return self.cls is EOF

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.is_eof:
            return "Token(EOF)"
        val = repr(self.value)
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.cls!r}, {val})"


def producer_from_iterable(
    pairs: Iterable[tuple[Hashable | None, Any] | Token],
) -> Callable[[], tuple[Hashable | None, Any]]:
    """Adapt an iterable of pairs into a token producer.

    The returned callable yields one ``(class, value)`` pair per call and
    keeps returning ``(EOF, None)`` once the iterable is exhausted. A pair
    whose class is ``EOF`` ends the stream early.

    Args:
        pairs: ``(class, value)`` tuples or ``Token`` objects

    Returns:
        Zero-argument producer suitable for ``monadparse.parse``

    Example:
        >>> produce = producer_from_iterable([("num", 1)])
        >>> produce(), produce(), produce()
        (('num', 1), (None, None), (None, None))

    """
    iterator = iter(pairs)
    exhausted = False
    done = object()

    def produce() -> tuple[Hashable | None, Any]:
        nonlocal exhausted
        if exhausted:
            return (EOF, None)
        item = next(iterator, done)
        if item is done:
            exhausted = True
            return (EOF, None)
        token = Token.from_pair(item)
        if token.is_eof:
            exhausted = True
        return (token.cls, token.value)

    return produce


__all__ = [
    "EOF",
    "Token",
    "producer_from_iterable",
]
