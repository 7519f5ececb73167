"""Protocols for monadparse.

Defines the contracts for token producers and combinators.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from monadparse.state import NoMatch, ParseState, Success


class TokenProducer(Protocol):
    """Protocol for the external token source.

    Thread Safety:
        A producer is called from a single parse run only.

    """

    def __call__(self) -> tuple[Hashable | None, Any]:
        """Return the next ``(class, value)`` pair.

        Returns ``(EOF, value)`` once exhausted, and must keep doing so if
        called again.
        """
        ...


class Combinator(Protocol):
    """Protocol for combinators: a ParseState in, an outcome out."""

    def __call__(self, state: ParseState) -> Success | NoMatch:
        """Run against state.

        Returns ``Success`` on a match or ``NO_MATCH`` on a soft failure.
        Hard failures are raised as ``ParseError``.
        """
        ...
