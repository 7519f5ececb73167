"""Token-level matchers.

Every primitive is built on ``satisfy``, the single point where the engine
reads from the token cache (and, through it, from the producer).
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable
from typing import Any

from monadparse.protocols import Combinator
from monadparse.state import NO_MATCH, NoMatch, ParseState, Success
from monadparse.tokens import EOF


def satisfy(predicate: Callable[[Hashable | None], bool]) -> Combinator:
    """Match one token whose class satisfies predicate.

    On a match the result is the token's value and the state moves past the
    token. Otherwise the outcome is ``NO_MATCH`` and the caller's state is
    still good for another branch. Matching the end-of-stream token leaves
    the position where it is.

    Args:
        predicate: Test applied to the current token's class

    Returns:
        Combinator consuming at most one token

    """

    def _satisfy(state: ParseState) -> Success | NoMatch:
        token = state.current()
        if predicate(token.cls):
            return Success(token.value, state.advance())
        return NO_MATCH

    return _satisfy


def any_token() -> Combinator:
    """Match any token except end-of-stream."""
    return satisfy(lambda cls: cls is not EOF)


def eof() -> Combinator:
    """Match only at end-of-stream."""
    return satisfy(lambda cls: cls is EOF)


def is_(
    cls: Hashable,
    test: Callable[[Any, Any], bool] = operator.eq,
) -> Combinator:
    """Match a token of class cls.

    Args:
        cls: Expected token class
        test: Equivalence called as ``test(current_class, cls)``; pass e.g.
            a case-insensitive comparison to loosen matching

    Example:
        >>> keyword = is_("BEGIN", lambda a, b: str(a).lower() == str(b).lower())

    """
    return satisfy(lambda current: test(current, cls))


def lookahead(p: Combinator) -> Combinator:
    """Run p and succeed with its result without consuming input."""

    def _lookahead(state: ParseState) -> Success | NoMatch:
        outcome = p(state)
        if not outcome:
            return NO_MATCH
        return Success(outcome.value, state)

    return _lookahead


def not_followed_by(p: Combinator) -> Combinator:
    """Succeed with None, consuming nothing, only when p does not match."""

    def _not_followed_by(state: ParseState) -> Success | NoMatch:
        if p(state):
            return NO_MATCH
        return Success(None, state)

    return _not_followed_by


__all__ = [
    "any_token",
    "eof",
    "is_",
    "lookahead",
    "not_followed_by",
    "satisfy",
]
