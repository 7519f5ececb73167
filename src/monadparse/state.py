"""Parse state and combinator outcomes.

A ParseState pairs a position in the shared TokenCache with an arbitrary
user-carried value. States are frozen: every step that consumes a token or
replaces user data returns a new state, and backtracking just means reusing
an older one.

A combinator returns ``Success(value, state)`` when it matches and the
``NO_MATCH`` singleton when it does not. Soft failure is a plain return
value; only hard failures travel as exceptions.

Thread Safety:
ParseState, Success and NoMatch are frozen and safe to share, but the
cache they point into belongs to one parse run.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Final, Literal

from monadparse.cache import TokenCache
from monadparse.tokens import Token


@dataclass(frozen=True, slots=True)
class ParseState:
    """Position in a token cache plus user data.

    Attributes:
        cache: Token cache shared by every state of one parse run
        position: Index of the next unconsumed token
        user_data: Grammar-specific bookkeeping value

    """

    cache: TokenCache
    position: int = 0
    user_data: Any = None

    def current(self) -> Token:
        """Token at this position, pulled from the producer on first access."""
        return self.cache.token_at(self.position)

    def advance(self) -> ParseState:
        """State one token further on. The end-of-stream token is never passed."""
        if self.current().is_eof:
            return self
        return replace(self, position=self.position + 1)

    def with_user_data(self, user_data: Any) -> ParseState:
        """State at the same position carrying user_data."""
        return replace(self, user_data=user_data)

    def __repr__(self) -> str:
        return f"ParseState(position={self.position}, user_data={self.user_data!r})"


@dataclass(frozen=True, slots=True)
class Success:
    """Outcome of a combinator that matched.

    Attributes:
        value: Result produced by the combinator
        state: State after the match

    """

    value: Any
    state: ParseState

    def __bool__(self) -> Literal[True]:
        return True


class NoMatch:
    """Outcome of a combinator that did not match (soft failure).

    Use the ``NO_MATCH`` singleton; it carries no payload.
    """

    __slots__ = ()
    _instance: NoMatch | None = None

    def __new__(cls) -> NoMatch:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH: Final[NoMatch] = NoMatch()
