"""Append-only token cache for monadparse.

One cache is created per ``parse`` run and shared by every ParseState
derived during it. Tokens are pulled from the producer on demand and
appended; an appended entry is never rewritten or removed. Backtracking is
therefore just reading an earlier index again, and the producer is called
at most once per position.

Thread Safety:
    TokenCache is not thread-safe. It belongs to a single parse run and is
    only extended from ``satisfy``.

Example:
    >>> from monadparse.tokens import producer_from_iterable
    >>> cache = TokenCache(producer_from_iterable([("a", 1)]))
    >>> cache.token_at(0)
    Token('a', 1)
    >>> cache.token_at(0) is cache.token_at(0)  # cached, producer not re-run
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from monadparse.tokens import Token

if TYPE_CHECKING:
    from monadparse.protocols import TokenProducer


class TokenCache:
    """Growable buffer of tokens read from a producer.

    Once the end-of-stream token has been appended the cache is terminated
    and the producer is never called again.
    """

    __slots__ = ("_producer", "_tokens", "_pulls")

    def __init__(self, producer: TokenProducer) -> None:
        self._producer = producer
        self._tokens: list[Token] = []
        self._pulls = 0

    def __len__(self) -> int:
        return len(self._tokens)

    @property
    def pulls(self) -> int:
        """Number of times the producer has been called."""
        return self._pulls

    @property
    def terminated(self) -> bool:
        """True once the end-of-stream token is cached."""
        return bool(self._tokens) and self._tokens[-1].is_eof

    def _pull(self) -> Token:
        token = Token.from_pair(self._producer())
        self._pulls += 1
        self._tokens.append(token)
        return token

    def token_at(self, position: int) -> Token:
        """Return the token at position, pulling from the producer if needed.

        Positions past the end-of-stream token resolve to that token.

        Raises:
            IndexError: If position skips ahead of the cache's end
        """
        tokens = self._tokens
        if position < len(tokens):
            return tokens[position]
        if self.terminated:
            return tokens[-1]
        if position != len(tokens):
            raise IndexError(
                f"token position {position} is ahead of the cache end {len(tokens)}"
            )
        return self._pull()
