"""Exception classes for monadparse.

Only hard failures are exceptions. A soft failure ("no match") is the
``NO_MATCH`` return value and never surfaces here, except as
``NoMatchError`` when the entry point is asked to raise on it.
"""

from __future__ import annotations


class MonadParseError(Exception):
    """Base exception for all monadparse errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MonadParseError):
    """Hard parse failure.

    Raised by ``fail(reason)``. It is not an alternative to retry:
    ``either`` and the repetition combinators let it pass through to the
    entry point.
    """

    def __init__(self, reason: str, position: int | None = None) -> None:
        """Initialize parse error with optional token position.

        Args:
            reason: Error description
            position: Token index where the failure was raised (0-indexed)
        """
        self.reason = reason
        self.position = position

        location = f"token {position}: " if position is not None else ""
        super().__init__(f"{location}{reason}")


class RepetitionError(ParseError):
    """A repeated parser succeeded without consuming input.

    Raised by the ``many`` family when ``guard_empty_loops`` is enabled,
    instead of looping forever.
    """

    def __init__(self, combinator: str, position: int | None = None) -> None:
        """Initialize repetition error.

        Args:
            combinator: Name of the repetition combinator (e.g., "many")
            position: Token index where the loop stopped making progress
        """
        self.combinator = combinator
        super().__init__(
            f"{combinator}: repeated parser succeeded without consuming a token",
            position,
        )


class NoMatchError(MonadParseError):
    """The top-level combinator did not match.

    Raised by ``parse`` when ``error_propagation`` is enabled. position is
    the furthest token read before the run gave up.
    """

    def __init__(self, position: int | None = None) -> None:
        self.position = position
        location = f" at token {position}" if position is not None else ""
        super().__init__(f"input did not match the grammar{location}")
