"""Monadic core: pure, bind, sequence, fail and user-data operations.

Combinators are plain callables from ParseState to ``Success | NoMatch``.
``bind`` and ``sequence`` thread the state through a chain; a soft failure
anywhere in the chain short-circuits to ``NO_MATCH``. ``fail`` is the only
combinator that raises.

Example:
    >>> from monadparse import bind, is_, pure, sequence
    >>> pair = bind(is_("num"), lambda a: sequence(is_(","), bind(is_("num"), lambda b: pure((a, b)))))

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import islice
from typing import Any, NoReturn

from monadparse.errors import ParseError
from monadparse.protocols import Combinator
from monadparse.state import NO_MATCH, NoMatch, ParseState, Success


def pure(x: Any) -> Combinator:
    """Succeed with x without consuming input."""

    def _pure(state: ParseState) -> Success:
        return Success(x, state)

    return _pure


def bind(p: Combinator, f: Callable[[Any], Combinator]) -> Combinator:
    """Run p, then the combinator ``f(result)`` from where p stopped.

    ``f`` is not called when p soft-fails.
    """

    def _bind(state: ParseState) -> Success | NoMatch:
        outcome = p(state)
        if not outcome:
            return NO_MATCH
        return f(outcome.value)(outcome.state)

    return _bind


def sequence(p: Combinator, m: Combinator, *rest: Combinator) -> Combinator:
    """Run each combinator in turn, keeping only the last result.

    ``sequence(a, b, c)`` is ``sequence(a, sequence(b, c))``.
    """
    parsers = (p, m, *rest)

    def _sequence(state: ParseState) -> Success | NoMatch:
        outcome: Success | NoMatch = NO_MATCH
        for parser in parsers:
            outcome = parser(state)
            if not outcome:
                return NO_MATCH
            state = outcome.state
        return outcome

    return _sequence


def fmap(f: Callable[[Any], Any], p: Combinator) -> Combinator:
    """Apply f to p's result."""
    return bind(p, lambda x: pure(f(x)))


def fail(reason: str) -> Combinator:
    """Raise a hard failure when run.

    Unlike a mismatch, this is not backtracked over: ``either`` does not try
    its second branch, and the error reaches the entry point.

    Raises:
        ParseError: Always, when the returned combinator runs
    """

    def _fail(state: ParseState) -> NoReturn:
        raise ParseError(reason, state.position)

    return _fail


# =========================================================================
# User data
# =========================================================================


def get_user_data() -> Combinator:
    """Succeed with the current user data."""

    def _get_user_data(state: ParseState) -> Success:
        return Success(state.user_data, state)

    return _get_user_data


def put_user_data(x: Any) -> Combinator:
    """Replace the user data with x; the result is x."""

    def _put_user_data(state: ParseState) -> Success:
        return Success(x, state.with_user_data(x))

    return _put_user_data


def modify_user_data(f: Callable[[Any], Any]) -> Combinator:
    """Replace the user data with ``f(current)``; the result is the new value."""
    return bind(get_user_data(), lambda current: put_user_data(f(current)))


def _as_sequence(user_data: Any) -> Sequence[Any]:
    # None stands for the empty stack
    if user_data is None:
        return []
    if not isinstance(user_data, Sequence) or isinstance(user_data, str):
        raise TypeError(
            f"user data must be a sequence to push or pop, got {type(user_data).__name__}"
        )
    return user_data


def push_user_data(x: Any) -> Combinator:
    """Prepend x to the user-data sequence; the result is x.

    A tuple stays a tuple and anything else, ``None`` included, becomes a
    list. The previous state's sequence is not modified.

    Raises:
        TypeError: When run on user data that is not a sequence
    """

    def _push(current: Any) -> Any:
        stack = _as_sequence(current)
        if isinstance(stack, tuple):
            return (x, *stack)
        return [x, *stack]

    return sequence(modify_user_data(_push), pure(x))


def pop_user_data() -> Combinator:
    """Remove the front of the user-data sequence and succeed with it.

    The remainder is a tuple for a tuple and a list for any other sequence.

    Raises:
        TypeError: When run on user data that is not a sequence
        IndexError: When run on an empty sequence
    """

    def _pop_user_data(state: ParseState) -> Success:
        stack = _as_sequence(state.user_data)
        if not stack:
            raise IndexError("pop from empty user data")
        if isinstance(stack, tuple):
            rest: Sequence[Any] = stack[1:]
        else:
            rest = list(islice(stack, 1, None))
        return Success(stack[0], state.with_user_data(rest))

    return _pop_user_data


__all__ = [
    "bind",
    "fail",
    "fmap",
    "get_user_data",
    "modify_user_data",
    "pop_user_data",
    "pure",
    "push_user_data",
    "put_user_data",
    "sequence",
]
