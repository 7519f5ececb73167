"""Combinator algebra: alternation, repetition, separators and brackets.

Everything here is built from the monadic core and the primitives. The
repetition family runs as explicit loops, so the depth of the Python stack
does not grow with the number of repetitions.

Zero-progress loops:
    A repeated parser that succeeds without consuming a token would repeat
    forever. While ``ParseConfig.guard_empty_loops`` is set (the default)
    the loop raises ``RepetitionError`` instead. With the guard off the loop
    runs unguarded, and grammars must make every repeated parser consume.

"""

from __future__ import annotations

from typing import Any

from monadparse.config import get_parse_config
from monadparse.core import bind, pure, sequence
from monadparse.errors import RepetitionError
from monadparse.protocols import Combinator
from monadparse.state import NO_MATCH, NoMatch, ParseState, Success


def either(p1: Combinator, p2: Combinator) -> Combinator:
    """Ordered choice: p1, or p2 from the same state if p1 does not match.

    Backtracking is unlimited: however much p1 consumed before failing, p2
    starts from the original state. Once p1 succeeds p2 is never tried.
    Hard failures raised inside p1 are not caught.
    """

    def _either(state: ParseState) -> Success | NoMatch:
        outcome = p1(state)
        if outcome:
            return outcome
        return p2(state)

    return _either


def opt(default: Any, p: Combinator) -> Combinator:
    """p, or succeed with default without consuming. Never fails."""
    return either(p, pure(default))


def ignore(p: Combinator) -> Combinator:
    """Run p and succeed with None."""
    return sequence(p, pure(None))


def maybe(p: Combinator) -> Combinator:
    """Consume p if it matches; otherwise do nothing. Never fails."""
    return opt(None, ignore(p))


def _repeat(
    p: Combinator,
    state: ParseState,
    name: str,
    results: list[Any] | None,
) -> ParseState:
    """Apply p until it fails; return the state after the last match."""
    guard = get_parse_config().guard_empty_loops
    while True:
        outcome = p(state)
        if not outcome:
            return state
        if guard and outcome.state.position == state.position:
            raise RepetitionError(name, state.position)
        if results is not None:
            results.append(outcome.value)
        state = outcome.state


def many(p: Combinator) -> Combinator:
    """Zero or more p, greedy. Results are a list in match order. Never fails."""

    def _many(state: ParseState) -> Success:
        results: list[Any] = []
        end = _repeat(p, state, "many", results)
        return Success(results, end)

    return _many


def many1(p: Combinator) -> Combinator:
    """One or more p. Does not match if p does not match at least once."""

    def _many1(state: ParseState) -> Success | NoMatch:
        first = p(state)
        if not first:
            return NO_MATCH
        results = [first.value]
        end = _repeat(p, first.state, "many1", results)
        return Success(results, end)

    return _many1


def skip_many(p: Combinator) -> Combinator:
    """Like many, but the result is None."""

    def _skip_many(state: ParseState) -> Success:
        return Success(None, _repeat(p, state, "skip_many", None))

    return _skip_many


def skip_many1(p: Combinator) -> Combinator:
    """Like many1, but the result is None."""

    def _skip_many1(state: ParseState) -> Success | NoMatch:
        first = p(state)
        if not first:
            return NO_MATCH
        return Success(None, _repeat(p, first.state, "skip_many1", None))

    return _skip_many1


def many_until(p: Combinator, terminator: Combinator) -> Combinator:
    """Repeat p until terminator matches.

    terminator is tried before each attempt at p and is consumed when it
    matches; its result is not included. If neither terminator nor p
    matches, the whole combinator does not match.
    """

    def _many_until(state: ParseState) -> Success | NoMatch:
        guard = get_parse_config().guard_empty_loops
        results: list[Any] = []
        while True:
            end = terminator(state)
            if end:
                return Success(results, end.state)
            outcome = p(state)
            if not outcome:
                return NO_MATCH
            if guard and outcome.state.position == state.position:
                raise RepetitionError("many_until", state.position)
            results.append(outcome.value)
            state = outcome.state

    return _many_until


def sep_by1(p: Combinator, sep: Combinator) -> Combinator:
    """One or more p separated by sep; returns only p's results.

    A separator not followed by p is left unconsumed.
    """

    def _sep_by1(state: ParseState) -> Success | NoMatch:
        first = p(state)
        if not first:
            return NO_MATCH
        guard = get_parse_config().guard_empty_loops
        results = [first.value]
        state = first.state
        while True:
            separator = sep(state)
            if not separator:
                break
            outcome = p(separator.state)
            if not outcome:
                break
            if guard and outcome.state.position == state.position:
                raise RepetitionError("sep_by1", state.position)
            results.append(outcome.value)
            state = outcome.state
        return Success(results, state)

    return _sep_by1


def sep_by(p: Combinator, sep: Combinator) -> Combinator:
    """Zero or more p separated by sep. Never fails."""
    return either(sep_by1(p, sep), lambda state: Success([], state))


def between(open_: Combinator, close: Combinator, p: Combinator) -> Combinator:
    """open_, then p, then close; the result is p's."""
    return bind(open_, lambda _: bind(p, lambda x: sequence(close, pure(x))))


def count(n: int, p: Combinator) -> Combinator:
    """Exactly n repetitions of p, as a list."""

    def _count(state: ParseState) -> Success | NoMatch:
        results: list[Any] = []
        for _ in range(n):
            outcome = p(state)
            if not outcome:
                return NO_MATCH
            results.append(outcome.value)
            state = outcome.state
        return Success(results, state)

    return _count


__all__ = [
    "between",
    "count",
    "either",
    "ignore",
    "many",
    "many1",
    "many_until",
    "maybe",
    "opt",
    "sep_by",
    "sep_by1",
    "skip_many",
    "skip_many1",
]
