"""Entry point: run a combinator against a token producer.

``parse`` owns the token cache for one run, builds the initial state, runs
the top-level combinator and turns its outcome into ``(result, success)``.
It is the only place that catches hard failures.

Example:
    >>> from monadparse import is_, parse, producer_from_iterable, sequence
    >>> tokens = [("num", 1), ("plus", None), ("num", 2)]
    >>> parse(sequence(is_("num"), is_("plus"), is_("num")), producer_from_iterable(tokens))
    (2, True)

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from monadparse.cache import TokenCache
from monadparse.config import ParseConfig, get_parse_config, parse_config_context
from monadparse.errors import NoMatchError, ParseError
from monadparse.profiling import get_parse_accumulator
from monadparse.protocols import Combinator, TokenProducer
from monadparse.state import ParseState
from monadparse.utils.logger import get_logger

logger = get_logger(__name__)


def initial_state(producer: TokenProducer, user_data: Any = None) -> ParseState:
    """Create a fresh token cache and the state at its first token.

    The first token is pulled eagerly.

    Args:
        producer: Zero-argument callable returning ``(class, value)`` pairs
        user_data: User data of the initial state

    Returns:
        ParseState at position 0

    """
    state = ParseState(TokenCache(producer), 0, user_data)
    state.current()
    return state


def parse(
    combinator: Combinator,
    producer: TokenProducer,
    options: ParseConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> tuple[Any, bool]:
    """Run combinator over the tokens of producer.

    Args:
        combinator: Top-level grammar combinator
        producer: Zero-argument callable returning ``(class, value)`` pairs
        options: Configuration for this run, as a ParseConfig or a mapping
            of its field names (defaults to the active ContextVar config)
        **overrides: ParseConfig fields replacing those of options, e.g.
            ``initial_user_data=[]`` or ``error_propagation=False``

    Returns:
        ``(result, True)`` on a match. When the run fails and
        error_propagation is off, ``(error_value, False)``.

    Raises:
        NoMatchError: Top-level soft failure with error_propagation on
        ParseError: Hard failure with error_propagation on
        TypeError: Unknown keyword override

    """
    if options is None:
        config = get_parse_config()
    elif isinstance(options, Mapping):
        config = ParseConfig.from_dict(options)
    else:
        config = options
    if overrides:
        config = replace(config, **overrides)

    with parse_config_context(config):
        state = initial_state(producer, config.initial_user_data)
        logger.debug("parse started: user_data=%r", config.initial_user_data)
        try:
            outcome = combinator(state)
        except ParseError as e:
            logger.debug("parse aborted by hard failure: %s", e)
            _record(state, success=False)
            if config.error_propagation:
                raise
            return config.error_value, False

    if not outcome:
        logger.debug("parse failed: no match at top level")
        _record(state, success=False)
        if config.error_propagation:
            raise NoMatchError(len(state.cache) - 1)
        return config.error_value, False

    logger.debug(
        "parse finished: position=%d tokens_pulled=%d",
        outcome.state.position,
        state.cache.pulls,
    )
    _record(state, success=True)
    return outcome.value, True


def _record(state: ParseState, *, success: bool) -> None:
    acc = get_parse_accumulator()
    if acc is not None:
        acc.record_parse(state.cache.pulls, success)


__all__ = [
    "initial_state",
    "parse",
]
