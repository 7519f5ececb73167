"""
monadparse — Monadic Parser Combinators over Lazy Token Streams

Build recursive-descent parsers with backtracking and ordered choice from a
small algebra of composable functions. Tokens are ``(class, value)`` pairs
pulled on demand from a producer you supply; each token is read once and
cached, however many branches revisit it. Zero runtime dependencies.

Quick Start:
    >>> from monadparse import between, is_, parse, producer_from_iterable, sep_by
    >>> tokens = [("(", None), ("a", 1), (",", None), ("a", 2), (")", None)]
    >>> grammar = between(is_("("), is_(")"), sep_by(is_("a"), is_(",")))
    >>> parse(grammar, producer_from_iterable(tokens))
    ([1, 2], True)

Failures:
    A mismatch is a soft failure: ``either`` and the repetition combinators
    backtrack over it. ``fail(reason)`` raises a hard ``ParseError`` that
    only ``parse`` catches. With ``error_propagation=False`` both come back
    as ``(error_value, False)``.

User Data:
    >>> from monadparse import pop_user_data, push_user_data, sequence
    >>> stack = sequence(push_user_data(1), push_user_data(2), pop_user_data())
    >>> parse(stack, producer_from_iterable([]), initial_user_data=[])
    (2, True)
"""

from monadparse.cache import TokenCache
from monadparse.combinators import (
    between,
    count,
    either,
    ignore,
    many,
    many1,
    many_until,
    maybe,
    opt,
    sep_by,
    sep_by1,
    skip_many,
    skip_many1,
)
from monadparse.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from monadparse.core import (
    bind,
    fail,
    fmap,
    get_user_data,
    modify_user_data,
    pop_user_data,
    pure,
    push_user_data,
    put_user_data,
    sequence,
)
from monadparse.engine import initial_state, parse
from monadparse.errors import MonadParseError, NoMatchError, ParseError, RepetitionError
from monadparse.primitives import any_token, eof, is_, lookahead, not_followed_by, satisfy
from monadparse.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from monadparse.protocols import Combinator, TokenProducer
from monadparse.state import NO_MATCH, NoMatch, ParseState, Success
from monadparse.tokens import EOF, Token, producer_from_iterable

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "parse",
    "initial_state",
    # Tokens and state
    "EOF",
    "Token",
    "TokenCache",
    "ParseState",
    "Success",
    "NoMatch",
    "NO_MATCH",
    "producer_from_iterable",
    # Primitives
    "satisfy",
    "any_token",
    "eof",
    "is_",
    "lookahead",
    "not_followed_by",
    # Monadic core
    "pure",
    "bind",
    "sequence",
    "fmap",
    "fail",
    "get_user_data",
    "put_user_data",
    "modify_user_data",
    "push_user_data",
    "pop_user_data",
    # Combinator algebra
    "either",
    "opt",
    "ignore",
    "maybe",
    "many",
    "many1",
    "many_until",
    "sep_by",
    "sep_by1",
    "skip_many",
    "skip_many1",
    "between",
    "count",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "MonadParseError",
    "ParseError",
    "RepetitionError",
    "NoMatchError",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    # Protocols
    "Combinator",
    "TokenProducer",
    "__version__",
]
