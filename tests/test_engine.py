"""Tests for the parse entry point."""

import pytest
from support import CountingProducer, pairs_of

from monadparse import (
    EOF,
    NoMatchError,
    ParseConfig,
    ParseError,
    bind,
    either,
    eof,
    fail,
    initial_state,
    is_,
    many,
    parse,
    parse_config_context,
    pop_user_data,
    producer_from_iterable,
    pure,
    push_user_data,
    sequence,
)

NUM_PLUS_NUM = [("num", 1), ("plus", None), ("num", 2), (EOF, None)]


class TestEndToEnd:
    """Scenarios running whole grammars through parse()."""

    def test_num_plus_num(self) -> None:
        grammar = sequence(is_("num"), sequence(is_("plus"), is_("num")))
        assert parse(grammar, producer_from_iterable(NUM_PLUS_NUM)) == (2, True)

    def test_final_state_at_eof(self) -> None:
        grammar = sequence(is_("num"), sequence(is_("plus"), is_("num")))
        outcome = grammar(initial_state(producer_from_iterable(NUM_PLUS_NUM)))
        assert outcome.value == 2
        assert outcome.state.current().is_eof
        assert eof()(outcome.state)

    def test_user_data_scenario(self) -> None:
        grammar = sequence(push_user_data(1), push_user_data(2), pop_user_data())
        result, ok = parse(grammar, producer_from_iterable([]), initial_user_data=[])
        assert (result, ok) == (2, True)

    def test_remaining_user_data(self) -> None:
        from monadparse import get_user_data

        grammar = sequence(push_user_data(1), push_user_data(2), pop_user_data(), get_user_data())
        assert parse(grammar, producer_from_iterable([]), initial_user_data=[]) == ([1], True)

    def test_sum_grammar(self) -> None:
        tokens = [("num", 1), ("plus", None), ("num", 2), ("plus", None), ("num", 3)]

        def add_rest(total):
            step = bind(sequence(is_("plus"), is_("num")), lambda n: add_rest(total + n))
            return either(step, pure(total))

        grammar = bind(is_("num"), lambda first: bind(add_rest(first), lambda total: sequence(eof(), pure(total))))
        assert parse(grammar, producer_from_iterable(tokens)) == (6, True)

    def test_recursive_grammar_via_function(self) -> None:
        # nested := "(" nested ")" | "x"
        def nested(state):
            return either(
                bind(is_("("), lambda _: bind(nested, lambda inner: sequence(is_(")"), pure([inner])))),
                is_("x"),
            )(state)

        tokens = pairs_of("(", "(", "x", ")", ")")
        assert parse(nested, producer_from_iterable(tokens)) == ([["x"]], True)


class TestProducerCalls:
    def test_first_token_pulled_eagerly(self) -> None:
        producer = CountingProducer(pairs_of("a"))
        initial_state(producer)
        assert producer.calls == 1

    def test_single_invocation_bound(self) -> None:
        classes = ["a", "b", "a", "c"]
        producer = CountingProducer(pairs_of(*classes))
        token = either(is_("c"), either(is_("b"), is_("a")))
        parse(sequence(many(token), eof()), producer)
        assert producer.calls == len(classes) + 1

    def test_fresh_cache_per_run(self) -> None:
        grammar = is_("a")
        first = CountingProducer(pairs_of("a"))
        second = CountingProducer(pairs_of("a"))
        parse(grammar, first)
        parse(grammar, second)
        assert first.calls == 1
        assert second.calls == 1


class TestErrorPropagation:
    """Failures raise by default and return placeholders when disabled."""

    def test_soft_failure_raises_by_default(self) -> None:
        with pytest.raises(NoMatchError):
            parse(is_("b"), producer_from_iterable(pairs_of("a")))

    def test_soft_failure_reports_furthest_token(self) -> None:
        grammar = sequence(is_("a"), is_("a"), is_("b"))
        with pytest.raises(NoMatchError, match="at token 2") as exc_info:
            parse(grammar, producer_from_iterable(pairs_of("a", "a", "c")))
        assert exc_info.value.position == 2

    def test_hard_failure_raises_by_default(self) -> None:
        with pytest.raises(ParseError, match="bad input"):
            parse(fail("bad input"), producer_from_iterable(pairs_of("a")))

    def test_hard_failure_skips_either(self) -> None:
        grammar = either(sequence(is_("a"), fail("no retry")), is_("a"))
        with pytest.raises(ParseError, match="no retry"):
            parse(grammar, producer_from_iterable(pairs_of("a")))

    def test_soft_failure_returns_placeholder(self) -> None:
        result = parse(
            is_("b"),
            producer_from_iterable(pairs_of("a")),
            error_propagation=False,
            error_value="<error>",
        )
        assert result == ("<error>", False)

    def test_hard_failure_returns_placeholder(self) -> None:
        options = ParseConfig(error_propagation=False, error_value=-1)
        assert parse(fail("x"), producer_from_iterable([]), options) == (-1, False)

    def test_placeholder_defaults_to_none(self) -> None:
        result = parse(is_("b"), producer_from_iterable([]), error_propagation=False)
        assert result == (None, False)

    def test_non_parse_errors_always_propagate(self) -> None:
        with pytest.raises(IndexError):
            parse(pop_user_data(), producer_from_iterable([]), error_propagation=False)


class TestOptions:
    def test_unknown_override_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse(pure(1), producer_from_iterable([]), not_an_option=True)

    def test_context_config_used_by_default(self) -> None:
        with parse_config_context(ParseConfig(error_propagation=False, error_value="ctx")):
            assert parse(is_("b"), producer_from_iterable([])) == ("ctx", False)

    def test_explicit_options_win_over_context(self) -> None:
        with parse_config_context(ParseConfig(error_propagation=False)):
            with pytest.raises(NoMatchError):
                parse(is_("b"), producer_from_iterable([]), ParseConfig())

    def test_mapping_options(self) -> None:
        options = {"error_propagation": False, "error_value": "none"}
        assert parse(is_("b"), producer_from_iterable([]), options) == ("none", False)

    def test_mapping_options_with_overrides(self) -> None:
        result = parse(
            is_("b"), producer_from_iterable([]), {"error_value": "base"}, error_propagation=False
        )
        assert result == ("base", False)

    def test_overrides_apply_on_top_of_options(self) -> None:
        options = ParseConfig(error_value="base")
        result = parse(is_("b"), producer_from_iterable([]), options, error_propagation=False)
        assert result == ("base", False)

    def test_initial_user_data(self) -> None:
        from monadparse import get_user_data

        assert parse(get_user_data(), producer_from_iterable([]), initial_user_data={"k": 1}) == (
            {"k": 1},
            True,
        )

    def test_run_config_visible_to_combinators(self) -> None:
        from monadparse import get_parse_config

        seen = []

        def spy(state):
            seen.append(get_parse_config().guard_empty_loops)
            return pure(None)(state)

        parse(spy, producer_from_iterable([]), guard_empty_loops=False)
        assert seen == [False]

    def test_context_restored_after_run(self) -> None:
        from monadparse import get_parse_config

        parse(pure(1), producer_from_iterable([]), error_value="temp")
        assert get_parse_config().error_value is None
