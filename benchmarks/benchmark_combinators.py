"""Benchmark repetition and backtracking throughput.

Run with:
    pytest benchmarks/benchmark_combinators.py -v --benchmark-only
"""

import pytest

from monadparse import (
    between,
    either,
    eof,
    is_,
    many,
    parse,
    producer_from_iterable,
    sep_by,
    sequence,
)


@pytest.mark.benchmark(group="repetition")
def test_benchmark_sep_by_long_list(benchmark, long_list_tokens):
    """Benchmark a 10k-element separated list inside brackets."""
    grammar = between(is_("["), is_("]"), sep_by(is_("num"), is_(",")))

    def run():
        return parse(grammar, producer_from_iterable(long_list_tokens))

    result, ok = benchmark(run)
    assert ok
    assert len(result) == 10_000


@pytest.mark.benchmark(group="backtracking")
def test_benchmark_ordered_choice(benchmark, backtracking_tokens):
    """Benchmark statements matched by the third of three alternatives."""
    call = sequence(is_("id"), is_("("), is_(")"), is_(";"))
    decl = sequence(is_("id"), is_(":"), is_("id"), is_(";"))
    assign = sequence(is_("id"), is_("="), is_("num"), is_(";"))
    grammar = sequence(many(either(call, either(decl, assign))), eof())

    def run():
        return parse(grammar, producer_from_iterable(backtracking_tokens))

    _, ok = benchmark(run)
    assert ok
