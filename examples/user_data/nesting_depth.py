"""Track open brackets in user data while parsing nested lists.

Each "[" pushes its depth onto a stack kept in user data and each "]" pops
it. Every bracket pair returns the deepest level reached inside it, and the
program takes the maximum over the results of many.
"""

from monadparse import (
    bind,
    fmap,
    get_user_data,
    is_,
    many,
    parse,
    pop_user_data,
    producer_from_iterable,
    push_user_data,
    sequence,
)


def open_bracket(state):
    depth = len(state.user_data) + 1
    return sequence(is_("["), push_user_data(depth))(state)


def close_bracket(state):
    return sequence(is_("]"), pop_user_data())(state)


def nested(state):
    # Result: deepest depth reached inside this bracket pair
    return bind(
        open_bracket,
        lambda depth: bind(
            many(nested),
            lambda inner: fmap(lambda _: max([depth, *inner]), close_bracket),
        ),
    )(state)


program = bind(many(nested), lambda depths: fmap(lambda _: max(depths, default=0), get_user_data()))

if __name__ == "__main__":
    tokens = [(c, c) for c in "[[][[[]]]][]"]
    deepest, ok = parse(program, producer_from_iterable(tokens), initial_user_data=())
    print(f"deepest nesting: {deepest}")
