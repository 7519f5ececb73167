"""Evaluate integer arithmetic with + - * / and parentheses.

A tiny regex lexer feeds the engine lazily; the grammar is plain functions
built from bind, either and many.
"""

import re

from monadparse import between, bind, either, eof, fmap, is_, many, parse, pure, sequence

TOKEN_RE = re.compile(r"\s*(?:(\d+)|(\S))")

OPS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a // b,
}


def producer(source: str):
    """Token producer over source; numbers are ("num", int)."""
    tokens = (
        ("num", int(number)) if number else (op, op)
        for number, op in TOKEN_RE.findall(source)
    )
    return lambda: next(tokens, (None, None))


def chain(operand, *ops):
    """operand (op operand)*, folded left to right."""
    op = is_(ops[0])
    for other in ops[1:]:
        op = either(op, is_(other))
    step = bind(op, lambda o: fmap(lambda rhs: (o, rhs), operand))

    def fold(first):
        def apply(steps):
            acc = first
            for o, rhs in steps:
                acc = OPS[o](acc, rhs)
            return acc

        return fmap(apply, many(step))

    return bind(operand, fold)


def atom(state):
    return either(is_("num"), between(is_("("), is_(")"), expr))(state)


def term(state):
    return chain(atom, "*", "/")(state)


def expr(state):
    return chain(term, "+", "-")(state)


program = bind(expr, lambda value: sequence(eof(), pure(value)))

if __name__ == "__main__":
    for source in ["1 + 2 * 3", "(1 + 2) * 3", "10 / (4 - 2) - 1", "1 +"]:
        result, ok = parse(program, producer(source), error_propagation=False)
        print(f"{source!r:22} -> {result if ok else 'syntax error'}")
