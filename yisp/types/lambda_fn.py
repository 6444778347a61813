"""Lambda literals.

A procedure is just the list `(lambda (P1 P2 ...) BODY)`: it captures no
environment, and calls are evaluated in a frame parented to the caller.
"""

from __future__ import annotations

from yisp import SExpression, Value
from yisp.types.pair import Pair, from_iterable, nth
from yisp.types.symbol import Symbol

LAMBDA = Symbol("lambda")


def is_lambda(value: Value) -> bool:
    return isinstance(value, Pair) and value.first == LAMBDA


def make_lambda(formals: SExpression, body: SExpression) -> Pair:
    return from_iterable([LAMBDA, formals, body])


def lambda_formals(fn: Pair) -> SExpression:
    return nth(fn, 1)


def lambda_body(fn: Pair) -> SExpression:
    # Only the first body form is ever evaluated
    return nth(fn, 2)
