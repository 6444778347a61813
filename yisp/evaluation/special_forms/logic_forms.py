from yisp import SExpression
from yisp.types.environment import Environment
from yisp.types.pair import Pair, nth
from yisp.types.value import is_truthy


def and_form(form: Pair, env: Environment, evaluate_fn) -> SExpression:
    """Short-circuiting AND over exactly two operands.

    (and a b) returns a's value when it is Nil, otherwise the value of b.
    Operands past the second are ignored.
    """
    val = evaluate_fn(nth(form, 1), env)
    if not is_truthy(val):
        return val
    return evaluate_fn(nth(form, 2), env)


def or_form(form: Pair, env: Environment, evaluate_fn) -> SExpression:
    """Short-circuiting OR over exactly two operands.

    (or a b) returns a's value unless it is Nil, otherwise the value of b.
    """
    val = evaluate_fn(nth(form, 1), env)
    if is_truthy(val):
        return val
    return evaluate_fn(nth(form, 2), env)
