from yisp import EvaluatorFn
from yisp import Value
from yisp.types.environment import Environment
from yisp.types.nil import Nil
from yisp.types.pair import Pair, iter_list, nth
from yisp.types.symbol import Symbol
from yisp.types.value import is_truthy

ELSE = Symbol("else")


def cond_form(form: Pair, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (cond (test1 res1) (test2 res2) ... (else resN))
    Returns the result of the first clause whose test is truthy, Nil if none.
    The literal symbol `else` always matches, whatever it is bound to.
    """
    for clause in iter_list(form.rest):
        test_expr = nth(clause, 0)
        if test_expr == ELSE or is_truthy(evaluate_fn(test_expr, env)):
            return evaluate_fn(nth(clause, 1), env)
    return Nil
