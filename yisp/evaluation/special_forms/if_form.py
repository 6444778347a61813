from yisp import EvaluatorFn
from yisp import Value
from yisp.types.environment import Environment
from yisp.types.pair import Pair, nth
from yisp.types.value import is_truthy


def if_form(form: Pair, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    # Only Nil is false: 0, "" and every symbol take the THEN branch
    if is_truthy(evaluate_fn(nth(form, 1), env)):
        return evaluate_fn(nth(form, 2), env)
    # A missing ELSE reads as Nil
    return evaluate_fn(nth(form, 3), env)
