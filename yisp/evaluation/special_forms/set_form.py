from yisp import EvaluatorFn
from yisp import Value
from yisp.types.environment import Environment
from yisp.types.pair import Pair, nth


def set_form(form: Pair, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (set var value)
    Binds in the current frame only, shadowing any earlier binding there or in
    outer frames. Returns the value.
    """
    var_sym = nth(form, 1)
    value = evaluate_fn(nth(form, 2), env)
    env.bind(var_sym, value)
    return value
