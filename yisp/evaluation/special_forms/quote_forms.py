from yisp import EvaluatorFn
from yisp import SExpression, Value
from yisp.types.environment import Environment
from yisp.types.pair import Pair, nth


def quote_form(form: Pair, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(quote X) -> X, unevaluated."""
    return nth(form, 1)


def lambda_form(form: Pair, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """(lambda (ARG...) BODY) evaluates to itself; no environment is captured."""
    return form
