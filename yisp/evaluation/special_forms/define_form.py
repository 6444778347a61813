from yisp import EvaluatorFn
from yisp import Value
from yisp.errors import YispDefineSyntaxError
from yisp.runtime_context import is_strict
from yisp.printer import to_str
from yisp.types.environment import Environment
from yisp.types.lambda_fn import make_lambda
from yisp.types.pair import Pair, nth
from yisp.types.symbol import Symbol

INVALID_DEFINE = "Error: Invalid define syntax"


def define_form(form: Pair, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (define name value)          -> name
    (define (fname args...) body) -> fname, bound to (lambda (args...) body)
    """
    target = nth(form, 1)

    if isinstance(target, Symbol):
        value = evaluate_fn(nth(form, 2), env)
        env.bind(target, value)
        return target

    if isinstance(target, Pair):
        fn_name, formals = target.first, target.rest
        env.bind(fn_name, make_lambda(formals, nth(form, 2)))
        return fn_name

    if is_strict():
        raise YispDefineSyntaxError(f"cannot define {to_str(target)}")
    return Symbol(INVALID_DEFINE)
