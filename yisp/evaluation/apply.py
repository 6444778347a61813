"""Application engine for Yisp.

Calls to user procedures go through `apply_lambda`:
- Arguments are evaluated left to right in the caller's environment.
- The new frame's parent is the caller's environment, not the place the
  lambda was written (lambdas capture nothing).
- Formals are bound positionally with no arity check: surplus formals stay
  unbound, surplus arguments are dropped.
"""

from __future__ import annotations

from yisp import SExpression, Value, EvaluatorFn
from yisp.types.environment import Environment
from yisp.types.lambda_fn import lambda_formals, lambda_body
from yisp.types.pair import Pair, iter_list


def evaluate_args(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> list[Value]:
    return [evaluate_fn(arg, env) for arg in iter_list(args)]


def bind_arguments(formals: SExpression, actuals: list[Value], frame: Environment) -> Environment:
    # zip stops at the shorter side
    for name, value in zip(iter_list(formals), actuals):
        frame.bind(name, value)
    return frame


def apply_lambda(
    fn: Pair,
    call: Pair,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Invoke the lambda literal `fn` for the call form `call` made in `env`."""
    actuals = evaluate_args(call.rest, env, evaluate_fn)
    frame = bind_arguments(lambda_formals(fn), actuals, Environment(outer=env))
    return evaluate_fn(lambda_body(fn), frame)
