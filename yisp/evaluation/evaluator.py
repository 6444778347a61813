"""Core evaluator for the Yisp interpreter.

A plain recursive evaluator: no trampoline, so deep recursion in Yisp code
uses the Python stack. `evaluate` turns stack exhaustion into
YispRecursionError for the expression being evaluated.

Each Yisp procedure call costs several Python frames, so under the default
interpreter recursion limit (1000) a non-tail recursive function such as
factorial manages a depth of about 100 calls.
"""

from __future__ import annotations

from yisp import SExpression, Value
from yisp.builtins import dispatch_builtin
from yisp.errors import YispFunctionPositionError, YispRecursionError
from yisp.evaluation.apply import apply_lambda, evaluate_args
from yisp.evaluation.special_forms import SPECIAL_FORMS
from yisp.printer import to_str
from yisp.runtime_context import is_strict
from yisp.types.environment import Environment
from yisp.types.lambda_fn import is_lambda
from yisp.types.pair import Pair
from yisp.types.symbol import Symbol

BAD_FUNCTION_POSITION = "Error: function name must be a symbol or lambda"


def evaluate(expr: SExpression, env: Environment) -> Value:
    """
    Evaluate one expression. Any YispError aborts the whole expression.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError as ex:
        raise YispRecursionError("maximum recursion depth exceeded") from ex


def evaluate0(expr: SExpression, env: Environment) -> Value:
    """
    Core evaluator: dispatch on the variant of `expr`.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(first=head_expr, rest=args):
            # The operator position is itself evaluated
            head = evaluate0(head_expr, env)

            if isinstance(head, Symbol):
                # --- Special forms handling ---
                form = SPECIAL_FORMS.get(head)
                if form is not None:
                    return form(expr, env, evaluate0)

                # A symbol may name a procedure bound in the environment...
                target = env.lookup(head)
                if is_lambda(target):
                    return apply_lambda(target, expr, env, evaluate0)

                # ...or else a builtin
                return dispatch_builtin(head.id, evaluate_args(args, env, evaluate0))

            # Lambda literal in operator position: ((lambda (x) ...) 1)
            if is_lambda(head):
                return apply_lambda(head, expr, env, evaluate0)

            if is_strict():
                raise YispFunctionPositionError(f"cannot apply {to_str(head)}")
            return Symbol(BAD_FUNCTION_POSITION)

    # --- Nil, numbers and strings return as-is ---
    return expr
