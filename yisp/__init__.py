# Core type aliases for Yisp's data model.
# Values are plain Python objects wherever Python has a matching type:
# - Number -> float
# - String -> str
# - Symbol -> yisp.types.symbol.Symbol
# - Pair   -> yisp.types.pair.Pair
# - Nil    -> yisp.types.nil.Nil (singleton)
#
# The same objects represent code (forms) and runtime values, so SExpression
# and Value are interchangeable aliases.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Forms alias, used in reader and special-form code
SExpression = Value

# Evaluator function type passed into special forms and the apply engine
EvaluatorFn = Callable[..., Value]

from yisp.reader.parser import read, read_all  # noqa: E402
from yisp.evaluation.evaluator import evaluate  # noqa: E402
from yisp.printer import to_str  # noqa: E402
from yisp.types.environment import Environment  # noqa: E402
from yisp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "Value",
    "SExpression",
    "EvaluatorFn",
    "read",
    "read_all",
    "evaluate",
    "to_str",
    "Environment",
    "Interpreter",
]
