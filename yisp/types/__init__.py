from yisp.types.symbol import Symbol, T
from yisp.types.nil import Nil, NilType
from yisp.types.pair import Pair, first, rest, from_iterable, iter_list, nth, is_list
from yisp.types.value import eq, is_truthy, is_atom, is_number, is_string, type_name
from yisp.types.environment import Environment
from yisp.types.lambda_fn import LAMBDA, is_lambda, make_lambda, lambda_formals, lambda_body

__all__ = [
    "Symbol",
    "T",
    "Nil",
    "NilType",
    "Pair",
    "first",
    "rest",
    "from_iterable",
    "iter_list",
    "nth",
    "is_list",
    "eq",
    "is_truthy",
    "is_atom",
    "is_number",
    "is_string",
    "type_name",
    "Environment",
    "LAMBDA",
    "is_lambda",
    "make_lambda",
    "lambda_formals",
    "lambda_body",
]
