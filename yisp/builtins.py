from __future__ import annotations

import math
from typing import Callable

from yisp import Value
from yisp.errors import (
    YispTypeError,
    YispDivisionByZero,
    YispModulusByZero,
    YispUnrecognizedBuiltin,
)
from yisp.runtime_context import is_strict
from yisp.types.nil import Nil
from yisp.types.pair import Pair, first, rest
from yisp.types.symbol import Symbol, T
from yisp.types.value import eq as values_eq, is_truthy
from yisp.printer import to_str

Builtin = Callable[[list[Value]], Value]

UNRECOGNIZED = "Error: unrecognized function"


def _arg(args: list[Value], i: int) -> Value:
    # Missing operands read as Nil
    return args[i] if i < len(args) else Nil


def _numbers(name: str, args: list[Value]) -> tuple[float, float]:
    a, b = _arg(args, 0), _arg(args, 1)
    if not isinstance(a, float) or not isinstance(b, float):
        raise YispTypeError(f"{name} expects number atoms, got {to_str(a)} and {to_str(b)}")
    return a, b


def _bool(flag: bool) -> Value:
    return T if flag else Nil


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Value]) -> Value:
    a, b = _numbers("add", args)
    return a + b


def sub(args: list[Value]) -> Value:
    a, b = _numbers("sub", args)
    return a - b


def mul(args: list[Value]) -> Value:
    a, b = _numbers("mul", args)
    return a * b


def div(args: list[Value]) -> Value:
    a, b = _numbers("div", args)
    if b == 0:
        raise YispDivisionByZero("division by zero")
    return a / b


def mod(args: list[Value]) -> Value:
    """Remainder of the truncated operands; the sign follows the dividend."""
    a, b = _numbers("mod", args)
    if not (math.isfinite(a) and math.isfinite(b)):
        raise YispTypeError("mod expects finite number atoms")
    ia, ib = math.trunc(a), math.trunc(b)
    if ib == 0:
        raise YispModulusByZero("modulus by zero")
    r = abs(ia) % abs(ib)
    return float(-r if ia < 0 else r)


# -------------------------------
# Comparison (Number 1 / 0)
# -------------------------------
def lt(args: list[Value]) -> Value:
    a, b = _numbers("lt", args)
    return 1.0 if a < b else 0.0


def gt(args: list[Value]) -> Value:
    a, b = _numbers("gt", args)
    return 1.0 if a > b else 0.0


def lte(args: list[Value]) -> Value:
    a, b = _numbers("lte", args)
    return 1.0 if a <= b else 0.0


def gte(args: list[Value]) -> Value:
    a, b = _numbers("gte", args)
    return 1.0 if a >= b else 0.0


# -------------------------------
# Equality and logic
# -------------------------------
def eq(args: list[Value]) -> Value:
    return _bool(values_eq(_arg(args, 0), _arg(args, 1)))


def logical_not(args: list[Value]) -> Value:
    a = _arg(args, 0)
    if not isinstance(a, float):
        raise YispTypeError(f"not expects a number atom, got {to_str(a)}")
    return 1.0 if a == 0 else 0.0


# -------------------------------
# Pair operations
# -------------------------------
def cons(args: list[Value]) -> Value:
    return Pair(_arg(args, 0), _arg(args, 1))


def car(args: list[Value]) -> Value:
    return first(_arg(args, 0))


def cdr(args: list[Value]) -> Value:
    return rest(_arg(args, 0))


# -------------------------------
# Predicates (t / Nil; Nil when called without an argument)
# -------------------------------
def _predicate(test: Callable[[Value], bool]) -> Builtin:
    def pred(args: list[Value]) -> Value:
        if not args:
            return Nil
        return _bool(test(args[0]))
    return pred


is_nil = _predicate(lambda v: v is Nil)
is_number = _predicate(lambda v: isinstance(v, float))
is_symbol = _predicate(lambda v: isinstance(v, Symbol))
is_string = _predicate(lambda v: isinstance(v, str))
# Nil or a cons cell, dotted or not
is_list_value = _predicate(lambda v: v is Nil or isinstance(v, Pair))
is_sexpr = _predicate(lambda v: v is Nil or isinstance(v, (float, str, Symbol, Pair)))
sexp_to_bool = _predicate(is_truthy)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Builtin] = {
    'add': add,
    '+': add,
    'sub': sub,
    '-': sub,
    'mul': mul,
    '*': mul,
    'div': div,
    '/': div,
    'mod': mod,
    '%': mod,
    'eq': eq,
    '=': eq,
    'not': logical_not,
    'lt': lt,
    'lte': lte,
    'gt': gt,
    'gte': gte,
    'cons': cons,
    'car': car,
    'cdr': cdr,
    'nil?': is_nil,
    'number?': is_number,
    'symbol?': is_symbol,
    'string?': is_string,
    'list?': is_list_value,
    'sexpr?': is_sexpr,
    'sexp_to_bool': sexp_to_bool,
}


def dispatch_builtin(name: str, args: list[Value]) -> Value:
    """Apply the builtin called `name` to already-evaluated `args`.

    An unknown name yields the Symbol `Error: unrecognized function`, or
    raises YispUnrecognizedBuiltin in strict mode.
    """
    fn = BUILTINS.get(name)
    if fn is None:
        if is_strict():
            raise YispUnrecognizedBuiltin(f"unrecognized function: {name}")
        return Symbol(UNRECOGNIZED)
    return fn(args)
