from __future__ import annotations

from yisp import Value
from yisp.types.nil import Nil, NilType
from yisp.types.pair import Pair
from yisp.types.symbol import Symbol


def is_number(value: Value) -> bool:
    return isinstance(value, float)


def is_string(value: Value) -> bool:
    return isinstance(value, str)


def is_atom(value: Value) -> bool:
    return isinstance(value, (float, str, Symbol))


def is_truthy(value: Value) -> bool:
    # Only Nil is false; 0, "" and every Symbol are true
    return value is not Nil


def type_name(value: Value) -> str:
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, Pair):
        return "pair"
    if isinstance(value, NilType):
        return "nil"
    return type(value).__name__


def eq(a: Value, b: Value) -> bool:
    """Atom equality: by value for numbers, by text for strings and symbols.

    Nil equals Nil; pairs are equal only when they are the same object.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, (float, str, Symbol)):
        return a == b
    if isinstance(a, NilType):
        return True
    return False
