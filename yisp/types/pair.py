"""Cons cells and list helpers.

Pairs are frozen: nothing in the language can mutate a Pair after it is
built, so every Pair graph is acyclic by construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from yisp import Value
from yisp.errors import YispTypeError
from yisp.types.nil import Nil


@dataclass(frozen=True, slots=True, repr=False)
class Pair:
    first: Value
    rest: Value

    def __repr__(self) -> str:
        # Lazy import: the printer depends on this module
        from yisp.printer import to_str
        return f"Pair<{to_str(self)}>"

    def __str__(self) -> str:
        from yisp.printer import to_str
        return to_str(self)


def first(value: Value) -> Value:
    if not isinstance(value, Pair):
        raise YispTypeError(f"car called on non-cons: {value!r}")
    return value.first


def rest(value: Value) -> Value:
    if not isinstance(value, Pair):
        raise YispTypeError(f"cdr called on non-cons: {value!r}")
    return value.rest


def from_iterable(items: Iterable[Value], tail: Value = Nil) -> Value:
    """Link `items` into a Pair chain ending in `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(value: Value) -> Iterator[Value]:
    """Yield the elements of a Pair chain, stopping at the first non-Pair tail."""
    while isinstance(value, Pair):
        yield value.first
        value = value.rest


def nth(value: Value, n: int) -> Value:
    """Element `n` of a chain, or Nil when the chain is shorter."""
    for _ in range(n):
        if not isinstance(value, Pair):
            return Nil
        value = value.rest
    return value.first if isinstance(value, Pair) else Nil


def is_list(value: Value) -> bool:
    """True for Nil and for Pair chains that end in Nil."""
    while isinstance(value, Pair):
        value = value.rest
    return value is Nil
