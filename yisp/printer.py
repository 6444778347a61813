"""Canonical text form of Yisp values, the inverse of the reader for
well-formed lists."""

from __future__ import annotations

from io import StringIO

from yisp import Value
from yisp.types.nil import NilType
from yisp.types.pair import Pair
from yisp.types.symbol import Symbol


def format_number(x: float) -> str:
    # Shortest round-trip form; integral values drop the ".0"
    text = repr(x)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _write_atom(value: Value, buffer: StringIO) -> None:
    if isinstance(value, float):
        buffer.write(format_number(value))
    elif isinstance(value, str):
        # No escaping: the reader has no escape sequences either
        buffer.write(f'"{value}"')
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, NilType):
        buffer.write("()")
    else:
        buffer.write("<unknown>")


def _write(value: Value, buffer: StringIO) -> None:
    # Work list of (is_value, item): values still to print, or literal text
    todo: list[tuple[bool, Value]] = [(True, value)]
    while todo:
        is_value, item = todo.pop()
        if not is_value:
            buffer.write(item)
        elif isinstance(item, Pair):
            parts: list[tuple[bool, Value]] = [(False, "(")]
            cur = item
            while isinstance(cur, Pair):
                if cur is not item:
                    parts.append((False, " "))
                parts.append((True, cur.first))
                cur = cur.rest
            if not isinstance(cur, NilType):
                parts.append((False, " . "))
                parts.append((True, cur))
            parts.append((False, ")"))
            todo.extend(reversed(parts))
        else:
            _write_atom(item, buffer)


def to_str(value: Value) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
