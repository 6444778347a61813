"""
  Yisp Reader

- Single pass over a character cursor, no separate token pass
- Nesting is tracked on an explicit stack, never on the Python call stack
- Never raises: malformed input degrades to the best partial structure

    - () -> Nil
    - lists -> Pair chains ending in Nil
    - 'x -> (quote x)
    - "text" -> str (no escapes; an unterminated string closes at end of input)
    - numbers -> float (longest decimal prefix after a leading digit or sign)
    - anything else -> Symbol
    - end of input -> Nil

   n.b. There is no dotted-pair input syntax: `(a . b)` reads as three
   elements, the middle one being the Symbol `.`.
"""

from __future__ import annotations

import re
from typing import Iterator

from yisp import SExpression
from yisp.types.nil import Nil
from yisp.types.pair import from_iterable
from yisp.types.symbol import Symbol

QUOTE_CHAR = "'"
QUOTE = Symbol("quote")

# Decimal float prefix, as accepted by C's strtod minus hex/inf/nan
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

SYMBOL_STOP = frozenset("()" + QUOTE_CHAR)


class Reader:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def peek(self) -> str:
        """Current character, or '' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ""

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def skip_whitespace(self) -> None:
        n = len(self.source)
        while self.pos < n and self.source[self.pos].isspace():
            self.pos += 1

    def parse_expr(self) -> SExpression:
        """Read one complete expression starting at the cursor.

        Open lists and pending quotes are kept on `stack` instead of the
        Python call stack, so nesting depth is limited only by memory.
        """
        stack: list[list[SExpression] | Symbol] = []

        while True:
            self.skip_whitespace()
            ch = self.peek()

            if stack and stack[-1] is not QUOTE and (not ch or ch == ")"):
                # An unmatched ( simply closes at end of input
                if ch == ")":
                    self.pos += 1
                value = from_iterable(stack.pop())
            elif not ch:
                value = Nil
            elif ch == QUOTE_CHAR:
                self.pos += 1
                stack.append(QUOTE)
                continue
            elif ch == "(":
                self.pos += 1
                stack.append([])
                continue
            elif ch == '"':
                value = self.parse_string()
            else:
                value = None
                if ch.isdigit() or ch in "+-":
                    value = self.parse_number()
                if value is None:
                    # A bare sign (e.g. `-` or `+x`) is a symbol
                    value = self.parse_symbol()

            # 'x -> (quote x), innermost quote first
            while stack and stack[-1] is QUOTE:
                stack.pop()
                value = from_iterable([QUOTE, value])
            if not stack:
                return value
            stack[-1].append(value)

    def parse_string(self) -> str:
        self.pos += 1  # skip opening "
        end = self.source.find('"', self.pos)
        if end == -1:
            text = self.source[self.pos:]
            self.pos = len(self.source)
            return text
        text = self.source[self.pos:end]
        self.pos = end + 1
        return text

    def parse_number(self) -> float | None:
        m = NUMBER_RE.match(self.source, self.pos)
        if not m:
            return None
        self.pos = m.end()
        return float(m.group(0))

    def parse_symbol(self) -> Symbol:
        start = self.pos
        n = len(self.source)
        while self.pos < n:
            ch = self.source[self.pos]
            if ch.isspace() or ch in SYMBOL_STOP:
                break
            self.pos += 1
        return Symbol(self.source[start:self.pos])

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            self.skip_whitespace()
            if self.at_end():
                break
            if self.peek() == ")":
                # Stray closer at top level; parse_expr would not advance here
                self.pos += 1
                continue
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read the first expression of `source` (Nil for empty input)."""
    return Reader(source).parse_expr()


def read_all(source: str) -> Iterator[SExpression]:
    """Read every top-level expression of `source`, in order."""
    return Reader(source).parse_all()
