"""Runtime environment for Yisp.

A frame is an association list of (Symbol, value) entries plus an `outer`
link. Binding always adds a new entry; lookup scans newest to oldest, so a
rebinding shadows the older entry without removing it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from yisp import Value
from yisp.types.nil import Nil
from yisp.types.symbol import Symbol

NIL_NAME = "nil"


class Environment:
    """Chained binding frames, searched innermost first."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        # Oldest entry first; scanned in reverse
        self.vars: list[tuple[Value, Value]] = []
        self.outer: Environment | None = outer

    def bind(self, name: Value, value: Value) -> None:
        """Add `name` -> `value` to this frame, shadowing earlier entries.

        Keys that are not Symbols are stored but can never be found.
        """
        self.vars.append((name, value))

    def _find_in_frame(self, name: Symbol) -> tuple[bool, Value]:
        for key, value in reversed(self.vars):
            if isinstance(key, Symbol) and key.id == name.id:
                return True, value
        return False, Nil

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            found, _ = env._find_in_frame(name)
            if found:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Value:
        """Look up the value bound to `name`.

        Never fails: an unbound symbol is its own value, except `nil`,
        which resolves to Nil.
        """
        env: Optional[Environment] = self
        while env is not None:
            found, value = env._find_in_frame(name)
            if found:
                return value
            env = env.outer
        if name.id == NIL_NAME:
            return Nil
        return name

    def bindings(self) -> Iterator[tuple[Value, Value]]:
        """This frame's entries, newest first, shadowed ones included."""
        return reversed(self.vars)

    def depth(self) -> int:
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        from yisp.printer import to_str

        buffer.write("{")
        buffer.write(", ".join(f"{to_str(k)}: {to_str(v)}" for k, v in self.bindings()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole chain, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
