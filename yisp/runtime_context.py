from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from yisp.config import get_strict_default

# An Interpreter created with an explicit strict flag only applies it while
# it evaluates. New threads start from the configured default.
_strict: ContextVar[bool] = ContextVar("yisp_strict", default=get_strict_default())


def set_strict(flag: bool) -> None:
    _strict.set(flag)


def is_strict() -> bool:
    return _strict.get()


@contextmanager
def strict_mode(flag: bool | None) -> Iterator[None]:
    """Run the body with strict mode set to `flag` (None keeps the current mode)."""
    if flag is None:
        yield
        return
    token = _strict.set(flag)
    try:
        yield
    finally:
        _strict.reset(token)
