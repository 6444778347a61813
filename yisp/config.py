from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}

# Defaults
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def get_strict_default() -> bool:
    """YISP_STRICT: raise instead of returning `Error: ...` symbols."""
    return flag_from_env('YISP_STRICT')


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('YISP_PRELUDE')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('YISP_REPL_HOST') or _DEFAULT_REPL_HOST
    port = os.environ.get('YISP_REPL_PORT')
    return host, int(port) if port else _DEFAULT_REPL_PORT
