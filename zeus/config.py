from __future__ import annotations
import os
from typing import Optional


_DEFAULT_GENSYM_PREFIX = "G"


def int_from_env(var: str, default: int = 0) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_max_depth() -> Optional[int]:
    """Bound on nested evaluation depth; None when unset or non-positive."""
    depth = int_from_env('ZEUS_MAX_DEPTH', 0)
    return depth if depth > 0 else None


def get_gensym_prefix() -> str:
    raw = os.environ.get('ZEUS_GENSYM_PREFIX')
    return raw if raw else _DEFAULT_GENSYM_PREFIX
