from __future__ import annotations
from typing import Callable

from zeus import LispValue

# Native implementations take the calling environment and the evaluated arguments.
NativeFn = Callable[..., LispValue]


class Builtin:
    """A named procedure implemented in Python."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"
