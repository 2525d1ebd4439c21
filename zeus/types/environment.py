"""Runtime environment for Zeus.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are ordinary Python objects, so a
frame stays alive for as long as any Lambda (or child frame) refers to it; a
call never pops a frame out from under a closure.
"""

from __future__ import annotations

from typing import Optional

from zeus import LispValue
from zeus.types.errors import ZeusInvalidSymbol, ZeusUnboundSymbol
from zeus.types.runtime import Runtime
from zeus.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "runtime")

    def __init__(self, outer: Optional[Environment] = None, runtime: Optional[Runtime] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        # Child frames share the root's runtime state
        if runtime is None:
            runtime = outer.runtime if outer is not None else Runtime()
        self.runtime: Runtime = runtime

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises ZeusInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise ZeusInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises ZeusUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise ZeusUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises ZeusUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise ZeusUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            if not isinstance(k, Symbol):
                raise ZeusInvalidSymbol(f"Cannot define {k} as a symbol")
            self.vars[k] = v

    def __repr__(self) -> str:
        # Innermost frame first; each frame lists only its own names
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append("(" + " ".join(str(k) for k in env.vars) + ")")
            env = env.outer
        return f"<Environment {' -> '.join(frames)}>"
