"""Lambda function representation and argument binding for Zeus."""

from __future__ import annotations

from io import StringIO
from typing import Optional

from zeus import SExpression, LispValue
from zeus.types.environment import Environment
from zeus.types.symbol import Symbol
from zeus.types.errors import ZeusArityError


class Lambda:
    """A first-class lambda with formal parameters, body forms, and closure env."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: Optional[Symbol] = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        # Shared reference to the defining frame, never a copy
        self.env: Environment = env
        self.name: Optional[Symbol] = name

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<lambda ")
            if self.name is not None:
                buffer.write(f"{self.name} ")
            buffer.write("(")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment for evaluating the body.

        The new frame's parent is the captured environment, not the caller's.
        Exact arity is required; there are no optional or rest parameters.
        """
        formals = list(self.formals)
        supplied = list(args)
        if len(supplied) < len(formals):
            missing = formals[len(supplied):]
            raise ZeusArityError(
                f"{self._label()}: too few arguments; missing {len(missing)} parameter(s): "
                f"{[str(s) for s in missing]}"
            )
        if len(supplied) > len(formals):
            raise ZeusArityError(
                f"{self._label()}: too many arguments; expected {len(formals)}, got {len(supplied)}"
            )
        local_env = Environment(outer=self.env)
        for formal, value in zip(formals, supplied):
            local_env.define(formal, value)
        return local_env

    def _label(self) -> str:
        return str(self.name) if self.name is not None else "lambda"
