from __future__ import annotations

import logging
from typing import Callable, Optional

from zeus import SExpression, LispValue
from zeus.reader.lexer import tokenize
from zeus.reader.parser import parse_all
from zeus.types.environment import Environment
from zeus.builtin.env_builtin import standard_environment
from zeus.evaluation.evaluator import evaluate
from zeus.printer import render

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Zeus code.
    Maintains one root Environment (and its runtime state) across calls.
    """

    def __init__(
        self,
        prelude: str | None = None,
        *,
        max_depth: Optional[int] = None,
        gensym_prefix: Optional[str] = None,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
    ):
        self.eval_fn = eval_fn or evaluate
        self.env: Environment = standard_environment(
            max_depth=max_depth, gensym_prefix=gensym_prefix
        )
        logger.debug("interpreter created (max_depth=%s)", self.env.runtime.max_depth)
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        self.eval_all(code)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form in `code` and return all the values."""
        results: list[LispValue] = []
        for expr in parse_all(tokenize(code)):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("evaluating %s", render(expr))
            try:
                results.append(self.eval_fn(expr, self.env))
            except Exception:
                logger.error("evaluation failed: %s", render(expr))
                raise
        return results

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its last form (nil if none)."""
        results = self.eval_all(code)
        if not results:
            return []
        return results[-1]

    @staticmethod
    def render(value: LispValue) -> str:
        return render(value)
