"""The (do ...) iteration special form.

The loop is implemented as a small evaluator object that closes over the loop
clauses and reuses the main evaluator to execute bodies in the appropriate scope.
"""

from __future__ import annotations
from zeus import SExpression, LispValue, EvaluatorFn
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusTypeError
from zeus.types.symbol import Symbol
from zeus.types.values import is_truthy
from zeus.evaluation.special_forms.binding import require_symbol
from zeus.evaluation.special_forms.progn_form import eval_sequence


class DoLoopEval:
    """Implements the (do ...) loop.

    varspecs: [(var init step?) ...]
    end_clause: [test expr*]
    body: repeated forms executed each iteration
    """

    def __init__(
        self,
        varspecs: SExpression,
        end_clause: SExpression,
        body: list[SExpression],
        evaluate_fn: EvaluatorFn,
    ):
        if not isinstance(varspecs, list):
            raise ZeusTypeError("do variable specs must be a list")
        if not isinstance(end_clause, list) or not end_clause:
            raise ZeusTypeError("do requires an end clause (test result...)")
        self.varspecs: list[tuple[Symbol, SExpression, SExpression | None]] = [
            self._unpack(spec) for spec in varspecs
        ]
        self.end_clause: list[SExpression] = end_clause
        self.body: list[SExpression] = body
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    @staticmethod
    def _unpack(spec: SExpression) -> tuple[Symbol, SExpression, SExpression | None]:
        if not isinstance(spec, list) or len(spec) not in (2, 3):
            raise ZeusTypeError(f"do variable spec must be (var init [step]), got {spec!r}")
        var_name = require_symbol(spec[0], "do")
        step = spec[2] if len(spec) == 3 else None
        return var_name, spec[1], step

    def eval(self, env: Environment, is_tail_call: bool = False) -> LispValue:
        """Evaluate the do loop by stepping until the end test is true."""
        evaluate_fn = self.evaluate_fn

        # 1: initial values are computed in the enclosing env, in parallel
        values = [evaluate_fn(init, env) for _, init, _ in self.varspecs]
        local_env = self._frame(env, values)

        test_expr, *exit_exprs = self.end_clause

        # 2: loop
        while True:
            if is_truthy(evaluate_fn(test_expr, local_env)):
                # Exit expressions see the final iteration's bindings
                return eval_sequence(exit_exprs, local_env, evaluate_fn, is_tail_call)

            for expr in self.body:
                evaluate_fn(expr, local_env)

            # Steps all read the current frame; none sees another's new value
            values = [
                evaluate_fn(step, local_env) if step is not None else local_env.vars[var]
                for var, _, step in self.varspecs
            ]
            # A fresh frame per iteration keeps closures over loop vars stable
            local_env = self._frame(env, values)

    def _frame(self, env: Environment, values: list[LispValue]) -> Environment:
        frame = Environment(outer=env)
        for (var, _, _), value in zip(self.varspecs, values):
            frame.define(var, value)
        return frame


def do_loop_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """Special form (do ...): evaluate a general iteration construct."""
    if len(tail) < 2:
        raise ZeusArityError("do requires variable specs and an end clause")
    return DoLoopEval(tail[0], tail[1], tail[2:], evaluate_fn).eval(env, is_tail_call)
