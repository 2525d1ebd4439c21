"""Core evaluator and trampoline for the Zeus interpreter.

Implements special-form dispatch, strict left-to-right procedure application,
and tail-call aware application via a simple trampoline using TailCall
objects. A Lambda call in tail position therefore costs no host stack.
"""

from __future__ import annotations

from zeus import SExpression, LispValue
from zeus.types.environment import Environment
from zeus.types.errors import ZeusStackDepthExceeded
from zeus.types.symbol import Symbol
from zeus.types.tail_call import TailCall
from zeus.evaluation.apply import apply
from zeus.evaluation.special_forms import SPECIAL_FORMS
from zeus.evaluation.special_forms.progn_form import eval_sequence


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env` and return its value.

    Errors propagate unchanged. Host stack exhaustion on deeply recursive
    programs surfaces as ZeusStackDepthExceeded.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError as e:
        raise ZeusStackDepthExceeded(
            "Maximum recursion depth exceeded while evaluating"
        ) from e


def evaluate0(
    expr: SExpression,
    env: Environment,
    is_tail_call: bool = False,
) -> LispValue:
    """
    Core evaluator: single-step evaluation with tail-call awareness.

    In tail position the result may be a TailCall for the caller's trampoline
    to run; otherwise TailCalls are resolved here before returning, so a
    non-tail caller always receives a plain value.
    """
    runtime = env.runtime
    runtime.depth += 1
    try:
        if runtime.max_depth is not None and runtime.depth > runtime.max_depth:
            raise ZeusStackDepthExceeded(
                f"Evaluation depth exceeded the limit of {runtime.max_depth}"
            )
        # Always step in tail mode; a non-tail caller owns the trampoline
        result = _step(expr, env)
        if not is_tail_call:
            while isinstance(result, TailCall):
                result = eval_sequence(result.fn.body, result.env, evaluate0, True)
        return result
    finally:
        runtime.depth -= 1


def _step(expr: SExpression, env: Environment) -> LispValue | TailCall:
    match expr:
        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate0, True)

            # Head first, then arguments strictly left to right
            proc = evaluate0(head, env)
            args = [evaluate0(arg, env) for arg in tail_args]
            return apply(proc, args, env, evaluate0, True)

        case Symbol():
            return env.lookup(expr)

    # --- Atoms (numbers, strings, keywords, nil, procedures) return as-is ---
    return expr
