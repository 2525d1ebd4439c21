"""Multi-way conditionals: cond, case, when, unless."""

from __future__ import annotations
from zeus import SExpression, LispValue, EvaluatorFn
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError, ZeusTypeError
from zeus.types.symbol import Symbol
from zeus.types.values import is_equal, is_truthy
from zeus.evaluation.special_forms.progn_form import eval_sequence

ELSE = Symbol("else")
CASE_DEFAULTS = (Symbol("else"), Symbol("otherwise"), Symbol("default"))


def _clause(clause: SExpression, form: str) -> list[SExpression]:
    if not isinstance(clause, list) or not clause:
        raise ZeusTypeError(f"{form} clause must be a non-empty list: {clause!r}")
    return clause


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(cond (test body...) ... (else body...))

    The first clause whose test is truthy supplies the result. A clause with
    no body returns its test value. No match yields nil.
    """
    for clause in tail:
        test, *body = _clause(clause, "cond")
        if test == ELSE:
            return eval_sequence(body, env, evaluate_fn, is_tail_call)
        value = evaluate_fn(test, env)
        if is_truthy(value):
            if not body:
                return value
            return eval_sequence(body, env, evaluate_fn, is_tail_call)
    return []


def case_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(case key (datum body...) ((d1 d2) body...) ... (else body...))

    The key is evaluated once and compared structurally against the
    unevaluated datums of each clause in order. No match yields nil.
    """
    if not tail:
        raise ZeusArityError("case requires a key expression")
    key = evaluate_fn(tail[0], env)

    for clause in tail[1:]:
        datums, *body = _clause(clause, "case")
        if datums in CASE_DEFAULTS:
            return eval_sequence(body, env, evaluate_fn, is_tail_call)
        candidates = datums if isinstance(datums, list) else [datums]
        if any(is_equal(key, d) for d in candidates):
            return eval_sequence(body, env, evaluate_fn, is_tail_call)
    return []


def when_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if not tail:
        raise ZeusArityError("when requires a test expression")
    if is_truthy(evaluate_fn(tail[0], env)):
        return eval_sequence(tail[1:], env, evaluate_fn, is_tail_call)
    return []


def unless_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if not tail:
        raise ZeusArityError("unless requires a test expression")
    if not is_truthy(evaluate_fn(tail[0], env)):
        return eval_sequence(tail[1:], env, evaluate_fn, is_tail_call)
    return []
