"""Local binding special forms: let, let*, letrec.

Each form opens exactly one new frame whose parent is the current
environment; only the order in which initializers see bindings differs.
"""

from __future__ import annotations
from zeus import SExpression, LispValue, EvaluatorFn
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError
from zeus.evaluation.special_forms.binding import split_bindings
from zeus.evaluation.special_forms.progn_form import eval_sequence


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(let ((name init) ...) body...): initializers run in the enclosing env."""
    if not tail:
        raise ZeusArityError("let requires a binding list")
    pairs = split_bindings(tail[0], "let")

    values = [(name, evaluate_fn(init, env)) for name, init in pairs]
    local_env = Environment(outer=env)
    for name, value in values:
        local_env.define(name, value)
    return eval_sequence(tail[1:], local_env, evaluate_fn, is_tail_call)


def let_star_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(let* ((name init) ...) body...): each initializer sees the earlier bindings."""
    if not tail:
        raise ZeusArityError("let* requires a binding list")
    pairs = split_bindings(tail[0], "let*")

    local_env = Environment(outer=env)
    for name, init in pairs:
        local_env.define(name, evaluate_fn(init, local_env))
    return eval_sequence(tail[1:], local_env, evaluate_fn, is_tail_call)


def letrec_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(letrec ((name init) ...) body...): all names are visible to every initializer."""
    if not tail:
        raise ZeusArityError("letrec requires a binding list")
    pairs = split_bindings(tail[0], "letrec")

    local_env = Environment(outer=env)
    # Pre-bind to nil so lambdas in the initializers can refer to each other
    for name, _ in pairs:
        local_env.define(name, [])
    for name, init in pairs:
        local_env.define(name, evaluate_fn(init, local_env))
    return eval_sequence(tail[1:], local_env, evaluate_fn, is_tail_call)
