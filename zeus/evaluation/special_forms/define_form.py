from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.errors import ZeusArityError, ZeusTypeError
from zeus.types.environment import Environment
from zeus.types.lambda_fn import Lambda
from zeus.types.symbol import Symbol
from zeus.evaluation.special_forms.binding import check_formals, require_symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    """
    (define name value)
    Binds in the innermost frame and returns the bound value.
    """
    if len(tail) != 2:
        raise ZeusArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    require_symbol(name, "define")
    value = evaluate_fn(val_expr, env)  # normal evaluation
    if isinstance(value, Lambda) and value.name is None:
        value.name = name
    env.define(name, value)
    return value


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    """
    (defun name (params...) body...)
    Binds a named Lambda in the current frame and returns the name.
    """
    if len(tail) < 2:
        raise ZeusArityError("defun requires a name and a parameter list")

    name, params, *body = tail
    require_symbol(name, "defun")
    env.define(name, Lambda(check_formals(params), body, env, name))
    return name


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    """
    (set! name value)
    Updates the nearest existing binding of `name`.
    """
    if len(tail) != 2:
        raise ZeusArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise ZeusTypeError(f"set! first argument must be a Symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return value
