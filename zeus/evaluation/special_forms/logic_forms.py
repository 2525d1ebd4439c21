from zeus import SExpression, EvaluatorFn
from zeus.types.environment import Environment
from zeus.types.values import T, is_truthy


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, is_tail_call: bool = False) -> SExpression:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsey value
    (nil) is found, which is returned immediately. If all operands are truthy,
    returns the value of the last operand. With zero operands, returns t.
    """
    if not tail:
        return T

    for expr in tail[:-1]:
        val = evaluate_fn(expr, env)
        if not is_truthy(val):
            return val
    # Only the final operand is in tail position
    return evaluate_fn(tail[-1], env, is_tail_call=is_tail_call)


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, is_tail_call: bool = False) -> SExpression:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy, returns the last (nil) value. With zero
    operands, returns nil.
    """
    if not tail:
        return []

    for expr in tail[:-1]:
        val = evaluate_fn(expr, env)
        if is_truthy(val):
            return val
    return evaluate_fn(tail[-1], env, is_tail_call=is_tail_call)
