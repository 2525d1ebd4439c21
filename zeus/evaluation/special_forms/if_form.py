from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.errors import ZeusArityError
from zeus.types.environment import Environment
from zeus.types.values import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise ZeusArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)

    if is_truthy(cond):
        return evaluate_fn(tail[1], env, is_tail_call=is_tail_call)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, is_tail_call=is_tail_call)
    else:
        return []  # nil if no else
