from zeus import SExpression, LispValue, EvaluatorFn
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, _: bool = False
) -> LispValue:
    if len(tail) != 1:
        raise ZeusArityError("Quote expects exactly 1 argument")
    return tail[0]
