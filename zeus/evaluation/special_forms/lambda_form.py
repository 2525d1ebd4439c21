from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.environment import Environment
from zeus.types.errors import ZeusArityError
from zeus.types.lambda_fn import Lambda
from zeus.evaluation.special_forms.binding import check_formals


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms.
    # The body is an implicit progn; an empty body yields nil when called.
    if not tail:
        raise ZeusArityError("lambda requires at least a parameter list")

    params = check_formals(tail[0])
    return Lambda(params, list(tail[1:]), env)
