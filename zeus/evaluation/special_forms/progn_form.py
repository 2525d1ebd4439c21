from zeus import EvaluatorFn
from zeus import SExpression, LispValue
from zeus.types.environment import Environment


def eval_sequence(
    forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """Evaluate forms in order and return the last value; nil when empty.

    Only the final form inherits tail position.
    """
    if not forms:
        return []
    for e in forms[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(forms[-1], env, is_tail_call=is_tail_call)


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    return eval_sequence(tail, env, evaluate_fn, is_tail_call)
