"""Application engine for Zeus.

This module centralizes procedure application for the interpreter:
- Lambda application with exact positional arity, in a frame whose parent
  is the closure's captured environment.
- Tail-call awareness via TailCall objects (consumed by the trampoline).
- Application of Builtin procedures registered in the environment.

The evaluator and the higher-order builtins both go through `apply`, so a
callback behaves exactly like a direct call.
"""

from zeus import LispValue, EvaluatorFn
from zeus.types.builtin_fn import Builtin
from zeus.types.environment import Environment
from zeus.types.lambda_fn import Lambda
from zeus.types.errors import ZeusNotAProcedure
from zeus.types.tail_call import TailCall
from zeus.evaluation.special_forms.progn_form import eval_sequence


def is_procedure(value: LispValue) -> bool:
    return isinstance(value, (Lambda, Builtin))


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied.
    - args: The already-evaluated argument values.
    - evaluate_fn: Evaluator used to run the body.
    - is_tail_call: Whether the call position is tail; if True, return a TailCall.

    Too few or too many arguments raise ZeusArityError before the body runs.
    """
    new_env = fn.extend_env(args)
    if is_tail_call:
        return TailCall(fn, new_env)
    # Not tail position: run the body now; its own tail calls are trampolined
    return eval_sequence(fn.body, new_env, evaluate_fn, False)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    tail: bool = False,
) -> LispValue | TailCall:
    """Apply either a Lambda or a Builtin.

    - For Lambda, defer to apply_lambda (handling arity and tail calls).
    - For Builtin, invoke with the calling env and the list of args.
    - Otherwise, raise ZeusNotAProcedure.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn, tail)
    elif isinstance(head, Builtin):
        return head(env, args)
    else:
        raise ZeusNotAProcedure(f"Cannot apply non-procedure {head!r}")
