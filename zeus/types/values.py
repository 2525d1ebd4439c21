"""Truth, nil and equality helpers shared by the evaluator and the builtins.

The empty list doubles as nil and is the only false value. The symbol `t`
is the canonical true value returned by predicates.
"""
from __future__ import annotations

from zeus import LispValue
from zeus.types.symbol import Symbol

T = Symbol("t")


def is_nil(value: LispValue) -> bool:
    return isinstance(value, list) and not value


def is_truthy(value: LispValue) -> bool:
    return not is_nil(value)


def to_bool(flag: bool) -> LispValue:
    return T if flag else []


def is_number(value: LispValue) -> bool:
    # bool is an int subclass in Python; it is never a Lisp number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: lists element-wise, scalars by kind and value."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if is_number(a) and is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b
