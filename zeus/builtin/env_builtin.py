"""Built-in functions for the Zeus runtime environment.

This module defines core arithmetic, comparison, list processing, higher-order
functions, symbol property lists, gensym, predicates and output helpers
exposed to Lisp code, plus the registration that installs them into a root
environment.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from zeus import LispValue
from zeus.types.builtin_fn import Builtin
from zeus.types.environment import Environment
from zeus.types.runtime import Runtime
from zeus.types.symbol import Keyword, Symbol
from zeus.types.errors import ZeusArityError, ZeusDivisionByZero, ZeusTypeError
from zeus.types.values import T, is_equal, is_nil, is_number, is_truthy, to_bool
from zeus.evaluation.apply import apply as apply_engine, is_procedure
from zeus.evaluation.evaluator import evaluate0
from zeus.printer import display

logger = logging.getLogger(__name__)


# -------------------------------
# Argument checking helpers
# -------------------------------
def _arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise ZeusArityError(f"{name} requires exactly {n} argument{'s' if n != 1 else ''}, got {len(args)}")


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    for a in args:
        if not is_number(a):
            raise ZeusTypeError(f"All arguments to {name} must be numbers, got {a!r}")
    return args


def _list_arg(name: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise ZeusTypeError(f"{name} requires a list argument, got {value!r}")
    return value


def _index_arg(name: str, value: LispValue) -> int:
    if not is_number(value) or not math.isfinite(value) or value < 0 or int(value) != value:
        raise ZeusTypeError(f"{name} index must be a non-negative integer, got {value!r}")
    return int(value)


def _symbol_arg(name: str, value: LispValue) -> Symbol:
    if not isinstance(value, Symbol):
        raise ZeusTypeError(f"{name} requires a symbol, got {value!r}")
    return value


def call(env: Environment, fn: LispValue, args: list[LispValue]) -> LispValue:
    """Invoke a procedure value through the evaluator's apply engine."""
    return apply_engine(fn, list(args), env, evaluate0, False)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; errors if any arg is non-numeric."""
    return float(sum(_numbers("+", args)))


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise ZeusArityError("- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return -float(args[0])
    result = float(args[0])
    for x in args[1:]:
        result -= x
    return result


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; errors if any arg is non-numeric."""
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns reciprocal; checks arity and zero division."""
    if not args:
        raise ZeusArityError("/ requires at least 1 argument")
    _numbers("/", args)
    operands = [1.0, *args] if len(args) == 1 else args
    result = float(operands[0])
    for x in operands[1:]:
        if x == 0:
            raise ZeusDivisionByZero("Division by zero")
        result /= x
    return result


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    """(mod n d) => n modulo d, with the sign of d."""
    _arity("mod", args, 2)
    n, d = _numbers("mod", args)
    if d == 0:
        raise ZeusDivisionByZero("Modulo by zero")
    return float(n % d)


# -------------------------------
# Comparison and equality
# -------------------------------
def _chain(name: str, op: Callable[[LispValue, LispValue], bool]) -> Callable:
    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        if not args:
            raise ZeusArityError(f"{name} requires at least 1 argument")
        _numbers(name, args)
        return to_bool(all(op(a, b) for a, b in zip(args, args[1:])))

    compare.__doc__ = f"Chainable {name}: t if it holds for every adjacent pair."
    return compare


lt = _chain("<", lambda a, b: a < b)
gt = _chain(">", lambda a, b: a > b)
lte = _chain("<=", lambda a, b: a <= b)
gte = _chain(">=", lambda a, b: a >= b)


def equals(env: Environment, args: list[LispValue]) -> LispValue:
    """Return t if all arguments are structurally equal, else nil."""
    if not args:
        raise ZeusArityError("= requires at least 1 argument")
    first = args[0]
    return to_bool(all(is_equal(first, other) for other in args[1:]))


def not_equals(env: Environment, args: list[LispValue]) -> LispValue:
    """Logical negation of =."""
    return to_bool(is_nil(equals(env, args)))


def logical_not(env: Environment, args: list[LispValue]) -> LispValue:
    """t for nil, nil for anything else."""
    _arity("not", args, 1)
    return to_bool(not is_truthy(args[0]))


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(args)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the first element of a non-empty list."""
    _arity("car", args, 1)
    xs = _list_arg("car", args[0])
    if not xs:
        raise ZeusTypeError("car of empty list")
    return xs[0]


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Return all but the first element of a non-empty list."""
    _arity("cdr", args, 1)
    xs = _list_arg("cdr", args[0])
    if not xs:
        raise ZeusTypeError("cdr of empty list")
    return xs[1:]


def cons(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Return a new list with the first argument prepended to the second."""
    _arity("cons", args, 2)
    head, tail = args
    return [head, *_list_arg("cons", tail)]


def append(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Concatenate any number of lists into a new list."""
    result: list[LispValue] = []
    for item in args:
        result.extend(_list_arg("append", item))
    return result


def reverse(env: Environment, args: list[LispValue]) -> list[LispValue]:
    _arity("reverse", args, 1)
    return list(reversed(_list_arg("reverse", args[0])))


def length(env: Environment, args: list[LispValue]) -> LispValue:
    """Length of a list or string."""
    _arity("length", args, 1)
    x = args[0]
    if not isinstance(x, (list, str)):
        raise ZeusTypeError(f"length requires a list or string argument, got {x!r}")
    return float(len(x))


def nth(env: Environment, args: list[LispValue]) -> LispValue:
    """(nth i list) => the i-th element, counting from zero."""
    _arity("nth", args, 2)
    i = _index_arg("nth", args[0])
    xs = _list_arg("nth", args[1])
    if i >= len(xs):
        raise ZeusTypeError(f"nth index {i} out of range for list of length {len(xs)}")
    return xs[i]


def nthcdr(env: Environment, args: list[LispValue]) -> LispValue:
    """(nthcdr n list) => the list after n cdrs; n may equal the length."""
    _arity("nthcdr", args, 2)
    n = _index_arg("nthcdr", args[0])
    xs = _list_arg("nthcdr", args[1])
    if n > len(xs):
        raise ZeusTypeError(f"nthcdr index {n} out of range for list of length {len(xs)}")
    return xs[n:]


def member(env: Environment, args: list[LispValue]) -> LispValue:
    """(member item list) => tail starting at the first equal element, or nil."""
    _arity("member", args, 2)
    item = args[0]
    xs = _list_arg("member", args[1])
    for i, elem in enumerate(xs):
        if is_equal(item, elem):
            return xs[i:]
    return []


# -------------------------------
# Higher-order functions
# -------------------------------
def mapcar(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(mapcar f list...) => results of f over parallel elements, up to the shortest list."""
    if len(args) < 2:
        raise ZeusArityError("mapcar requires a function and at least 1 list")
    fn = args[0]
    lists = [_list_arg("mapcar", xs) for xs in args[1:]]
    return [call(env, fn, list(items)) for items in zip(*lists)]


def filter_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(filter pred list) => elements for which pred returns truthy."""
    _arity("filter", args, 2)
    pred, xs = args[0], _list_arg("filter", args[1])
    return [x for x in xs if is_truthy(call(env, pred, [x]))]


def remove(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(remove pred list) => elements for which pred returns nil."""
    _arity("remove", args, 2)
    pred, xs = args[0], _list_arg("remove", args[1])
    return [x for x in xs if not is_truthy(call(env, pred, [x]))]


def reduce_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(reduce f list [init]) => left fold.

    An empty list with no initial value is an arity error: there is nothing
    to return.
    """
    if len(args) not in (2, 3):
        raise ZeusArityError("reduce requires 2 or 3 arguments")
    fn, xs = args[0], _list_arg("reduce", args[1])
    if len(args) == 3:
        acc, rest = args[2], xs
    elif xs:
        acc, rest = xs[0], xs[1:]
    else:
        raise ZeusArityError("reduce of empty list with no initial value")
    for item in rest:
        acc = call(env, fn, [acc, item])
    return acc


def apply_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f args) => f called with the elements of args."""
    _arity("apply", args, 2)
    return call(env, args[0], _list_arg("apply", args[1]))


def funcall(env: Environment, args: list[LispValue]) -> LispValue:
    """(funcall f arg...) => f called with the remaining arguments."""
    if not args:
        raise ZeusArityError("funcall requires at least 1 argument")
    return call(env, args[0], args[1:])


# -------------------------------
# Symbols: property lists and gensym
# -------------------------------
def put(env: Environment, args: list[LispValue]) -> LispValue:
    """(put symbol key value) => value, stored on the symbol's property list."""
    _arity("put", args, 3)
    sym = _symbol_arg("put", args[0])
    key, value = args[1], args[2]
    if isinstance(key, list):
        raise ZeusTypeError(f"put key must be an atom, got {key!r}")
    return env.runtime.put(sym, key, value)


def get(env: Environment, args: list[LispValue]) -> LispValue:
    """(get symbol key) => stored value, or nil if absent."""
    _arity("get", args, 2)
    sym = _symbol_arg("get", args[0])
    key = args[1]
    if isinstance(key, list):
        return []
    return env.runtime.get(sym, key)


def symbol_plist(env: Environment, args: list[LispValue]) -> LispValue:
    """(symbol-plist symbol) => ((key value) ...) in insertion order."""
    _arity("symbol-plist", args, 1)
    return env.runtime.plist(_symbol_arg("symbol-plist", args[0]))


def gensym(env: Environment, args: list[LispValue]) -> LispValue:
    """(gensym [prefix]) => a fresh uninterned symbol named prefix<counter>."""
    if len(args) > 1:
        raise ZeusArityError("gensym takes at most 1 argument: (gensym [prefix])")
    prefix: Optional[str] = None
    if args:
        p = args[0]
        if isinstance(p, Symbol):
            prefix = p.id
        elif isinstance(p, str):
            prefix = p
        else:
            raise ZeusTypeError("gensym prefix must be a Symbol or string")
    return env.runtime.gen_sym(prefix)


def symbol_to_string(env: Environment, args: list[LispValue]) -> LispValue:
    """(symbol->string x) -> name of symbol x"""
    _arity("symbol->string", args, 1)
    return _symbol_arg("symbol->string", args[0]).id


def string_to_symbol(env: Environment, args: list[LispValue]) -> LispValue:
    """(string->symbol x) -> interned Symbol named by string x"""
    _arity("string->symbol", args, 1)
    x = args[0]
    if not isinstance(x, str):
        raise ZeusTypeError(f"string->symbol requires a string, got {x!r}")
    return Symbol(x)


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test: Callable[[LispValue], bool]) -> Callable:
    def predicate(env: Environment, args: list[LispValue]) -> LispValue:
        _arity(name, args, 1)
        return to_bool(test(args[0]))

    return predicate


is_null = _predicate("null?", is_nil)
is_atom = _predicate("atom?", lambda x: not isinstance(x, list) or not x)
is_list = _predicate("list?", lambda x: isinstance(x, list))
is_number_p = _predicate("number?", is_number)
is_string = _predicate("string?", lambda x: isinstance(x, str))
is_symbol = _predicate("symbol?", lambda x: isinstance(x, Symbol))
is_keyword = _predicate("keyword?", lambda x: isinstance(x, Keyword))
is_procedure_p = _predicate("procedure?", is_procedure)


# -------------------------------
# Output
# -------------------------------
def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Write the arguments' printed forms with no trailing newline; returns the last."""
    print("".join(display(a) for a in args), end="", flush=True)
    return args[-1] if args else []


def println_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Write each argument's printed form on its own line; returns the last."""
    for a in args:
        print(display(a))
    return args[-1] if args else []


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "=": equals,
    "equal": equals,
    "/=": not_equals,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "not": logical_not,
    "list": list_builtin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "append": append,
    "reverse": reverse,
    "length": length,
    "nth": nth,
    "nthcdr": nthcdr,
    "member": member,
    "mapcar": mapcar,
    "filter": filter_builtin,
    "remove": remove,
    "reduce": reduce_builtin,
    "apply": apply_builtin,
    "funcall": funcall,
    "put": put,
    "get": get,
    "symbol-plist": symbol_plist,
    "gensym": gensym,
    "symbol->string": symbol_to_string,
    "string->symbol": string_to_symbol,
    "null?": is_null,
    "atom?": is_atom,
    "list?": is_list,
    "number?": is_number_p,
    "string?": is_string,
    "symbol?": is_symbol,
    "keyword?": is_keyword,
    "procedure?": is_procedure_p,
    "print": print_builtin,
    "println": println_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.define(T, T)
    logger.debug("registered %d builtins", len(BUILTINS))


def standard_environment(
    max_depth: Optional[int] = None,
    gensym_prefix: Optional[str] = None,
) -> Environment:
    """Return a fresh root environment with its own runtime state and all builtins."""
    env = Environment(runtime=Runtime(max_depth=max_depth, gensym_prefix=gensym_prefix))
    register(env)
    return env
