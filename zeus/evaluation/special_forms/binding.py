"""Shape checks shared by the binding forms (define, lambda, let family, do)."""

from __future__ import annotations

from zeus import SExpression
from zeus.types.errors import ZeusInvalidSymbol, ZeusTypeError
from zeus.types.symbol import Symbol


def require_symbol(name: SExpression, context: str) -> Symbol:
    """Return `name` if it can be bound, else raise ZeusInvalidSymbol."""
    if not isinstance(name, Symbol):
        raise ZeusInvalidSymbol(f"{context}: cannot bind {name!r}, expected a symbol")
    return name


def check_formals(params: SExpression) -> list[Symbol]:
    """Validate a parameter list: distinct symbols, no keywords."""
    if not isinstance(params, list):
        raise ZeusTypeError(f"Lambda parameters must be a list, got {params!r}")
    seen: set[Symbol] = set()
    for p in params:
        require_symbol(p, "lambda")
        if p in seen:
            raise ZeusInvalidSymbol(f"Duplicate lambda parameter {p}")
        seen.add(p)
    return list(params)


def split_bindings(bindings: SExpression, form: str) -> list[tuple[Symbol, SExpression]]:
    """Turn ((name init) ...) into [(name, init), ...]."""
    if not isinstance(bindings, list):
        raise ZeusTypeError(f"{form} bindings must be a list")
    pairs = []
    for binding in bindings:
        if not isinstance(binding, list) or len(binding) != 2:
            raise ZeusTypeError(f"{form} binding must be a list of two elements: {binding!r}")
        pairs.append((require_symbol(binding[0], form), binding[1]))
    return pairs
