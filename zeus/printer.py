"""Printed representation of Zeus values.

`render` produces text the reader accepts back (for data values), so that
read(render(v)) is structurally equal to v. `display` is the print/println
flavour: strings appear without quotes or escapes.
"""
from __future__ import annotations

import math
from decimal import Decimal

from zeus import LispValue
from zeus.types.builtin_fn import Builtin
from zeus.types.lambda_fn import Lambda
from zeus.types.symbol import Keyword, Symbol

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def render_number(value: float | int) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            return repr(value)
        if value.is_integer():
            return str(int(value))
        text = repr(value)
        # The reader has no exponent syntax
        if "e" in text or "E" in text:
            return format(Decimal(text), "f")
        return text
    return str(value)


def render_string(value: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(ch, ch) for ch in value) + '"'


def render(value: LispValue) -> str:
    """Return the printed representation of `value`.

    Examples:
        []                        -> nil
        [1.0, [Symbol("a")]]      -> (1 (a))
        "a\\"b"                   -> "a\\"b"
        Keyword("k")              -> :k
    """
    if isinstance(value, list):
        if not value:
            return "nil"
        return "(" + " ".join(render(v) for v in value) + ")"
    if isinstance(value, bool):
        return "t" if value else "nil"
    if isinstance(value, (int, float)):
        return render_number(value)
    if isinstance(value, str):
        return render_string(value)
    if isinstance(value, (Symbol, Keyword, Lambda)):
        return str(value)
    if isinstance(value, Builtin):
        return repr(value)
    return f"#<python {value!r}>"


def display(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    return render(value)
