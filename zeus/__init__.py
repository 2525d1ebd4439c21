# Core type aliases for the Zeus data model.
# Plain Python types carry both code (forms) and runtime values:
#   numbers -> float, strings -> str, lists -> list (the empty list is nil).
# Symbols, keywords and procedures have their own classes under zeus.types.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

# Evaluator function type: the evaluator handed to special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]
