from __future__ import annotations
from typing import Optional


class ZeusError(Exception):
    """ Base class for all Zeus errors"""
    pass


# ---------------------------------------------------------------------------
# Reader errors carry the source position of the offending input.
# ---------------------------------------------------------------------------
class _PositionedError(ZeusError):
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class ZeusTokenizeError(_PositionedError):
    """ Raised when source text cannot be split into tokens"""


class ZeusUnterminatedString(ZeusTokenizeError):
    """ Raised when input ends inside a string literal"""


class ZeusInvalidCharacter(ZeusTokenizeError):
    """ Raised on a character that cannot start or continue any token"""


class ZeusInvalidKeyword(ZeusTokenizeError):
    """ Raised when ':' is not followed by a keyword name"""


class ZeusParseError(_PositionedError):
    """ Raised when tokens do not form a well-shaped expression"""


class ZeusUnexpectedEOF(ZeusParseError):
    """ Raised when the token stream ends while a form is incomplete"""


class ZeusUnmatchedParen(ZeusUnexpectedEOF):
    """ Raised when input ends before a '(' is closed"""


class ZeusUnexpectedCloseParen(ZeusParseError):
    """ Raised on a ')' with no matching '('"""


class ZeusInvalidLiteral(ZeusParseError):
    """ Raised when a literal token cannot be converted to a value"""


class ZeusNestingTooDeep(ZeusParseError):
    """ Raised when lists are nested deeper than the reader can follow"""


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------
class ZeusEvalError(ZeusError):
    """ Base class for errors raised while evaluating a form"""


class ZeusUnboundSymbol(ZeusEvalError):
    """ Raised when a symbol is used before it is bound"""


class ZeusNotAProcedure(ZeusEvalError):
    """ Raised when the head of an application is not a procedure"""


class ZeusTypeError(ZeusEvalError):
    """ Raised when a value has the wrong runtime kind for an operation"""


class ZeusInvalidSymbol(ZeusTypeError):
    """ Raised when something other than a plain symbol is used as a binding name"""


class ZeusArityError(ZeusEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class ZeusDivisionByZero(ZeusEvalError):
    """ Raised when a divisor is zero"""


class ZeusStackDepthExceeded(ZeusEvalError):
    """ Raised when evaluation nests deeper than the configured or host limit"""
