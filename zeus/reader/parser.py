"""
  Lisp Parser

Recursive descent over the token list produced by zeus.reader.lexer.
Emits Python primitives instead of Cons cells:

    - nil, ()       -> [] (the empty list)
    - lists         -> Python list
    - symbols       -> Symbol
    - keywords      -> Keyword
    - strings       -> str (escapes decoded)
    - numbers       -> float
    - 'x            -> [Symbol("quote"), x]

No semantic validation happens here; arity and special-form shape are the
evaluator's business.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional

from zeus import SExpression
from zeus.reader.lexer import Token, tokenize
from zeus.types.errors import (
    ZeusInvalidLiteral,
    ZeusNestingTooDeep,
    ZeusParseError,
    ZeusUnexpectedCloseParen,
    ZeusUnexpectedEOF,
    ZeusUnmatchedParen,
)
from zeus.types.symbol import Keyword, Symbol


QUOTE = Symbol("quote")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}


def unescape(body: str) -> str:
    """Decode backslash escapes; unknown escapes keep their backslash."""
    out: list[str] = []
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch == "\\" and i + 1 < n:
            nxt = body[i + 1]
            out.append(ESCAPES.get(nxt, "\\" + nxt))
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise ZeusUnexpectedEOF("Unexpected end of input")

        if tok.kind == "lparen":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise ZeusUnmatchedParen("Unmatched '('", tok.line, tok.column)
                if nxt.kind == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok.kind == "rparen":
            raise ZeusUnexpectedCloseParen("Unexpected ')'", tok.line, tok.column)

        if tok.kind == "quote":
            if self.at_end():
                raise ZeusUnexpectedEOF("Expected a form after quote", tok.line, tok.column)
            return [QUOTE, self.parse_expr()]

        if tok.kind == "number":
            try:
                value = float(tok.text)
            except ValueError:
                raise ZeusInvalidLiteral(f"Invalid number {tok.text!r}", tok.line, tok.column) from None
            if not math.isfinite(value):
                raise ZeusInvalidLiteral(f"Number out of range {tok.text!r}", tok.line, tok.column)
            return value

        if tok.kind == "string":
            return unescape(tok.text[1:-1])

        if tok.kind == "keyword":
            return Keyword(tok.text[1:])

        if tok.kind == "symbol":
            # Special case for nil
            if tok.text == "nil":
                return []
            return Symbol(tok.text)

        raise ZeusInvalidLiteral(f"Unknown token: {tok.kind} {tok.text}", tok.line, tok.column)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()

    def nesting_error(self) -> ZeusNestingTooDeep:
        """Error for host stack exhaustion, positioned at the last token read."""
        if self.pos == 0:
            return ZeusNestingTooDeep("Lists nested too deeply to read")
        tok = self.tokens[self.pos - 1]
        return ZeusNestingTooDeep("Lists nested too deeply to read", tok.line, tok.column)


def parse(tokens: Iterable[Token]) -> SExpression:
    """Parse exactly one expression from `tokens`."""
    stream = TokenStream(tokens)
    try:
        expr = stream.parse_expr()
    except RecursionError:
        raise stream.nesting_error() from None
    extra = stream.peek()
    if extra is not None:
        if extra.kind == "rparen":
            raise ZeusUnexpectedCloseParen("Unexpected ')'", extra.line, extra.column)
        raise ZeusParseError("Extra tokens after expression", extra.line, extra.column)
    return expr


def parse_all(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse every top-level expression in `tokens`."""
    stream = TokenStream(tokens)
    try:
        return list(stream.parse_all())
    except RecursionError:
        raise stream.nesting_error() from None


def read(source: str) -> SExpression:
    return parse(tokenize(source))


def read_all(source: str) -> list[SExpression]:
    return parse_all(tokenize(source))
