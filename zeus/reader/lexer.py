"""
  Lisp Lexer

Splits source text into a flat list of Tokens, in source order:

    - ( and )               -> lparen / rparen
    - '                     -> quote (reader shorthand for (quote x))
    - "..."                 -> string (raw lexeme, escapes decoded by the parser)
    - [+-]digits[.digits]   -> number
    - :name                 -> keyword
    - anything else         -> symbol (case-sensitive)

Whitespace and `;` line comments are discarded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from zeus.types.errors import ZeusInvalidCharacter, ZeusInvalidKeyword, ZeusUnterminatedString


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<atom>[^\s()\"';\x00-\x1f\x7f]+)",  # numbers, keywords, symbols
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)\Z")

SKIPPED = ("whitespace", "comment")


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    offset: int
    line: int
    column: int


def classify_atom(text: str) -> str:
    """Return the token kind for a run of non-delimiter characters."""
    if NUMBER_RE.match(text):
        return "number"
    if text.startswith(":"):
        return "keyword"
    return "symbol"


def tokenize(source: str) -> list[Token]:
    """Tokenize `source`, raising a ZeusTokenizeError subclass on bad input."""
    tokens: list[Token] = []
    pos = 0
    n = len(source)
    line = 1
    line_start = 0

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        column = pos - line_start + 1
        if not m:
            if source[pos] == '"':
                raise ZeusUnterminatedString("Unterminated string", line, column)
            raise ZeusInvalidCharacter(f"Unexpected character {source[pos]!r}", line, column)

        kind = m.lastgroup
        text = m.group()
        if kind not in SKIPPED:
            if kind == "atom":
                kind = classify_atom(text)
                if kind == "keyword" and len(text) == 1:
                    raise ZeusInvalidKeyword("Invalid keyword: empty name after ':'", line, column)
            tokens.append(Token(kind, text, pos, line, column))

        # Track line/column across newlines inside whitespace or strings
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = m.end()

    return tokens
