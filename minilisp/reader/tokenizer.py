"""
  minilisp Lexer

- Splits source text on whitespace and parentheses, then classifies each part.
- Parentheses are always tokens of their own; whitespace is only a boundary.
- Double-quoted strings are read as a single part, whitespace and parens included.

    "("            -> lparen
    ")"            -> rparen
    "nil"          -> nil
    "true"/"false" -> bool
    -?[0-9]+       -> integer (only when it fits 32 bits)
    "..."          -> string
    anything else  -> symbol (variable and operator names, verbatim)
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from minilisp import LispValue
from minilisp.errors import MiniLispSyntaxError
from minilisp.types.nil import Nil
from minilisp.types.value import fits_integer

LPAREN = "lparen"
RPAREN = "rparen"
NIL = "nil"
BOOL = "bool"
INTEGER = "integer"
STRING = "string"
SYMBOL = "symbol"

LITERAL_KINDS = frozenset({NIL, BOOL, INTEGER, STRING})

INTEGER_RE = re.compile(r"-?[0-9]+")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


class Token(NamedTuple):
    kind: str
    value: LispValue

    def __str__(self) -> str:
        return f"{self.kind}:{self.value!r}"


def _scan_string(source: str, start: int) -> int:
    """Return the index just past the string literal opening at `start`."""
    pos = start + 1
    n = len(source)
    while pos < n:
        c = source[pos]
        if c == "\\":
            pos += 2
            continue
        if c == '"':
            return pos + 1
        pos += 1
    raise MiniLispSyntaxError(f"Unterminated string literal at {start}")


def split_syntax(source: str) -> Iterator[str]:
    """Yield the raw, non-empty text of each token in `source`."""
    buffer: list[str] = []
    pos = 0
    n = len(source)

    while pos < n:
        c = source[pos]
        if c == '"':
            if buffer:
                yield "".join(buffer)
                buffer.clear()
            end = _scan_string(source, pos)
            yield source[pos:end]
            pos = end
            continue

        if c.isspace():
            if buffer:
                yield "".join(buffer)
                buffer.clear()
        elif c == "(" or c == ")":
            if buffer:
                yield "".join(buffer)
                buffer.clear()
            yield c
        else:
            buffer.append(c)
        pos += 1

    if buffer:
        yield "".join(buffer)


def _decode_string(text: str) -> str:
    body = text[1:-1]
    out: list[str] = []
    chars = iter(body)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        escaped = next(chars)
        if escaped not in ESCAPES:
            raise MiniLispSyntaxError(f"Unknown escape sequence \\{escaped} in {text}")
        out.append(ESCAPES[escaped])
    return "".join(out)


def classify(text: str) -> Token:
    """Turn one raw part into a Token.

    `text` must be non-empty; split_syntax never produces an empty part.
    """
    if not text:
        raise ValueError("Cannot classify an empty token")

    match text:
        case "(":
            return Token(LPAREN, text)
        case ")":
            return Token(RPAREN, text)
        case "true":
            return Token(BOOL, True)
        case "false":
            return Token(BOOL, False)
        case "nil":
            return Token(NIL, Nil)

    if text.startswith('"'):
        return Token(STRING, _decode_string(text))
    if INTEGER_RE.fullmatch(text):
        n = int(text)
        if fits_integer(n):
            return Token(INTEGER, n)
    return Token(SYMBOL, text)


def lex(source: str) -> Iterator[Token]:
    """Token generator over `source`. Call again with new text to re-tokenize."""
    for part in split_syntax(source):
        yield classify(part)


def tokenize(source: str) -> list[Token]:
    return list(lex(source))
