"""
  minilisp Parser

Recursive descent over the token stream from minilisp.reader.tokenizer:

    literal token   -> Literal
    symbol token    -> SymbolRef
    ( op arg* )     -> Compound(op, args)

The operator position must hold a symbol token; it is never itself a
compound expression. Nesting deeper than the configured limit is rejected.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from minilisp.config import get_max_depth
from minilisp.errors import MiniLispSyntaxError
from minilisp.reader.tokenizer import LITERAL_KINDS, RPAREN, SYMBOL, Token, lex
from minilisp.types.expression import Compound, Expression, Literal, SymbolRef

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token], max_depth: Optional[int] = None):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self, depth: int = 0) -> Expression:
        token = self.advance()
        if token is None:
            raise MiniLispSyntaxError("Unexpected end of input")

        if token.kind in LITERAL_KINDS:
            return Literal(token.value)

        if token.kind == SYMBOL:
            return SymbolRef(token.value)

        if token.kind == RPAREN:
            raise MiniLispSyntaxError("Unexpected ')'")

        # Only lparen is left
        if depth >= self.max_depth:
            raise MiniLispSyntaxError(
                f"Expression nested deeper than {self.max_depth} levels"
            )

        op = self.advance()
        if op is None:
            raise MiniLispSyntaxError("Unmatched '('")
        if op.kind != SYMBOL:
            raise MiniLispSyntaxError(f"Operator must be a symbol, got {op}")

        args: list[Expression] = []
        while True:
            nxt = self.peek()
            if nxt is None:
                raise MiniLispSyntaxError("Unmatched '('")
            if nxt.kind == RPAREN:
                self.advance()
                break
            args.append(self.parse_expr(depth + 1))
        return Compound(op.value, tuple(args))

    def parse_all(self) -> Iterator[Expression]:
        while not self.at_end():
            yield self.parse_expr()


def _stream(source: str | Iterable[Token], max_depth: Optional[int]) -> TokenStream:
    tokens = lex(source) if isinstance(source, str) else source
    return TokenStream(tokens, max_depth)


def parse(source: str | Iterable[Token], max_depth: Optional[int] = None) -> Expression:
    """Parse exactly one expression, consuming every token."""
    stream = _stream(source, max_depth)
    if stream.at_end():
        raise MiniLispSyntaxError("Empty input")
    try:
        expr = stream.parse_expr()
    except RecursionError:
        raise MiniLispSyntaxError("Expression nested too deeply") from None
    if not stream.at_end():
        raise MiniLispSyntaxError(f"Unexpected token after expression: {stream.peek()}")
    logger.debug("parsed %s", expr)
    return expr


def parse_all(source: str | Iterable[Token], max_depth: Optional[int] = None) -> list[Expression]:
    """Parse every top-level expression in `source`, in order."""
    try:
        return list(_stream(source, max_depth).parse_all())
    except RecursionError:
        raise MiniLispSyntaxError("Expression nested too deeply") from None
