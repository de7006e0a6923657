"""
  Lisp Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits the interpreter's own values:

    - nil / Nil / () -> Nil
    - lists -> chains of Pair cells ending in Nil
    - dotted lists (a b . c) -> chains ending in the final atom
    - numbers -> float
    - everything else -> Symbol
    - 'x -> (quote x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from conslisp import SExpression
from conslisp.types.errors import LispSyntaxError
from conslisp.types.nil import Nil
from conslisp.types.pair import Pair, reverse_in_place
from conslisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s()';]+)"  # numbers, symbols and the dot
    r")",
)

NUMBER_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|nan)"
)

QUOTE = Symbol("quote")
DOT = "."


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples, comments dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # Only trailing whitespace is left
            if source[pos:].strip():
                raise LispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
            break
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def parse_atom(token: str) -> SExpression:
    if token.lower() == "nil":
        return Nil
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Read the next expression, or return None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "atom":
            if tok_val == DOT:
                raise LispSyntaxError("Unexpected '.' outside of a list")
            return parse_atom(tok_val)

        if tok_type == "quote":
            expr = self.parse_expr()
            if expr is None:
                raise LispSyntaxError("Unexpected EOF after quote")
            return Pair(QUOTE, Pair(expr, Nil))

        if tok_type == "lparen":
            return self._parse_list()

        raise LispSyntaxError("Unexpected ')'")

    def _parse_list(self) -> SExpression:
        # Cons elements in reverse, then flip the finished chain in place
        items: SExpression = Nil
        tail: SExpression = Nil
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise LispSyntaxError("Unexpected EOF while parsing list")
            if tok_type == "rparen":
                self.advance()
                break
            if tok_type == "atom" and tok_val == DOT:
                self.advance()
                if items is Nil:
                    raise LispSyntaxError("Dotted list needs an element before '.'")
                tail = self.parse_expr()
                if tail is None:
                    raise LispSyntaxError("Unexpected EOF after '.'")
                tok_type, _ = self.advance()
                if tok_type != "rparen":
                    raise LispSyntaxError("Expected ')' after dotted tail")
                break
            items = Pair(self.parse_expr(), items)

        if items is Nil:
            return Nil
        last = items
        result = reverse_in_place(items)
        last.cdr = tail
        return result

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield every expression in `source`."""
    return TokenStream(lex(source)).parse_all()


def parse(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise LispSyntaxError("Unexpected EOF while parsing")
    if stream.peek() != (None, None):
        raise LispSyntaxError("Unexpected input after expression")
    return expr
