"""
  minirack Reader, Lexer and Parser

- Streaming, lazy lexing
- Emits the core expression types directly:

    - integers -> int
    - #t / #true / #f / #false -> TRUE / FALSE
    - symbols -> Symbol
    - ( ... ) and [ ... ] -> Cons cells ending in EMPTY, () -> EMPTY
    - 'x -> (quote x)
    - ; comments run to the end of the line
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from minirack import Expression
from minirack.errors import MinirackSyntaxError
from minirack.types.boolean import TRUE, FALSE
from minirack.types.cons import Cons
from minirack.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>[(\[])"  # ( or [
    r"|(?P<rparen>[)\]])"  # ) or ]
    r"|(?P<symbol>[^\s()\[\]';\"]+)"  # atoms: numbers, booleans, symbols
)

INTEGER_RE = re.compile(r"[+-]?\d+")

CLOSERS: dict[str, str] = {"(": ")", "[": "]"}

LITERALS: dict[str, Expression] = {
    "#t": TRUE,
    "#true": TRUE,
    "#f": FALSE,
    "#false": FALSE,
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise MinirackSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind in ("whitespace", "comment"):
            continue
        yield kind, m.group(kind)


def read_atom(token: str) -> Expression:
    if INTEGER_RE.fullmatch(token):
        return int(token)
    if token.startswith("#"):
        try:
            return LITERALS[token.lower()]
        except KeyError:
            raise MinirackSyntaxError(f"Unknown literal: {token}") from None
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
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

    def parse_expr(self) -> Optional[Expression]:
        """Read one expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return read_atom(tok_val)

        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise MinirackSyntaxError("Expected an expression after quote")
            return Cons.from_iterable([QUOTE, expr])

        if tok_type == "lparen":
            self.advance()
            closer = CLOSERS[tok_val]
            items = []
            while True:
                next_type, next_val = self.peek()
                if next_type is None:
                    raise MinirackSyntaxError(f"Unmatched '{tok_val}'")
                if next_type == "rparen":
                    self.advance()
                    if next_val != closer:
                        raise MinirackSyntaxError(
                            f"Expected '{closer}' to close '{tok_val}', got '{next_val}'"
                        )
                    break
                items.append(self.parse_expr())
            return Cons.from_iterable(items)

        if tok_type == "rparen":
            raise MinirackSyntaxError(f"Unexpected '{tok_val}'")

        raise MinirackSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> list[Expression]:
    """Read every top-level expression in `source`.

    The whole text is read before anything is returned, so a syntax error
    anywhere means no expression from this chunk is evaluated.
    """
    return list(TokenStream(lex(source)).parse_all())


def needs_more_input(source: str) -> bool:
    """True while `source` has more open brackets than closing ones."""
    depth = 0
    try:
        for tok_type, _ in lex(source):
            if tok_type == "lparen":
                depth += 1
            elif tok_type == "rparen":
                depth -= 1
    except MinirackSyntaxError:
        return False
    return depth > 0
