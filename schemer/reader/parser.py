"""
  schemer Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of Cons cells:

    - #t / #f -> True / False
    - integers -> int
    - symbols -> Symbol
    - strings -> str (backslash escapes are kept verbatim; display unescapes)
    - lists -> Python list
    - dotted lists -> (list_part, tail)
    - 'x -> [Symbol("quote"), x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional
from schemer.errors import SchemeIncompleteInput, SchemeSyntaxError
from schemer import SExpression
from schemer.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<unterminated>\"[^\n]*)"  # string without a closing quote
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols, numbers, booleans
    r")",
    re.DOTALL,
)

QUOTE = Symbol("quote")
_INT_RE = re.compile(r"[+-]?\d+")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples, comments dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            if source[pos:].strip() == "":
                return
            raise SchemeSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = next(nm for nm in TOKEN_RE.groupindex if m.group(nm) is not None)
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise SchemeIncompleteInput(f"Unterminated string at {m.start(kind)}")
        yield kind, m.group(kind)


def _atom(tok_val: str) -> SExpression:
    if tok_val == "#t":
        return True
    if tok_val == "#f":
        return False
    if _INT_RE.fullmatch(tok_val):
        return int(tok_val)
    return Symbol(tok_val)


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

    def parse_expr(self) -> SExpression:
        """Parse one expression; returns None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return _atom(tok_val)

        if tok_type == "string":
            self.advance()
            return tok_val[1:-1]

        if tok_type == "quote":
            self.advance()
            if self.peek()[0] is None:
                raise SchemeIncompleteInput("Expected an expression after quote")
            return [QUOTE, self.parse_expr()]

        # List or dotted list
        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                if self.peek()[0] == "rparen":
                    self.advance()
                    break
                if self.peek()[0] is None:
                    raise SchemeIncompleteInput("Unmatched '('")
                if self.peek() == ("symbol", "."):
                    self.advance()
                    if not items:
                        raise SchemeSyntaxError("Dotted list needs at least one element before '.'")
                    if self.peek()[0] in (None, "rparen"):
                        raise SchemeSyntaxError("Expected an expression after '.'")
                    cdr_expr = self.parse_expr()
                    if self.peek()[0] != "rparen":
                        raise SchemeSyntaxError("Expected ')' after dotted cdr")
                    self.advance()
                    if isinstance(cdr_expr, list):
                        return items + cdr_expr  # (a . (b c)) is just (a b c)
                    if isinstance(cdr_expr, tuple):
                        return items + cdr_expr[0], cdr_expr[1]
                    return items, cdr_expr  # tuple for a dotted list
                items.append(self.parse_expr())
            return items

        if tok_type == "rparen":
            raise SchemeSyntaxError("Unexpected ')'")

        raise SchemeSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse_all(source: str) -> list[SExpression]:
    """Read every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def parse(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    exprs = parse_all(source)
    if len(exprs) != 1:
        raise SchemeSyntaxError(f"Expected exactly one expression, found {len(exprs)}")
    return exprs[0]
