"""
Tokenizer for intcalc expressions.

The Lexer is pull-based: it holds exactly one current token and a cursor
into the source, and ``advance()`` replaces the current token with the
next one. The parser drives it directly, so no token list is built
during parsing. ``tokenize()`` drains a Lexer for inspection.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

from intcalc.core.errors import NumericOverflowError
from intcalc.core.ir.expressions import INT64_MAX


class TokenKind(StrEnum):
    """Token types for the expression language."""

    NUMBER = auto()
    SYMBOL = auto()

    # End of input
    END = auto()


class Token:
    """A single token from the expression lexer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: int | str | None, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def is_symbol(self, char: str) -> bool:
        return self.kind == TokenKind.SYMBOL and self.value == char

    def describe(self) -> str:
        """Short human-readable form used in error messages."""
        if self.kind == TokenKind.END:
            return "end of input"
        if self.kind == TokenKind.NUMBER:
            return f"number {self.value}"
        return f"symbol {self.value!r}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.value, self.pos) == (other.kind, other.value, other.pos)

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.pos))

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


# ASCII digits only; str.isdigit() also accepts other scripts' digits
_NUMBER_RE = re.compile(r"[0-9]+")
_INT64_DIGITS = len(str(INT64_MAX))


def _abbreviate(digits: str, limit: int = 32) -> str:
    if len(digits) <= limit:
        return digits
    return f"{digits[:limit]}... ({len(digits)} digits)"


class Lexer:
    """Single-token lookahead cursor over an expression string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._cursor = 0
        self._current = self._scan()

    @property
    def current(self) -> Token:
        return self._current

    def advance(self) -> None:
        """Replace the current token with the next one. END is sticky."""
        if self._current.kind != TokenKind.END:
            self._current = self._scan()

    def _scan(self) -> Token:
        source = self.source
        n = len(source)
        i = self._cursor

        # Skip spaces
        while i < n and source[i] == " ":
            i += 1

        if i >= n:
            self._cursor = n
            return Token(TokenKind.END, None, n)

        m = _NUMBER_RE.match(source, i)
        if m is not None:
            digits = m.group(0)
            # int() refuses very long digit strings, so check the length first
            significant = digits.lstrip("0") or "0"
            if len(significant) > _INT64_DIGITS or int(significant) > INT64_MAX:
                raise NumericOverflowError(
                    f"Integer literal {_abbreviate(digits)} does not fit in 64 bits",
                    i,
                )
            value = int(significant)
            self._cursor = m.end()
            return Token(TokenKind.NUMBER, value, i)

        self._cursor = i + 1
        return Token(TokenKind.SYMBOL, source[i], i)


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens, END included."""
    lexer = Lexer(source)
    tokens = [lexer.current]
    while lexer.current.kind != TokenKind.END:
        lexer.advance()
        tokens.append(lexer.current)
    return tokens
