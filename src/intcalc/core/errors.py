"""
Error types for intcalc lexing, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class CalcError(Exception):
    """Base exception for all intcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message} {self.context.format()}"
        return self.message


class ErrorKind(StrEnum):
    """Tag identifying what went wrong while evaluating an expression."""

    NUMERIC_OVERFLOW = "numeric_overflow"
    UNEXPECTED_TOKEN = "unexpected_token"
    EMPTY_INPUT = "empty_input"
    DIVISION_BY_ZERO = "division_by_zero"
    NESTING_TOO_DEEP = "nesting_too_deep"


@dataclass
class ErrorContext:
    """
    Location of an error inside the expression text.

    Attributes:
        pos: 0-based offset of the offending character
        source: The full expression text, if known
    """

    pos: int
    source: str | None = None

    @property
    def column(self) -> int:
        """1-indexed column of the error."""
        return self.pos + 1

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "at position 4" plus a snippet when
            the source is known.
        """
        location = f"at position {self.column}"
        if self.source is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Source line with a caret under the error column."""
        prefix = "  | "
        marker = " " * (len(prefix) + self.pos) + "^"
        return f"{prefix}{self.source}\n{marker}"


class ExpressionError(CalcError):
    """
    Raised when an expression cannot be evaluated.

    Every subclass sets ``kind`` so callers can branch on the tag without
    matching on class names.
    """

    kind: ErrorKind

    def __init__(self, message: str, pos: int | None = None, source: str | None = None):
        self.pos = pos
        context = ErrorContext(pos=pos, source=source) if pos is not None else None
        super().__init__(message, context)

    def with_source(self, source: str) -> ExpressionError:
        """Attach the expression text so the message can show a snippet."""
        if self.context is not None and self.context.source is None:
            self.context.source = source
            self.args = (self._format_message(),)
        return self


class NumericOverflowError(ExpressionError):
    """A literal or an intermediate result left the signed 64-bit range."""

    kind = ErrorKind.NUMERIC_OVERFLOW


class UnexpectedTokenError(ExpressionError):
    """
    Raised when the parser finds a token it cannot use.

    Examples:
    - A dangling operator: ``1+``
    - An unclosed parenthesis: ``(1``
    - Garbage characters: ``1 $ 2``
    - Trailing input after a complete expression: ``1)2``
    """

    kind = ErrorKind.UNEXPECTED_TOKEN


class EmptyInputError(ExpressionError):
    """The input holds no tokens at all."""

    kind = ErrorKind.EMPTY_INPUT


class DivisionByZeroError(ExpressionError):
    """The right operand of a division evaluated to zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


class NestingTooDeepError(ExpressionError):
    """Parentheses or stacked unary minuses exceed the configured depth."""

    kind = ErrorKind.NESTING_TOO_DEEP
