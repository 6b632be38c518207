"""Tests for error types and their formatting."""

from __future__ import annotations

from intcalc.core.errors import (
    CalcError,
    DivisionByZeroError,
    EmptyInputError,
    ErrorContext,
    ErrorKind,
    ExpressionError,
    NestingTooDeepError,
    NumericOverflowError,
    UnexpectedTokenError,
)


class TestErrorContext:
    def test_location_only(self) -> None:
        assert ErrorContext(pos=4).format() == "at position 5"

    def test_snippet_marker(self) -> None:
        context = ErrorContext(pos=2, source="1 $ 2")
        assert context.format() == "at position 3\n  | 1 $ 2\n      ^"


class TestExpressionError:
    def test_kinds(self) -> None:
        assert NumericOverflowError("x").kind == ErrorKind.NUMERIC_OVERFLOW
        assert UnexpectedTokenError("x").kind == ErrorKind.UNEXPECTED_TOKEN
        assert EmptyInputError("x").kind == ErrorKind.EMPTY_INPUT
        assert DivisionByZeroError("x").kind == ErrorKind.DIVISION_BY_ZERO
        assert NestingTooDeepError("x").kind == ErrorKind.NESTING_TOO_DEEP

    def test_hierarchy(self) -> None:
        error = UnexpectedTokenError("bad", 0)
        assert isinstance(error, ExpressionError)
        assert isinstance(error, CalcError)

    def test_message_with_position(self) -> None:
        error = UnexpectedTokenError("Unexpected symbol '$'", 2)
        assert error.message == "Unexpected symbol '$'"
        assert str(error) == "Unexpected symbol '$' at position 3"

    def test_with_source_adds_snippet(self) -> None:
        error = UnexpectedTokenError("Unexpected symbol '$'", 2).with_source("1 $ 2")
        assert str(error).splitlines() == [
            "Unexpected symbol '$' at position 3",
            "  | 1 $ 2",
            "      ^",
        ]

    def test_with_source_without_position(self) -> None:
        error = DivisionByZeroError("Division by zero").with_source("1/0")
        assert str(error) == "Division by zero"
        assert error.context is None

    def test_kind_is_plain_string(self) -> None:
        assert f"{ErrorKind.EMPTY_INPUT}" == "empty_input"
