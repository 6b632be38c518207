"""Core intcalc functionality: IR, lexer, parser, evaluator, configuration."""

from . import ir
from .errors import (
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

__all__ = [
    "ir",
    "CalcError",
    "DivisionByZeroError",
    "EmptyInputError",
    "ErrorContext",
    "ErrorKind",
    "ExpressionError",
    "NestingTooDeepError",
    "NumericOverflowError",
    "UnexpectedTokenError",
]
