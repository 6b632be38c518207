"""
intcalc - integer arithmetic expression evaluator.

Lexes, parses, and evaluates expressions built from integer literals,
+ - * /, unary minus, and parentheses into a signed 64-bit result.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    CalcError,
    DivisionByZeroError,
    EmptyInputError,
    ErrorKind,
    ExpressionError,
    NestingTooDeepError,
    NumericOverflowError,
    UnexpectedTokenError,
)
from .core.expression_lang import (
    Lexer,
    Token,
    TokenKind,
    evaluate,
    evaluate_expression,
    parse_expr,
    tokenize,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "evaluate_expression",
    "evaluate",
    "parse_expr",
    "tokenize",
    "Lexer",
    "Token",
    "TokenKind",
    "CalcError",
    "ExpressionError",
    "ErrorKind",
    "NumericOverflowError",
    "UnexpectedTokenError",
    "EmptyInputError",
    "DivisionByZeroError",
    "NestingTooDeepError",
]
