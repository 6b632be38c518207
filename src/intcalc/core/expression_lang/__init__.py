"""
intcalc expression language.

Lexer, parser, and evaluator for integer arithmetic over + - * /,
unary minus, and parentheses.

Usage:
    from intcalc.core.expression_lang import evaluate, parse_expr

    expr = parse_expr("2 * (3 + 4)")
    result = evaluate(expr)
    # result == 14
"""

from intcalc.core.expression_lang.calculator import evaluate_expression
from intcalc.core.expression_lang.evaluator import evaluate
from intcalc.core.expression_lang.parser import parse_expr
from intcalc.core.expression_lang.tokenizer import Lexer, Token, TokenKind, tokenize

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "evaluate",
    "evaluate_expression",
    "parse_expr",
    "tokenize",
]
