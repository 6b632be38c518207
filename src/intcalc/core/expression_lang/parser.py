"""
Recursive descent parser for intcalc expressions.

Grammar (precedence low to high):
    expression  → sum END
    sum         → product (("+"|"-") product)*
    product     → unary (("*"|"/") unary)*
    unary       → "-" unary | primary
    primary     → NUMBER | "(" sum ")"

All binary operators are left-associative. Unary minus may stack.
"""

from __future__ import annotations

import logging

from intcalc.core.environment import get_max_depth
from intcalc.core.errors import (
    EmptyInputError,
    ExpressionError,
    NestingTooDeepError,
    UnexpectedTokenError,
)
from intcalc.core.expression_lang.tokenizer import Lexer, Token, TokenKind
from intcalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal, Negation

logger = logging.getLogger(__name__)

_SUM_OPS: dict[str, BinaryOp] = {"+": BinaryOp.ADD, "-": BinaryOp.SUB}
_PRODUCT_OPS: dict[str, BinaryOp] = {"*": BinaryOp.MUL, "/": BinaryOp.DIV}


class _Parser:
    """Recursive descent parser pulling tokens from a Lexer."""

    def __init__(self, lexer: Lexer, max_depth: int) -> None:
        self.lexer = lexer
        self.max_depth = max_depth
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.lexer.current

    def advance(self) -> Token:
        tok = self.lexer.current
        self.lexer.advance()
        return tok

    def expect_symbol(self, char: str, context: str) -> Token:
        tok = self.current
        if not tok.is_symbol(char):
            raise UnexpectedTokenError(
                f"Expected {char!r} {context}, found {tok.describe()}",
                tok.pos,
            )
        return self.advance()

    def _match_op(self, ops: dict[str, BinaryOp]) -> BinaryOp | None:
        tok = self.current
        if tok.kind != TokenKind.SYMBOL:
            return None
        op = ops.get(tok.value)  # type: ignore[arg-type]
        if op is not None:
            self.advance()
        return op

    def _enter(self, tok: Token) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeepError(
                f"Expression nesting exceeds the limit of {self.max_depth}",
                tok.pos,
            )

    def _leave(self) -> None:
        self.depth -= 1

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        """sum END"""
        if self.current.kind == TokenKind.END:
            raise EmptyInputError("Empty expression", self.current.pos)

        expr = self.parse_sum()

        tok = self.current
        if tok.kind != TokenKind.END:
            raise UnexpectedTokenError(
                f"Unexpected {tok.describe()} after expression",
                tok.pos,
            )
        return expr

    def parse_sum(self) -> Expr:
        """product (('+' | '-') product)*"""
        left = self.parse_product()
        while (op := self._match_op(_SUM_OPS)) is not None:
            right = self.parse_product()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_product(self) -> Expr:
        """unary (('*' | '/') unary)*"""
        left = self.parse_unary()
        while (op := self._match_op(_PRODUCT_OPS)) is not None:
            right = self.parse_unary()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_unary(self) -> Expr:
        """'-' unary | primary"""
        tok = self.current
        if tok.is_symbol("-"):
            self._enter(tok)
            self.advance()
            operand = self.parse_unary()
            self._leave()
            return Negation(operand=operand)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        """NUMBER | '(' sum ')'"""
        tok = self.current

        # Parenthesized expression
        if tok.is_symbol("("):
            self._enter(tok)
            self.advance()
            expr = self.parse_sum()
            self.expect_symbol(")", f"to close '(' at position {tok.pos + 1}")
            self._leave()
            return expr

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return Literal(value=tok.value)

        raise UnexpectedTokenError(
            f"Expected a number or '(', found {tok.describe()}",
            tok.pos,
        )


def parse_expr(source: str, *, max_depth: int | None = None) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2 * (3 + 4)")
        max_depth: Nesting limit; defaults to INTCALC_MAX_DEPTH or 100.

    Returns:
        Parsed expression AST.

    Raises:
        EmptyInputError: If the source holds no tokens.
        UnexpectedTokenError: If the expression is malformed.
        NumericOverflowError: If a literal does not fit in 64 bits.
        NestingTooDeepError: If nesting exceeds ``max_depth``.
    """
    if not isinstance(source, str):
        raise TypeError(f"Expression must be a str, got {type(source).__name__}")

    limit = get_max_depth(max_depth)
    try:
        parser = _Parser(Lexer(source), limit)
        try:
            expr = parser.parse_expression()
        except RecursionError:
            raise NestingTooDeepError(
                f"Expression nesting exceeds the interpreter stack at depth {parser.depth}",
                parser.current.pos,
            ) from None
    except ExpressionError as e:
        e.with_source(source)
        raise

    logger.debug("Parsed expression %r", source)
    return expr
