"""
Expression evaluator for intcalc.

Folds an expression tree into one signed 64-bit integer. Pure evaluation,
no I/O and no side effects. Does NOT use Python's eval().

The walk is post-order with the left operand evaluated before the right.
It runs on an explicit stack so left-deep trees built from long operator
chains cannot exhaust the interpreter's call stack.
"""

from __future__ import annotations

import logging

from intcalc.core.errors import DivisionByZeroError, NumericOverflowError
from intcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    Negation,
    fits_int64,
)

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> int:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value, always within the signed 64-bit range.

    Raises:
        DivisionByZeroError: If a divisor evaluates to 0.
        NumericOverflowError: If any intermediate result leaves 64 bits.
    """
    result = _interpret(expr)
    logger.debug("Evaluated expression to %d", result)
    return result


def _interpret(root: Expr) -> int:
    """Post-order fold over the tree.

    ``pending`` holds (node, visited) pairs; a node is pushed unvisited,
    then re-pushed visited above its children. Visiting a node pops its
    operand values from ``values``.
    """
    pending: list[tuple[Expr, bool]] = [(root, False)]
    values: list[int] = []

    while pending:
        node, visited = pending.pop()

        if isinstance(node, Literal):
            values.append(node.value)

        elif isinstance(node, Negation):
            if visited:
                values.append(_checked(-values.pop(), node))
            else:
                pending.append((node, True))
                pending.append((node.operand, False))

        elif isinstance(node, BinaryExpr):
            if visited:
                right = values.pop()
                left = values.pop()
                values.append(_apply(node, left, right))
            else:
                pending.append((node, True))
                # Right pushed first so the left subtree is evaluated first
                pending.append((node.right, False))
                pending.append((node.left, False))

        else:
            raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _apply(node: BinaryExpr, left: int, right: int) -> int:
    """Evaluate one binary operator over already computed operands."""
    if node.op == BinaryOp.ADD:
        return _checked(left + right, node)
    if node.op == BinaryOp.SUB:
        return _checked(left - right, node)
    if node.op == BinaryOp.MUL:
        return _checked(left * right, node)
    if node.op == BinaryOp.DIV:
        if right == 0:
            raise DivisionByZeroError("Division by zero")
        return _checked(truncating_div(left, right), node)

    raise ValueError(f"Unknown binary op: {node.op}")


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero, like C's ``/``.

    Python's ``//`` floors instead, so -7 // 2 == -4 while this returns -3.
    """
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _checked(value: int, node: Expr) -> int:
    if not fits_int64(value):
        raise NumericOverflowError(f"Result of {_describe(node)} does not fit in 64 bits")
    return value


def _describe(node: Expr) -> str:
    # Operands may be arbitrarily deep; name only the operator
    if isinstance(node, BinaryExpr):
        return f"'{node.op.value}'"
    if isinstance(node, Negation):
        return "unary '-'"
    return str(node)
