"""
Top-level entry point: text in, signed 64-bit integer out.
"""

from __future__ import annotations

from intcalc.core.errors import ExpressionError
from intcalc.core.expression_lang.evaluator import evaluate
from intcalc.core.expression_lang.parser import parse_expr


def evaluate_expression(text: str, *, max_depth: int | None = None) -> int:
    """Parse and evaluate an arithmetic expression.

    The tree is built, walked once, and discarded.

    Args:
        text: Expression such as ``"(-300 + 22) / (65 - -12)"``.
        max_depth: Nesting limit; defaults to INTCALC_MAX_DEPTH or 100.

    Returns:
        The result as a Python int within the signed 64-bit range.

    Raises:
        ExpressionError: One of its subclasses, tagged with ``kind``.
        TypeError: If ``text`` is not a str.
    """
    expr = parse_expr(text, max_depth=max_depth)
    try:
        return evaluate(expr)
    except ExpressionError as e:
        e.with_source(text)
        raise
