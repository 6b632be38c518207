"""
intcalc Intermediate Representation (IR) types.

All expression tree types are re-exported from this package.
"""

from .expressions import (
    INT64_MAX,
    INT64_MIN,
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    Negation,
    fits_int64,
    render,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
    "Negation",
    "fits_int64",
    "render",
]
