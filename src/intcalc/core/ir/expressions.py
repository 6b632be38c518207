"""
Expression tree types for intcalc.

The tree is a closed union of three node classes:

- Literal: a signed 64-bit integer constant
- Negation: unary minus over one operand
- BinaryExpr: +, -, *, / over two operands

Nodes are frozen pydantic models. The parser creates children before
their parent, so a finished tree is immutable and never shares a node
between two parents.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Integer range
# ---------------------------------------------------------------------------

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def fits_int64(value: int) -> bool:
    """True if value is representable as a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """An integer constant."""

    value: int = Field(ge=INT64_MIN, le=INT64_MAX, description="The literal value")

    model_config = ConfigDict(frozen=True, strict=True)

    def __str__(self) -> str:
        return str(self.value)


class Negation(BaseModel):
    """Unary minus: -operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | Negation | BinaryExpr

# Rebuild models for recursive forward references
Negation.model_rebuild()
BinaryExpr.model_rebuild()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render(root: Expr) -> str:
    """Fully parenthesized text form of a tree, e.g. ``((1 + 2) * -3)``.

    Built on an explicit stack: operator chains such as ``1+1+...+1``
    produce left-deep trees far deeper than the interpreter's call stack.
    """
    pending: list[tuple[Expr, bool]] = [(root, False)]
    parts: list[str] = []

    while pending:
        node, visited = pending.pop()

        if isinstance(node, Literal):
            parts.append(str(node.value))

        elif isinstance(node, Negation):
            if visited:
                parts.append(f"-{parts.pop()}")
            else:
                pending.append((node, True))
                pending.append((node.operand, False))

        elif isinstance(node, BinaryExpr):
            if visited:
                right = parts.pop()
                left = parts.pop()
                parts.append(f"({left} {node.op.value} {right})")
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))

        else:
            raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return parts.pop()
