"""
Expression types for the reckon IR.

A closed, typed AST for arithmetic expressions:
- Literals: 64-bit integers and floats
- Binary operations: +, -, *, /, %, ^
- Unary operations: prefix - and +, postfix !

Nodes are frozen and exclusively own their children.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictFloat, StrictInt

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def _require_int64(value: object) -> object:
    """Reject ints outside the 64-bit range before union validation."""
    if isinstance(value, int) and not isinstance(value, bool):
        if not I64_MIN <= value <= I64_MAX:
            raise ValueError(f"{value} does not fit in a 64-bit integer")
    return value


Int64 = Annotated[StrictInt, Field(ge=I64_MIN, le=I64_MAX)]
Number = Annotated[Int64 | StrictFloat, BeforeValidator(_require_int64)]

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    EXPONENTIATE = "^"


class UnaryOp(StrEnum):
    """Unary operators for expressions."""

    NEGATE = "-"
    ASSERT = "+"
    FACTORIAL = "!"

    @property
    def is_postfix(self) -> bool:
        return self is UnaryOp.FACTORIAL


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal: a 64-bit integer or a float."""

    value: Number = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    def __str__(self) -> str:
        return repr(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class UnaryExpr(BaseModel):
    """Unary operation: op operand, or operand op for postfix operators."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.op.is_postfix:
            return f"({self.operand}){self.op.value}"
        return f"{self.op.value}({self.operand})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | BinaryExpr | UnaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()
