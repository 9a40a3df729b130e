"""
reckon Intermediate Representation (IR) types.

Expression AST nodes and evaluation result values, re-exported here.
"""

from .expressions import (
    I64_MAX,
    I64_MIN,
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)
from .values import Value, ValueKind

__all__ = [
    "I64_MAX",
    "I64_MIN",
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
    "UnaryExpr",
    "UnaryOp",
    "Value",
    "ValueKind",
]
