"""
Expression evaluator for the reckon expression language.

Reduces an expression AST to a single Value by a post-order tree walk.
Pure evaluation: no I/O, no state between calls. Integers stay within the
signed 64-bit range; floats follow IEEE 754, so float division by zero or
overflow yields inf/nan rather than an error.
"""

from __future__ import annotations

import math

from reckon.core.errors import EvaluationError
from reckon.core.ir.expressions import (
    I64_MAX,
    I64_MIN,
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)
from reckon.core.ir.values import Value

_OVERFLOW = "Integer overflow"
_DIV_ZERO = "Can't divide by zero"


def evaluate_expr(expr: Expr) -> Value:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed Value, integer or float.

    Raises:
        EvaluationError: On integer overflow, integer division by zero, or
            an invalid factorial argument.
    """
    return _interpret(expr)


def _interpret(expr: Expr) -> Value:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Literal):
        return Value.from_literal(expr)

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr)

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr)

    raise EvaluationError(f"Unknown expression type: {type(expr).__name__}")


# ---------------------------------------------------------------------------
# 64-bit integer helpers
# ---------------------------------------------------------------------------


def _checked(n: int) -> int:
    if n < I64_MIN or n > I64_MAX:
        raise EvaluationError(_OVERFLOW)
    return n


def _wrapping(n: int) -> int:
    """Two's complement wrap into the i64 range."""
    return (n - I64_MIN) % 2**64 + I64_MIN


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _checked_pow(base: int, exp: int) -> int:
    # |base| >= 2 overflows i64 for any exp >= 64
    if base in (0, 1):
        return 1 if exp == 0 else base
    if base == -1:
        return 1 if exp % 2 == 0 else -1
    if exp >= 64:
        raise EvaluationError(_OVERFLOW)
    return _checked(base**exp)


# ---------------------------------------------------------------------------
# IEEE 754 float helpers
# ---------------------------------------------------------------------------


def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _float_mod(a: float, b: float) -> float:
    if b == 0.0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == int(x) and int(x) % 2 == 1


def _float_pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        # Domain errors: zero to a negative power, negative base to a fraction
        if a == 0.0:
            if math.copysign(1.0, a) < 0 and _is_odd_integer(b):
                return -math.inf
            return math.inf
        return math.nan


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


def _interpret_binary(expr: BinaryExpr) -> Value:
    """Evaluate a binary expression, promoting to float if either side is one."""
    left = _interpret(expr.left)
    right = _interpret(expr.right)

    if left.is_integer and right.is_integer:
        if expr.op == BinaryOp.EXPONENTIATE and right.number < 0:
            return Value.floating(_float_pow(left.as_float(), right.as_float()))
        return Value.integer(_integer_op(expr.op, left.number, right.number))
    return _float_op(expr.op, left.as_float(), right.as_float())


def _integer_op(op: BinaryOp, a: int, b: int) -> int:
    if op == BinaryOp.ADD:
        return _checked(a + b)
    if op == BinaryOp.SUBTRACT:
        return _wrapping(a - b)
    if op == BinaryOp.MULTIPLY:
        return _checked(a * b)
    if op == BinaryOp.DIVIDE:
        if b == 0:
            raise EvaluationError(_DIV_ZERO)
        return _wrapping(_trunc_div(a, b))
    if op == BinaryOp.MODULO:
        if b == 0:
            raise EvaluationError(_DIV_ZERO)
        # Remainder takes the sign of the dividend
        return a - b * _trunc_div(a, b)
    if op == BinaryOp.EXPONENTIATE:
        return _checked_pow(a, b)
    raise EvaluationError(f"Unknown binary op: {op}")


def _float_op(op: BinaryOp, a: float, b: float) -> Value:
    if op == BinaryOp.ADD:
        return Value.floating(a + b)
    if op == BinaryOp.SUBTRACT:
        return Value.floating(a - b)
    if op == BinaryOp.MULTIPLY:
        return Value.floating(a * b)
    if op == BinaryOp.DIVIDE:
        return Value.floating(_float_div(a, b))
    if op == BinaryOp.MODULO:
        return Value.floating(_float_mod(a, b))
    if op == BinaryOp.EXPONENTIATE:
        return Value.floating(_float_pow(a, b))
    raise EvaluationError(f"Unknown binary op: {op}")


def _interpret_unary(expr: UnaryExpr) -> Value:
    """Evaluate a unary expression."""
    val = _interpret(expr.operand)
    if expr.op == UnaryOp.ASSERT:
        return val
    if expr.op == UnaryOp.NEGATE:
        if val.is_integer:
            return Value.integer(_wrapping(-val.number))
        return Value.floating(-val.number)
    if expr.op == UnaryOp.FACTORIAL:
        return _factorial(val)
    raise EvaluationError(f"Unknown unary op: {expr.op}")


def _factorial(val: Value) -> Value:
    if not val.is_integer:
        raise EvaluationError(f"Can't take factorial of {val}")
    if val.number < 0:
        raise EvaluationError("Can't take factorial of negative number")
    product = 1
    for i in range(2, val.number + 1):
        # Exceeds i64 from 21! on, so the loop never runs long
        product = _checked(product * i)
    return Value.integer(product)
