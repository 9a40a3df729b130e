"""
Single-call entry point: text in, Value out.

Each call builds a fresh lexer and parser, so calls share no state and the
same input always gives the same result.
"""

from __future__ import annotations

import logging

from reckon.core.expression_lang.evaluator import evaluate_expr
from reckon.core.expression_lang.parser import parse_expr
from reckon.core.ir.values import Value

logger = logging.getLogger(__name__)


def evaluate(source: str) -> Value:
    """Parse and evaluate an arithmetic expression.

    Usage:
        >>> str(evaluate("(1 + 1) * 2 + 4!"))
        '28'

    Raises:
        ParseError: If the text is not a well-formed expression.
        EvaluationError: If the expression has no valid value.
    """
    expr = parse_expr(source)
    result = evaluate_expr(expr)
    logger.debug("Evaluated %s = %s (%s)", expr, result, result.kind)
    return result
