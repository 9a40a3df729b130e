"""
reckon - arithmetic expression evaluator.

Tokenizes, parses (Pratt / precedence climbing) and evaluates a single
arithmetic expression to an integer or float value.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.calculator import evaluate
from .core.errors import ErrorKind, EvaluationError, ParseError, ReckonError
from .core.expression_lang import parse_expr
from .core.ir import Value, ValueKind

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "parse_expr",
    "Value",
    "ValueKind",
    "ErrorKind",
    "ReckonError",
    "ParseError",
    "EvaluationError",
]
