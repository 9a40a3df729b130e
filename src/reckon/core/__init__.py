"""Core reckon functionality: IR, tokenizer, parser, evaluator."""

from . import ir
from .calculator import evaluate
from .errors import ErrorKind, EvaluationError, ParseError, ReckonError

__all__ = [
    "ir",
    "evaluate",
    "ErrorKind",
    "EvaluationError",
    "ParseError",
    "ReckonError",
]
