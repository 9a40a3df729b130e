"""
Error types for reckon parsing and evaluation.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """The two failure families an evaluation can end in."""

    PARSE = "parse"
    VALUE = "value"


class ReckonError(Exception):
    """Base exception for all reckon errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ParseError(ReckonError):
    """
    Raised when input text cannot be turned into an expression.

    Examples:
    - Unknown character
    - Unexpected token or end of input
    - Missing closing parenthesis
    - Integer literal that does not fit in 64 bits
    """

    kind = ErrorKind.PARSE


class EvaluationError(ReckonError):
    """
    Raised when a well-formed expression has no valid value.

    Examples:
    - Integer overflow on add, multiply, power or factorial
    - Integer division or modulo by zero
    - Factorial of a negative or non-integer number
    """

    kind = ErrorKind.VALUE
