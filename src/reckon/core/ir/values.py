"""
Evaluation results for the reckon IR.

A Value is either a 64-bit integer or a float. The kind is carried
explicitly so that ``Integer(2)`` and ``Float(2.0)`` never compare equal.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

from reckon.core.ir.expressions import Literal, Number


class ValueKind(StrEnum):
    """Numeric kinds a value can have."""

    INTEGER = "integer"
    FLOAT = "float"


class Value(BaseModel):
    """The result of evaluating an expression."""

    kind: ValueKind
    number: Number

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _kind_matches_number(self) -> Value:
        if (self.kind == ValueKind.INTEGER) != isinstance(self.number, int):
            raise ValueError(f"{self.kind} value cannot hold {self.number!r}")
        return self

    @classmethod
    def integer(cls, number: int) -> Value:
        return cls(kind=ValueKind.INTEGER, number=number)

    @classmethod
    def floating(cls, number: float) -> Value:
        return cls(kind=ValueKind.FLOAT, number=float(number))

    @classmethod
    def from_literal(cls, literal: Literal) -> Value:
        """Convert a literal 1:1 into the matching value kind."""
        if literal.is_integer:
            return cls.integer(literal.value)
        return cls.floating(literal.value)

    @property
    def is_integer(self) -> bool:
        return self.kind == ValueKind.INTEGER

    def as_float(self) -> float:
        return float(self.number)

    def __str__(self) -> str:
        # repr() is the shortest round-trip form for floats
        return repr(self.number)
