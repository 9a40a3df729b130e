"""
Operator-precedence (Pratt) parser for the reckon expression language.

Operators, tightest binding first:
    prefix  "+" "-"         prec 9, right-assoc   (assert, negate)
    postfix "!"             prec 8, left-assoc    (factorial)
    infix   "^"             prec 7, right-assoc
    infix   "*" "/" "%"     prec 6, left-assoc
    infix   "+" "-"         prec 5, left-assoc

    atom    → NUMBER | "(" expr ")"

An operand is parsed at ``prec + assoc`` where left = 1 and right = 0, so
left-associative operators stop at their own precedence and
right-associative ones nest (``2^3^2`` is ``2^(3^2)``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from reckon.core.errors import ParseError
from reckon.core.expression_lang.tokenizer import Lexer, Token, TokenKind
from reckon.core.ir.expressions import (
    I64_MAX,
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)

logger = logging.getLogger(__name__)

# Decimal digits in I64_MAX; longer literals are out of range without converting
_I64_DIGITS = len(str(I64_MAX))

ASSOC_LEFT = 1
ASSOC_RIGHT = 0


class PrefixOperator(Enum):
    """Operators that appear before their operand."""

    PLUS = (TokenKind.PLUS, UnaryOp.ASSERT)
    MINUS = (TokenKind.MINUS, UnaryOp.NEGATE)

    def __init__(self, token_kind: TokenKind, op: UnaryOp) -> None:
        self.token_kind = token_kind
        self.op = op

    @property
    def prec(self) -> int:
        return 9

    @property
    def assoc(self) -> int:
        return ASSOC_RIGHT

    def build(self, operand: Expr) -> Expr:
        return UnaryExpr(op=self.op, operand=operand)


class PostfixOperator(Enum):
    """Operators that follow their operand."""

    FACTORIAL = (TokenKind.BANG, UnaryOp.FACTORIAL)

    def __init__(self, token_kind: TokenKind, op: UnaryOp) -> None:
        self.token_kind = token_kind
        self.op = op

    @property
    def prec(self) -> int:
        return 8

    @property
    def assoc(self) -> int:
        return ASSOC_LEFT

    def build(self, operand: Expr) -> Expr:
        return UnaryExpr(op=self.op, operand=operand)


class InfixOperator(Enum):
    """Operators between two operands."""

    ADD = (TokenKind.PLUS, BinaryOp.ADD, 5, ASSOC_LEFT)
    SUBTRACT = (TokenKind.MINUS, BinaryOp.SUBTRACT, 5, ASSOC_LEFT)
    MULTIPLY = (TokenKind.STAR, BinaryOp.MULTIPLY, 6, ASSOC_LEFT)
    DIVIDE = (TokenKind.SLASH, BinaryOp.DIVIDE, 6, ASSOC_LEFT)
    MODULO = (TokenKind.PERCENT, BinaryOp.MODULO, 6, ASSOC_LEFT)
    EXPONENTIATE = (TokenKind.CARET, BinaryOp.EXPONENTIATE, 7, ASSOC_RIGHT)

    def __init__(self, token_kind: TokenKind, op: BinaryOp, prec: int, assoc: int) -> None:
        self.token_kind = token_kind
        self.op = op
        self.prec = prec
        self.assoc = assoc

    def build(self, left: Expr, right: Expr) -> Expr:
        return BinaryExpr(op=self.op, left=left, right=right)


Operator = PrefixOperator | PostfixOperator | InfixOperator

_PREFIX: dict[TokenKind, PrefixOperator] = {o.token_kind: o for o in PrefixOperator}
_POSTFIX: dict[TokenKind, PostfixOperator] = {o.token_kind: o for o in PostfixOperator}
_INFIX: dict[TokenKind, InfixOperator] = {o.token_kind: o for o in InfixOperator}

_DISPLAY: dict[TokenKind, str] = {TokenKind.LPAREN: "(", TokenKind.RPAREN: ")"}


class _Parser:
    """Precedence-climbing parser over a lazy token stream."""

    def __init__(self, source: str) -> None:
        self.lexer = Lexer(source)
        # One-token lookahead: a Token, a pending lexer error, or None when unfilled
        self._peeked: Token | ParseError | None = None
        self._exhausted = False

    def peek(self) -> Token | ParseError | None:
        """Return the next token (or its lexer error) without consuming it."""
        if self._peeked is None and not self._exhausted:
            try:
                self._peeked = next(self.lexer)
            except StopIteration:
                self._exhausted = True
            except ParseError as e:
                self._peeked = e
        return self._peeked

    def advance(self) -> Token:
        tok = self.peek()
        self._peeked = None
        if tok is None:
            raise ParseError("Unexpected end of input")
        if isinstance(tok, ParseError):
            raise tok
        return tok

    def expect(self, kind: TokenKind) -> Token:
        tok = self.advance()
        if tok.kind != kind:
            raise ParseError(f"Expected token {_DISPLAY.get(kind, kind)}, found {tok}")
        return tok

    def match_operator(self, table: Mapping[TokenKind, Operator], min_prec: int) -> Any:
        """Consume and return the operator for the next token if it binds at min_prec."""
        tok = self.peek()
        if not isinstance(tok, Token):
            # End of input, or a lexer error left for the next advance()
            return None
        operator = table.get(tok.kind)
        if operator is None or operator.prec < min_prec:
            return None
        self.advance()
        return operator

    # -- Grammar rules --

    def parse_expr(self, min_prec: int = 0) -> Expr:
        prefix = self.match_operator(_PREFIX, min_prec)
        if prefix is not None:
            lhs = prefix.build(self.parse_expr(prefix.prec + prefix.assoc))
        else:
            lhs = self.parse_atom()

        while (postfix := self.match_operator(_POSTFIX, min_prec)) is not None:
            lhs = postfix.build(lhs)

        while (infix := self.match_operator(_INFIX, min_prec)) is not None:
            lhs = infix.build(lhs, self.parse_expr(infix.prec + infix.assoc))

        return lhs

    def parse_atom(self) -> Expr:
        """NUMBER | '(' expr ')'"""
        tok = self.advance()

        if tok.kind == TokenKind.NUMBER:
            return _parse_number(tok.value)

        if tok.kind == TokenKind.LPAREN:
            expr = self.parse_expr(0)
            self.expect(TokenKind.RPAREN)
            return expr

        raise ParseError(f"Expected expression atom, found {tok}")

    def expect_end(self) -> None:
        tok = self.peek()
        if isinstance(tok, ParseError):
            raise tok
        if tok is not None:
            raise ParseError(f"Unexpected token {tok}")


def _parse_number(text: str) -> Literal:
    """Classify NUMBER text: all digits is an integer, anything else a float."""
    if text.isascii() and text.isdigit():
        digits = text.lstrip("0")
        if len(digits) > _I64_DIGITS or (digits and int(digits) > I64_MAX):
            raise ParseError(
                f"Invalid integer literal {text}: number too large to fit in a 64-bit integer"
            )
        return Literal(value=int(digits or "0"))
    try:
        return Literal(value=float(text))
    except ValueError as e:
        raise ParseError(f"Invalid float literal {text}: {e}") from e


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "(1 + 1) * 2 + 4!")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the expression is invalid or contains an unknown character.
    """
    parser = _Parser(source)
    expr = parser.parse_expr(0)
    # Ensure all tokens consumed
    parser.expect_end()
    logger.debug("Parsed %r as %s", source, expr)
    return expr
