"""
Tokenizer for the reckon expression language.

Converts an expression string into a lazy sequence of typed tokens.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum, auto

from reckon.core.errors import ParseError

_DIGITS = frozenset("0123456789")

# Unicode White_Space property. Narrower than str.isspace, which also
# accepts the U+001C..U+001F separators.
_WHITESPACE = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    NUMBER = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    CARET = auto()
    BANG = auto()

    # Comparison operators (reserved, no parser semantics)
    EQ = auto()
    NE = auto()  # <>
    LT = auto()
    GT = auto()
    LE = auto()
    GE = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value")

    def __init__(self, kind: TokenKind, value: str) -> None:
        self.kind = kind
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r})"

    def __str__(self) -> str:
        return self.value


_SINGLE_MAP: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "^": TokenKind.CARET,
    "!": TokenKind.BANG,
    "=": TokenKind.EQ,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# Second character that extends a one-character symbol
_TWO_CHAR_MAP: dict[TokenKind, dict[str, TokenKind]] = {
    TokenKind.LT: {">": TokenKind.NE, "=": TokenKind.LE},
    TokenKind.GT: {"=": TokenKind.GE},
}


class Lexer:
    """Lazy tokenizer over an input string.

    Iterating yields one token per ``next()``. An unknown character raises
    :class:`ParseError` after being consumed, so a caller may keep pulling
    tokens past it. A lexer is not rewindable; build a new one to restart.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        self._skip_whitespace()
        if self.pos >= len(self.source):
            raise StopIteration

        c = self.source[self.pos]
        if c in _DIGITS:
            return self._read_number()

        kind = _SINGLE_MAP.get(c)
        self.pos += 1
        if kind is None:
            raise ParseError(f"Unexpected character {c}")

        extensions = _TWO_CHAR_MAP.get(kind)
        if extensions and self.pos < len(self.source):
            nxt = self.source[self.pos]
            if nxt in extensions:
                self.pos += 1
                return Token(extensions[nxt], c + nxt)
        return Token(kind, c)

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.source) and self.source[self.pos] in _WHITESPACE:
            self.pos += 1

    def _read_digits(self) -> str:
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in _DIGITS:
            self.pos += 1
        return self.source[start : self.pos]

    def _read_number(self) -> Token:
        """Digits, then an optional '.' and more digits. '1.' is accepted."""
        text = self._read_digits()
        if self.pos < len(self.source) and self.source[self.pos] == ".":
            self.pos += 1
            text += "." + self._read_digits()
        return Token(TokenKind.NUMBER, text)


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Raises:
        ParseError: On the first unknown character.
    """
    return list(Lexer(source))
