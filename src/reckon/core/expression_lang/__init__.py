"""
reckon arithmetic expression language.

Tokenizer, Pratt parser, and evaluator.

Usage:
    from reckon.core.expression_lang import evaluate_expr, parse_expr

    expr = parse_expr("2^3^2")
    result = evaluate_expr(expr)
    # result == Value.integer(512)
"""

from reckon.core.expression_lang.evaluator import evaluate_expr
from reckon.core.expression_lang.parser import parse_expr
from reckon.core.expression_lang.tokenizer import Lexer, Token, TokenKind, tokenize

__all__ = ["Lexer", "Token", "TokenKind", "evaluate_expr", "parse_expr", "tokenize"]
