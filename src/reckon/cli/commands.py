"""
Expression commands: eval, tokens, ast, repl.

Each command is a thin host around the core: it hands the text to the
library and renders the Value, token list, tree, or error.
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.table import Table

from reckon.core.calculator import evaluate
from reckon.core.errors import ReckonError
from reckon.core.expression_lang.parser import parse_expr
from reckon.core.expression_lang.tokenizer import tokenize

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

_QUIT_WORDS = {"quit", "exit"}


def _report(error: ReckonError) -> None:
    err_console.print(f"{error.kind} error: {error.message}", style="bold red", markup=False)


def eval_command(
    expressions: list[str] = typer.Argument(  # noqa: B008
        ...,
        help="Expressions to evaluate (put '--' before ones starting with '-')",
    ),
) -> None:
    """Evaluate each expression and print its value."""
    for source in expressions:
        try:
            result = evaluate(source)
        except ReckonError as e:
            _report(e)
            raise typer.Exit(code=1) from e
        console.print(str(result), markup=False, highlight=False)


def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Show the tokens an expression is split into."""
    try:
        tokens = tokenize(expression)
    except ReckonError as e:
        _report(e)
        raise typer.Exit(code=1) from e

    table = Table(title=f"Tokens ({len(tokens)})")
    table.add_column("Kind", style="cyan")
    table.add_column("Text")
    for tok in tokens:
        table.add_row(str(tok.kind), tok.value)
    console.print(table)


def ast_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
) -> None:
    """Print the fully parenthesised parse tree of an expression."""
    try:
        expr = parse_expr(expression)
    except ReckonError as e:
        _report(e)
        raise typer.Exit(code=1) from e
    console.print(str(expr), markup=False, highlight=False)


def repl_command() -> None:
    """Read expressions line by line from stdin until EOF or 'quit'."""
    count = 0
    for line in sys.stdin:
        source = line.strip()
        if not source:
            continue
        if source.lower() in _QUIT_WORDS:
            break
        count += 1
        try:
            result = evaluate(source)
        except ReckonError as e:
            _report(e)
            continue
        console.print(f"= {result}", markup=False, highlight=False)
    logger.debug("REPL finished after %d expressions", count)
