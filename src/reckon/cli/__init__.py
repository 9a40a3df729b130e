"""
reckon CLI.

- commands.py: eval, tokens, ast and repl commands
- logging_setup.py: logging configuration for the host process
"""

import platform
import sys

import typer

from reckon._version import get_version
from reckon.cli.commands import ast_command, eval_command, repl_command, tokens_command
from reckon.cli.logging_setup import configure_logging


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"reckon {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


app = typer.Typer(
    help="""reckon - arithmetic expression evaluator

Operators: + - * / % ^ (infix), - + (prefix), ! (postfix factorial).
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="RECKON_LOG_LEVEL",
        help="Logging level for diagnostic output on stderr",
    ),
) -> None:
    """reckon CLI main callback for global options."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


app.command(name="eval")(eval_command)
app.command(name="tokens")(tokens_command)
app.command(name="ast")(ast_command)
app.command(name="repl")(repl_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "version_callback"]


if __name__ == "__main__":
    main(sys.argv[1:])
