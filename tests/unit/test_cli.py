"""Tests for CLI commands."""

from importlib.metadata import version

from typer.testing import CliRunner

import reckon
from reckon.cli import app


class TestEvalCommand:
    def test_single_expression(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "(1+1)*2+4!"])
        assert result.exit_code == 0
        assert result.output.strip() == "28"

    def test_multiple_expressions(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1+1", "7/2.0"])
        assert result.exit_code == 0
        assert result.output.split() == ["2", "3.5"]

    def test_leading_minus_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--", "-3*2"])
        assert result.exit_code == 0
        assert result.output.strip() == "-6"

    def test_value_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "5%0"])
        assert result.exit_code == 1
        assert "value error: Can't divide by zero" in result.output

    def test_huge_literal_reports_parse_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "9" * 5000])
        assert result.exit_code == 1
        assert "parse error: Invalid integer literal" in result.output

    def test_parse_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1 + m"])
        assert result.exit_code == 1
        assert "parse error: Unexpected character m" in result.output


class TestInspectCommands:
    def test_tokens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "1.5 <> 2"])
        assert result.exit_code == 0
        assert "number" in result.output
        assert "1.5" in result.output
        assert "<>" in result.output

    def test_tokens_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "1 & 2"])
        assert result.exit_code == 1
        assert "Unexpected character &" in result.output

    def test_ast(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["ast", "2^3^2"])
        assert result.exit_code == 0
        assert result.output.strip() == "(2 ^ (3 ^ 2))"

    def test_ast_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["ast", "(1"])
        assert result.exit_code == 1
        assert "Unexpected end of input" in result.output


class TestReplCommand:
    def test_reads_until_quit(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="1+1\n\n5%0\n2*3\nquit\n9\n")
        assert result.exit_code == 0
        assert "= 2" in result.output
        assert "Can't divide by zero" in result.output
        assert "= 6" in result.output
        assert "= 9" not in result.output

    def test_reads_until_eof(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="4!\n")
        assert result.exit_code == 0
        assert result.output.strip() == "= 24"


class TestGlobalOptions:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "reckon" in result.output

    def test_version_comes_from_package_metadata(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        installed = version("reckon")
        assert f"reckon {installed}" in result.output
        assert reckon.__version__ == installed

    def test_bad_log_level(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--log-level", "chatty", "eval", "1"])
        assert result.exit_code == 2

    def test_log_level_from_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1"], env={"RECKON_LOG_LEVEL": "chatty"})
        assert result.exit_code == 2
