"""Tests for the mylang command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from mylang.cli import app
from mylang.cli import commands as cli_module
from mylang.core.config import LogLevel
from mylang.core.expression_lang import parse_expr, serialize


@pytest.fixture(autouse=True)
def logging_levels(monkeypatch: pytest.MonkeyPatch, isolated_cwd: Path) -> list:
    """Record configure_logging calls instead of touching global logging."""
    calls: list = []
    monkeypatch.setattr(cli_module, "configure_logging", calls.append)
    return calls


def invoke(runner: CliRunner, *args: str, input: str | None = None):
    return runner.invoke(app, list(args), input=input)


class TestEvaluate:
    """Successful runs print tokens, tree and value."""

    def test_expression_flag(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "-e", "1 + 2 * 3")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[:7] == [
            "Tokens",
            "-" * 26,
            "num 1",
            "op_ +",
            "num 2",
            "op_ *",
            "num 3",
        ]
        assert lines[7] == "Syntax tree"
        assert serialize(parse_expr("1 + 2 * 3")) in result.output
        assert lines[-3:] == ["Value", "-" * 26, "7"]

    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, input="(1 + 2)\n* 3\n")
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "9"

    def test_comparison(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "-e", "2 < 1")
        assert result.output.splitlines()[-1] == "0"

    def test_hide_sections(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "--no-tokens", "--no-tree", "-e", "4 / 2")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Value", "-" * 26, "2"]


class TestFailures:
    """Each pipeline failure is reported as one line."""

    @pytest.mark.parametrize(("source", "text"), [("1a", "1a"), ("2 * $$", "$$")])
    def test_invalid_token(self, cli_runner: CliRunner, source: str, text: str) -> None:
        result = invoke(cli_runner, "-e", source)
        assert result.exit_code == 1
        assert result.output.splitlines() == [f"Invalid token: {text}"]

    def test_syntax_error(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "-e", "1 +")
        assert result.exit_code == 1
        assert "Tokens" in result.output
        assert "Value" not in result.output
        assert result.output.splitlines()[-1] == "SyntaxError"

    def test_division_by_zero(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "-e", "10 / 0")
        assert result.exit_code == 1
        assert result.output.splitlines()[-3:] == ["Value", "-" * 26, "DivisionByZero"]

    @pytest.mark.parametrize("stdin", ["", "  \n\t\n"])
    def test_empty_input_prints_usage(self, cli_runner: CliRunner, stdin: str) -> None:
        result = invoke(cli_runner, input=stdin)
        assert result.exit_code == 1
        assert "mylang -e EXPRESSION" in result.output

    def test_missing_expression_value(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "-e")
        assert result.exit_code == 2


class TestOptions:
    """Global options and configuration."""

    def test_help(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "-h")
        assert result.exit_code == 0
        assert "--expression" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = invoke(cli_runner, "--version")
        assert result.exit_code == 0
        assert result.output.startswith("mylang version ")

    def test_error_exit_status_from_config(
        self, cli_runner: CliRunner, isolated_cwd: Path
    ) -> None:
        (isolated_cwd / "mylang.toml").write_text("[mylang]\nerror_exit_status = 0\n")
        result = invoke(cli_runner, "-e", "10 / 0")
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "DivisionByZero"

    def test_config_option(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        path = isolated_cwd / "other.toml"
        path.write_text("[mylang.output]\nshow_tokens = false\nindent_width = 1\n")
        result = invoke(cli_runner, "--config", str(path), "-e", "5")
        assert result.exit_code == 0
        assert "Tokens" not in result.output
        assert serialize(parse_expr("5"), indent=1) in result.output

    def test_flags_override_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "mylang.toml").write_text("[mylang.output]\nshow_tokens = false\n")
        result = invoke(cli_runner, "--tokens", "-e", "5")
        assert "Tokens" in result.output

    def test_bad_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "mylang.toml").write_text("[mylang\n")
        result = invoke(cli_runner, "-e", "1")
        assert result.exit_code == 2
        assert "Invalid TOML" in result.output

    def test_log_level(self, cli_runner: CliRunner, logging_levels: list) -> None:
        result = invoke(cli_runner, "--log-level", "debug", "-e", "1")
        assert result.exit_code == 0
        assert logging_levels == [LogLevel.DEBUG]

    def test_log_level_from_config(self, cli_runner: CliRunner, logging_levels: list) -> None:
        invoke(cli_runner, "-e", "1")
        assert logging_levels == [LogLevel.WARNING]
