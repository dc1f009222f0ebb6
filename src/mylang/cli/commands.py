"""
mylang CLI application.

Reads source text from ``-e EXPRESSION`` or standard input, runs the
pipeline, and prints the token dump, the syntax tree and the value.
Pipeline failures are reported as one line each.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from mylang._version import get_version
from mylang.core.config import LogLevel, MyLangConfig, load_config
from mylang.core.errors import ConfigError, InvalidTokenError, MyLangError
from mylang.core.expression_lang import PipelineResult, run_pipeline, serialize
from mylang.core.logging_config import configure_logging

logger = logging.getLogger(__name__)

USAGE = """\
syntax:
   mylang < FILE
   mylang -e EXPRESSION
"""

RULE = "-" * 26

console = Console(highlight=False)

app = typer.Typer(
    help="mylang - tokenize, parse and evaluate a small expression language",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mylang version {get_version()}")
        raise typer.Exit()


@app.command()
def run(
    expression: str | None = typer.Option(
        None, "-e", "--expression", help="Expression to evaluate (default: read stdin)"
    ),
    tokens: bool | None = typer.Option(
        None, "--tokens/--no-tokens", help="Print the token dump"
    ),
    tree: bool | None = typer.Option(None, "--tree/--no-tree", help="Print the syntax tree"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Configuration file (default: ./mylang.toml)"
    ),
    log_level: LogLevel | None = typer.Option(
        None, "--log-level", case_sensitive=False, help="Override the configured log level"
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Evaluate EXPRESSION, or every line of standard input."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(2)

    configure_logging(log_level or config.log_level)

    if expression is not None:
        source, source_name = expression, "<expr>"
    else:
        source, source_name = sys.stdin.read(), "<stdin>"

    result = run_pipeline(source, source_name=source_name)

    if result.tokens or isinstance(result.error, InvalidTokenError):
        _print_result(
            result,
            config,
            show_tokens=config.output.show_tokens if tokens is None else tokens,
            show_tree=config.output.show_tree if tree is None else tree,
        )
    else:
        typer.echo(USAGE)
        raise typer.Exit(1)

    if result.error is not None:
        raise typer.Exit(config.error_exit_status)


def _print_result(
    result: PipelineResult, config: MyLangConfig, show_tokens: bool, show_tree: bool
) -> None:
    """Print each section the run got to, then the failure if there was one."""
    if result.error is not None and not result.tokens:
        _report(result.error)
        return

    if show_tokens:
        _section("Tokens")
        for tok in result.tokens:
            typer.echo(str(tok))

    if show_tree:
        _section("Syntax tree")
    if result.tree is None:
        assert result.error is not None
        _report(result.error)
        return
    if show_tree:
        typer.echo(serialize(result.tree, indent=config.output.indent_width))
        typer.echo("")

    _section("Value")
    if result.value is None:
        assert result.error is not None
        _report(result.error)
        return
    typer.echo(result.value.render())


def _section(title: str) -> None:
    typer.echo(title)
    typer.echo(RULE)


def _report(error: MyLangError) -> None:
    if error.context is not None:
        logger.info("%s", error.context.format())
    typer.secho(error.report(), fg=typer.colors.RED)


def main(argv: list[str] | None = None) -> None:
    app(args=argv)


if __name__ == "__main__":
    main(sys.argv[1:])
