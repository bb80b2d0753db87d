"""
matheval command line.

Evaluates expressions from the shell. Variables come from a matheval.toml
profile and from repeated --var NAME=VALUE options (options win).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from matheval._version import get_version
from matheval.config import (
    DEFAULT_CONFIG_NAME,
    EvalConfig,
    load_config,
    merge_variables,
    parse_assignment,
)
from matheval.errors import MathEvalError
from matheval.evaluator import calculate
from matheval.numeric import format_single
from matheval.tokenizer import tokenize

app = typer.Typer(
    help="Evaluate arithmetic expressions with + - * /, parentheses and variables.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"matheval {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """matheval CLI main callback for global options."""
    pass


def _fail(error: MathEvalError, expression: str | None = None) -> typer.Exit:
    message = error.format_with_source(expression) if expression is not None else error.message
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    return typer.Exit(code=1)


def _load_profile(config_path: Path | None) -> EvalConfig:
    if config_path is not None:
        return load_config(config_path)
    default = Path(DEFAULT_CONFIG_NAME)
    if default.exists():
        return load_config(default)
    return EvalConfig()


@app.command(name="eval")
def eval_command(
    expression: Annotated[str, typer.Argument(help="Expression, e.g. '2 * (a + 1)'")],
    var: Annotated[
        list[str] | None,
        typer.Option("--var", "-V", help="Variable assignment NAME=VALUE (repeatable)"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help=f"Profile file (default: ./{DEFAULT_CONFIG_NAME})"),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each evaluation step")
    ] = False,
) -> None:
    """Evaluate an expression and print the result."""
    try:
        profile = _load_profile(config_path)
        overrides = dict(parse_assignment(item) for item in var or [])
    except MathEvalError as e:
        raise _fail(e) from e

    logging.basicConfig(
        level=logging.DEBUG if verbose else profile.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    variables = merge_variables(profile.variables, overrides)
    logger.debug("Evaluating %r with %d variable(s)", expression, len(variables))

    try:
        result = calculate(expression, variables)
    except MathEvalError as e:
        raise _fail(e, expression) from e

    text = format_single(result)
    if output_json:
        payload = {
            "expression": expression,
            "variables": variables,
            "result": text,
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(text)


@app.command(name="tokens")
def tokens_command(
    expression: Annotated[str, typer.Argument(help="Expression to tokenize")],
) -> None:
    """Show the token stream for an expression."""
    try:
        tokens = list(tokenize(expression))
    except MathEvalError as e:
        raise _fail(e, expression) from e

    table = Table(title="Tokens")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    table.add_column("Pos", justify="right")
    for index, token in enumerate(tokens):
        table.add_row(str(index), token.kind.upper(), escape(token.text), str(token.pos))
    console.print(table)


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
