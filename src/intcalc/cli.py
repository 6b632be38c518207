"""
intcalc command-line interface.

Thin wrapper over the library: reads an expression from an argument or a
file, evaluates it, and reports errors on stderr with a non-zero exit.

Expressions that start with '-' must follow '--' so they are not taken
for options:

    intcalc eval -- "-7 / 2"
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import typer

from intcalc._version import get_version
from intcalc.core.errors import ExpressionError
from intcalc.core.expression_lang import evaluate, evaluate_expression, parse_expr, tokenize

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"intcalc {get_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="intcalc – evaluate integer arithmetic expressions (+ - * / and parentheses)",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """intcalc CLI main callback for global options."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _fail(error: ExpressionError) -> NoReturn:
    typer.echo(f"Error [{error.kind}]: {error}", err=True)
    raise typer.Exit(code=1)


def _max_depth_option() -> Any:
    return typer.Option(
        None,
        "--max-depth",
        min=1,
        help="Maximum nesting depth (default: INTCALC_MAX_DEPTH or 100)",
    )


@app.command("eval")
def eval_command(
    expression: str | None = typer.Argument(None, help="Expression to evaluate"),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read the expression from a file",
    ),
    max_depth: int | None = _max_depth_option(),
) -> None:
    """Evaluate an expression and print the integer result."""
    if (expression is None) == (file is None):
        raise typer.BadParameter("Provide exactly one of EXPRESSION or --file")

    if file is not None:
        try:
            text = file.read_text(encoding="utf-8").strip("\r\n")
        except UnicodeDecodeError as e:
            raise typer.BadParameter(
                f"{file} is not valid UTF-8 ({e.reason} at byte {e.start})",
                param_hint="--file",
            ) from e
        logger.debug("Read expression from %s", file)
    else:
        text = expression or ""

    try:
        result = evaluate_expression(text, max_depth=max_depth)
    except ExpressionError as e:
        _fail(e)
    typer.echo(str(result))


@app.command("tokens")
def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Print the token stream, one token per line."""
    try:
        tokens = tokenize(expression)
    except ExpressionError as e:
        _fail(e.with_source(expression))
    for tok in tokens:
        value = "" if tok.value is None else f" {tok.value}"
        typer.echo(f"{tok.kind}{value} @{tok.pos}")


@app.command("tree")
def tree_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    max_depth: int | None = _max_depth_option(),
    show_value: bool = typer.Option(False, "--eval", "-e", help="Also print the result"),
) -> None:
    """Print the fully parenthesized expression tree."""
    try:
        expr = parse_expr(expression, max_depth=max_depth)
        typer.echo(str(expr))
        if show_value:
            typer.echo(f"= {evaluate(expr)}")
    except ExpressionError as e:
        _fail(e.with_source(expression))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
