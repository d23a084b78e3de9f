"""
Command-line interface for exprbuf.

Provides commands for:
- Replaying key presses on a fresh calculator session
- Typing an expression key by key and evaluating it

Arguments that start with '-' must follow a '--' separator, e.g.
``exprbuf eval -- -3+2``.
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exprbuf.config import settings
from exprbuf.core.math.formatting import MAX_PRECISION, FormatConfig, RoundingMode
from exprbuf.engine.expression_engine import ExpressionEngine
from exprbuf.keypad.dispatcher import KeyAction, Keypad, KeyPressResult
from exprbuf.log import configure_logging

app = typer.Typer(
    name="exprbuf",
    help="exprbuf - incremental calculator expression engine",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", "-l", help="Log level (DEBUG, INFO, WARNING...)"
    ),
):
    """Configure logging before any command runs."""
    configure_logging(log_level)


def _build_keypad(precision: Optional[int], rounding: Optional[RoundingMode]) -> Keypad:
    config = settings.format_config()
    if precision is not None or rounding is not None:
        config = FormatConfig(
            precision=config.precision if precision is None else precision,
            rounding=config.rounding if rounding is None else rounding,
        )
    return Keypad(ExpressionEngine(format_config=config))


def _note(result: KeyPressResult) -> str:
    if result.error:
        return f"[red]{result.error}[/]"
    if not result.accepted:
        return f"[yellow]{result.reject_reason}[/]"
    return ""


# =============================================================================
# Commands
# =============================================================================


@app.command()
def press(
    keys: List[str] = typer.Argument(..., help="Key labels, e.g. 7 × 2 = AC"),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=0, max=MAX_PRECISION, help="Result fraction digits"
    ),
    rounding: Optional[RoundingMode] = typer.Option(None, "--rounding", "-r", help="Rounding mode"),
):
    """Press keys on a fresh calculator and show the display after each one."""
    keypad = _build_keypad(precision, rounding)

    table = Table(title="Key presses")
    table.add_column("Key", style="cyan")
    table.add_column("Action", style="magenta")
    table.add_column("Display", style="green")
    table.add_column("Note")

    for key in keys:
        result = keypad.press(key)
        table.add_row(escape(key), result.action.value, result.display, _note(result))

    console.print(table)


@app.command("eval")
def eval_expression(
    expression: str = typer.Argument(..., help="Expression to type, e.g. 2+3×4"),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=0, max=MAX_PRECISION, help="Result fraction digits"
    ),
    rounding: Optional[RoundingMode] = typer.Option(None, "--rounding", "-r", help="Rounding mode"),
):
    """Type an expression character by character, then press '='."""
    keypad = _build_keypad(precision, rounding)

    for char in expression:
        if char.isspace():
            continue
        result = keypad.press(char)
        if not result.accepted:
            console.print(f"[yellow]Key {escape(repr(char))} ignored: {result.reject_reason}[/]")

    result = keypad.press("=")
    if result.action == KeyAction.EVALUATE and result.error:
        console.print(f"[red]Error ({result.error}):[/] {escape(result.error_message or '')}")
        console.print(result.display)
        raise typer.Exit(code=1)

    console.print(result.display)


if __name__ == "__main__":
    app()
