
from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fuzzy_date.cli.utils import describe, write_json
from fuzzy_date.fuzzy_date import FuzzyDate

console = Console()
err_console = Console(stderr=True)


def parse_command(
    text: str = typer.Argument(..., help="Date expression, e.g. 'before 1900'"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print canonical JSON and projections instead of a table",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
):
    """
    Parse one date expression and show every derived form.
    """
    result = FuzzyDate.parse(text)
    if not result.ok:
        err_console.print(f"[red]{escape(repr(text))}: {result.error.value}[/red]")
        raise typer.Exit(code=1)

    info = describe(result.value)

    if as_json:
        write_json(info, out=None, pretty=pretty)
        return

    model = info["model"]
    table = Table(title=escape(text), show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Normalized", info["normalized"])
    table.add_row("Modifier", model["modifier"])
    table.add_row("Start format", model["start"]["format"])
    table.add_row("End format", model["end"]["format"])
    table.add_row("Lower bound", info["lowerBound"] or "-")
    table.add_row("Upper bound", info["upperBound"] or "-")
    table.add_row("GEDCOM X", info["formal"])
    table.add_row("Collation key", info["collationKey"])

    console.print(table)
