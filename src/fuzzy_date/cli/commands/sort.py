
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fuzzy_date.cli.utils import describe, load_dates, write_json
from fuzzy_date.core.exceptions import PipelineError

console = Console()
err_console = Console(stderr=True)


def sort_command(
    source: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write JSON output to file instead of stdout",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Emit JSON instead of a table",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Sort a file of date expressions (one per line) chronologically.
    """
    try:
        dates, ctx = load_dates(source, verbose=verbose)
    except PipelineError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    if as_json or out:
        data = {
            "stats": ctx.stats,
            "dates": [describe(d) for d in dates],
            "errors": ctx.errors,
        }
        write_json(data, out=out, pretty=pretty)
    else:
        table = Table(title=f"{source.name} ({len(dates)} dates)")
        table.add_column("#", justify="right")
        table.add_column("Input")
        table.add_column("Normalized", style="bold")
        table.add_column("GEDCOM X")

        for i, d in enumerate(dates, start=1):
            table.add_row(str(i), escape(d.original or ""), d.normalized, d.formal)

        console.print(table)

        for err in ctx.errors:
            console.print(f"[red]line {err['line']}: {escape(repr(err['input']))}: {err['error']}[/red]")

    if verbose:
        console.log("Sort complete")

    if ctx.errors:
        raise typer.Exit(code=1)
