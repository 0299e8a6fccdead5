
from __future__ import annotations

import typer

from fuzzy_date.cli.commands.parse import parse_command
from fuzzy_date.cli.commands.sort import sort_command

app = typer.Typer(
    name="fuzzydate",
    help="Parse, normalize and sort fuzzy historical dates",
    add_completion=False,
)

app.command("parse")(parse_command)
app.command("sort")(sort_command)


def main():
    app()


if __name__ == "__main__":
    main()
