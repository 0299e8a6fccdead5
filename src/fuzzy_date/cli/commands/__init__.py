
"""
CLI command modules for fuzzy_date.

Each command module defines a single Typer-compatible command function.
"""

from fuzzy_date.cli.commands.parse import parse_command
from fuzzy_date.cli.commands.sort import sort_command

__all__ = [
    "parse_command",
    "sort_command",
]
