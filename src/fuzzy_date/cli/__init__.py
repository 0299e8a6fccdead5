
"""
CLI package for fuzzy_date.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from fuzzy_date.cli.app import app, main

__all__ = [
    "app",
    "main",
]
