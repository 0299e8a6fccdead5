"""
Logging package for ``fuzzy_date``.

Applications call ``get_logger(name)`` to inherit the shared handlers.
"""

from .logger import get_logger, list_active_loggers

__all__ = [
    "get_logger",
    "list_active_loggers",
]
