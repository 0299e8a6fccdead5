"""
Projections derived from a ``FuzzyDateModel``. All are pure functions.
"""

from fuzzy_date.projections.bounds import in_window, lower_bound, upper_bound
from fuzzy_date.projections.collate import collate, sortable_timestamp
from fuzzy_date.projections.gedcomx import simple_date, to_gedcomx
from fuzzy_date.projections.normalize import normalize, render_date

__all__ = [
    "collate",
    "in_window",
    "lower_bound",
    "normalize",
    "render_date",
    "simple_date",
    "sortable_timestamp",
    "to_gedcomx",
    "upper_bound",
]
