# src/fuzzy_date/projections/bounds.py

"""
Inclusive query bounds for endpoint-in-window search.

A fuzzy date matches a closed search window ``[s, e]`` when either bound
falls inside it::

    (s <= lower_bound <= e) or (s <= upper_bound <= e)

Unbounded ends come back as ``None`` and never match.
"""

from __future__ import annotations

from typing import Optional

from fuzzy_date.instant import Instant
from fuzzy_date.types import FuzzyDateModel


def lower_bound(model: FuzzyDateModel) -> Optional[Instant]:
    if model.start.unbounded_start:
        return None
    return model.start.min_date


def upper_bound(model: FuzzyDateModel) -> Optional[Instant]:
    if model.start.unbounded_end:
        return None
    return model.start.max_date


def in_window(model: FuzzyDateModel, window_start: Instant, window_end: Instant) -> bool:
    if window_start > window_end:
        raise ValueError("window_start is after window_end")

    for bound in (lower_bound(model), upper_bound(model)):
        if bound is not None and window_start <= bound <= window_end:
            return True
    return False
