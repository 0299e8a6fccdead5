# src/fuzzy_date/projections/collate.py

"""
Collation keys: plain string comparison of two keys reproduces the
chronological-then-modifier ordering of the underlying fuzzy dates.

Key layout (fields joined by ``|``)::

    <start.min_date> | <modifier rank> | <start.format rank> | <end.min_date> | <end.format rank>

Timestamps are the distance in ms from NEG_INFINITY, zero-padded to a fixed
width, so they sort correctly for negative years and the sentinels alike.
Ranks are two-digit zero-padded.
"""

from __future__ import annotations

from fuzzy_date.instant import Instant, NEG_INFINITY, POS_INFINITY
from fuzzy_date.types import FuzzyDateModel, format_rank, modifier_rank

DELIMITER = "|"
TIMESTAMP_WIDTH = len(str(POS_INFINITY - NEG_INFINITY))


def sortable_timestamp(instant: Instant) -> str:
    return f"{instant - NEG_INFINITY:0{TIMESTAMP_WIDTH}d}"


def collate(model: FuzzyDateModel) -> str:
    return DELIMITER.join(
        (
            sortable_timestamp(model.start.min_date),
            f"{modifier_rank(model.modifier):02d}",
            f"{format_rank(model.start.format):02d}",
            sortable_timestamp(model.end.min_date),
            f"{format_rank(model.end.format):02d}",
        )
    )
