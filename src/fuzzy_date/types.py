# src/fuzzy_date/types.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from fuzzy_date.instant import Instant, NEG_INFINITY, POS_INFINITY


# ---------------------------------------------------------------------------
# Closed enumerations (declaration order is collation order)
# ---------------------------------------------------------------------------

class FormatTag(str, Enum):
    """Granularity an endpoint is known to, least specific first."""

    DECADE = "YYYYs"
    YEAR = "YYYY"
    SEASON_YEAR = "SEASON_YYYY"
    MONTH_YEAR = "MMMM_YYYY"
    DAY_MONTH_YEAR = "D_MMMM_YYYY"


class Modifier(str, Enum):
    """Qualifier phrase, in collation order."""

    BEFORE = "BEFORE"
    ABOUT = "ABOUT"
    NONE = "NONE"
    EARLY = "EARLY"
    MID = "MID"
    LATE = "LATE"
    FROM = "FROM"
    BETWEEN = "BETWEEN"
    AFTER = "AFTER"


FORMAT_ORDER = tuple(FormatTag)
MODIFIER_ORDER = tuple(Modifier)

_FORMAT_RANK: Dict[FormatTag, int] = {f: i for i, f in enumerate(FORMAT_ORDER)}
_MODIFIER_RANK: Dict[Modifier, int] = {m: i for i, m in enumerate(MODIFIER_ORDER)}

RANGE_MODIFIERS = frozenset({Modifier.FROM, Modifier.BETWEEN})


def format_rank(tag: FormatTag) -> int:
    return _FORMAT_RANK[tag]


def modifier_rank(modifier: Modifier) -> int:
    return _MODIFIER_RANK[modifier]


# ---------------------------------------------------------------------------
# Season / month vocabulary
# ---------------------------------------------------------------------------

MONTH_NAMES: Dict[str, int] = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "sept": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

# Season word -> representative (first) month.
SEASON_MONTHS: Dict[str, int] = {
    "spring": 3,
    "summer": 6,
    "fall": 9,
    "autumn": 9,
    "winter": 12,
}

MONTH_SEASONS: Dict[int, str] = {
    1: "winter",
    2: "winter",
    3: "spring",
    4: "spring",
    5: "spring",
    6: "summer",
    7: "summer",
    8: "summer",
    9: "fall",
    10: "fall",
    11: "fall",
    12: "winter",
}

MONTH_DISPLAY_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


# ---------------------------------------------------------------------------
# Canonical model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DateValue:
    """
    One endpoint of a fuzzy date.

    Attributes:
        format: Granularity of the endpoint.
        min_date: First instant covered (inclusive, UTC ms).
        max_date: Last instant covered (inclusive, UTC ms).
    """
    format: FormatTag
    min_date: Instant
    max_date: Instant

    def __post_init__(self) -> None:
        if self.min_date > self.max_date:
            raise ValueError(
                f"min_date {self.min_date} is after max_date {self.max_date}"
            )

    @property
    def unbounded_start(self) -> bool:
        return self.min_date == NEG_INFINITY

    @property
    def unbounded_end(self) -> bool:
        return self.max_date == POS_INFINITY


@dataclass(frozen=True)
class FuzzyDateModel:
    """
    Canonical interval representation every projection is derived from.

    Single-point modifiers (NONE, ABOUT, EARLY, MID, LATE) carry the same
    sub-range in ``start`` and ``end``. FROM/BETWEEN carry two independently
    resolved endpoints. BEFORE starts at NEG_INFINITY, AFTER ends at
    POS_INFINITY.
    """
    modifier: Modifier
    start: DateValue
    end: DateValue

    def __post_init__(self) -> None:
        if self.start.min_date > self.end.max_date:
            raise ValueError("start.min_date is after end.max_date")
