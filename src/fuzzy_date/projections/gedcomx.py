# src/fuzzy_date/projections/gedcomx.py

"""
GEDCOM X formal date strings.

See the GEDCOM X date format specification:
https://github.com/FamilySearch/gedcomx/blob/master/specifications/date-format-specification.md
"""

from __future__ import annotations

from fuzzy_date.instant import Instant, to_civil
from fuzzy_date.types import FormatTag, FuzzyDateModel, Modifier


def simple_date(instant: Instant, format: FormatTag) -> str:
    """``+YYYY``, ``+YYYY-MM`` or ``+YYYY-MM-DD`` depending on granularity."""
    year, month, day = to_civil(instant)
    sign = "+" if year >= 0 else "-"
    yyyy = f"{sign}{abs(year):04d}"

    if format in (FormatTag.DECADE, FormatTag.YEAR):
        return yyyy
    if format in (FormatTag.SEASON_YEAR, FormatTag.MONTH_YEAR):
        return f"{yyyy}-{month:02d}"
    return f"{yyyy}-{month:02d}-{day:02d}"


def to_gedcomx(model: FuzzyDateModel) -> str:
    """
    GEDCOM X formal date for the model.

    EARLY/MID/LATE are written as the closed window they resolve to,
    ``start.min_date/end.max_date`` ('late 1800s' -> '+1805/+1809'). Using
    ``end.min_date`` here would collapse the window to a single point
    ('+1805/+1805').
    """
    start = simple_date(model.start.min_date, model.start.format)
    end = simple_date(model.end.min_date, model.end.format)
    modifier = model.modifier

    if modifier == Modifier.NONE:
        return start
    if modifier == Modifier.ABOUT:
        return f"A{start}"
    if modifier == Modifier.BEFORE:
        return f"/{end}"
    if modifier == Modifier.AFTER:
        return f"{start}/"
    if modifier in (Modifier.EARLY, Modifier.MID, Modifier.LATE):
        # closed range over the bisection window
        return f"{start}/{simple_date(model.end.max_date, model.end.format)}"
    if modifier in (Modifier.FROM, Modifier.BETWEEN):
        return f"{start}/{end}"
    raise ValueError(f"Unknown modifier: {modifier!r}")
