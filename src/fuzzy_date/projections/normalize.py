# src/fuzzy_date/projections/normalize.py

from __future__ import annotations

from fuzzy_date.instant import Instant, to_civil
from fuzzy_date.intervals import window_anchor
from fuzzy_date.types import (
    FormatTag,
    FuzzyDateModel,
    MONTH_DISPLAY_NAMES,
    MONTH_SEASONS,
    Modifier,
)


def render_date(min_date: Instant, format: FormatTag) -> str:
    """
    Display string for one endpoint.

        YYYYs        -> '1800s'
        YYYY         -> '1800'
        SEASON_YYYY  -> 'winter 1800'
        MMMM_YYYY    -> 'January 1800'
        D_MMMM_YYYY  -> '1 January 1800'
    """
    year, month, day = to_civil(min_date)

    if format == FormatTag.DECADE:
        return f"{year}s"
    if format == FormatTag.YEAR:
        return str(year)
    if format == FormatTag.SEASON_YEAR:
        return f"{MONTH_SEASONS[month]} {year}"
    if format == FormatTag.MONTH_YEAR:
        return f"{MONTH_DISPLAY_NAMES[month - 1]} {year}"
    if format == FormatTag.DAY_MONTH_YEAR:
        return f"{day} {MONTH_DISPLAY_NAMES[month - 1]} {year}"
    raise ValueError(f"Unknown format: {format!r}")


def normalize(model: FuzzyDateModel) -> str:
    """
    Human-readable form of the model, e.g. 'between 1 February 1900 and 18 March 1905'.

    EARLY/MID/LATE name the span the window was cut from, recovered with
    ``window_anchor``, and not the window's own first instant: 'late 1800s'
    stays 'late 1800s' rather than 'late 1805s', and 'late winter 1800'
    does not drift into 1801.
    """
    start = render_date(model.start.min_date, model.start.format)
    modifier = model.modifier

    if modifier == Modifier.NONE:
        return start
    if modifier == Modifier.BEFORE:
        # start is unbounded; the meaningful endpoint is end
        return f"before {render_date(model.end.min_date, model.end.format)}"
    if modifier == Modifier.FROM:
        return f"from {start} to {render_date(model.end.min_date, model.end.format)}"
    if modifier == Modifier.BETWEEN:
        return f"between {start} and {render_date(model.end.min_date, model.end.format)}"
    if modifier in (Modifier.AFTER, Modifier.ABOUT):
        return f"{modifier.value.lower()} {start}"
    if modifier in (Modifier.EARLY, Modifier.MID, Modifier.LATE):
        # 'late 1800s' has to name the decade, not the year the window starts in
        anchor = window_anchor(model.start, modifier)
        return f"{modifier.value.lower()} {render_date(anchor, model.start.format)}"
    raise ValueError(f"Unknown modifier: {modifier!r}")
