# src/fuzzy_date/intervals.py

"""
Interval arithmetic for endpoints.

Every granularity is the half-open range ``[min, min + step)``. It is stored
closed as ``[min, max]`` with ``max = min + step - 1ms``.
"""

from __future__ import annotations

from typing import Tuple

from fuzzy_date.instant import Instant, add_days, add_months, add_years
from fuzzy_date.types import DateValue, FormatTag, Modifier


def widen_to_max_date(min_date: Instant, format: FormatTag) -> Instant:
    """
    Inclusive upper bound of the ``format`` granularity starting at ``min_date``.

    ``min_date`` is midnight UTC on the first day the format can describe.
    """
    if format == FormatTag.DECADE:
        end = add_years(min_date, 10)
    elif format == FormatTag.YEAR:
        end = add_years(min_date, 1)
    elif format == FormatTag.SEASON_YEAR:
        end = add_months(min_date, 3)
    elif format == FormatTag.MONTH_YEAR:
        end = add_months(min_date, 1)
    elif format == FormatTag.DAY_MONTH_YEAR:
        end = add_days(min_date, 1)
    else:
        raise ValueError(f"Unknown format: {format!r}")
    return end - 1


def point_value(min_date: Instant, format: FormatTag) -> DateValue:
    """A resolved endpoint covering exactly its granularity."""
    return DateValue(
        format=format,
        min_date=min_date,
        max_date=widen_to_max_date(min_date, format),
    )


# ---------------------------------------------------------------------------
# Bisection for EARLY / MID / LATE
# ---------------------------------------------------------------------------

def _span(value: DateValue) -> Tuple[Instant, Instant]:
    # max + 1 turns the closed range back into a half-open one before halving.
    start = value.min_date
    end = value.max_date + 1
    return start, (end - start) // 2


def early_window(value: DateValue) -> DateValue:
    """First half of the span."""
    start, half = _span(value)
    return DateValue(value.format, start, start + half)


def mid_window(value: DateValue) -> DateValue:
    """Middle half of the span (25% to 75%)."""
    start, half = _span(value)
    quarter = half // 2
    return DateValue(value.format, start + quarter, start + half + quarter)


def late_window(value: DateValue) -> DateValue:
    """Second half of the span."""
    start, half = _span(value)
    return DateValue(value.format, start + half, value.max_date)


def window_anchor(window: DateValue, modifier: Modifier) -> Instant:
    """
    First instant of the granularity a bisection window was cut from.

    Spans are whole days, so ``half`` is exact and recoverable from the
    window width: early ``[a, a+h]``, mid ``[a+h//2, a+h+h//2]``, late
    ``[a+h, a+2h-1]``. Any other modifier returns ``min_date`` unchanged.
    """
    width = window.max_date - window.min_date
    if modifier == Modifier.MID:
        return window.min_date - width // 2
    if modifier == Modifier.LATE:
        return window.min_date - (width + 1)
    return window.min_date
