# src/fuzzy_date/parser/formats.py

"""
Format grammar for a single, modifier-free date segment.

The segment is matched against a fixed list of shapes, most specific first.
The first shape whose structure matches decides the outcome: if its fields
then turn out to be invalid (unknown month word, day 32, ...) that is the
answer, and no looser shape is tried.

Supported shapes (segment already passed through ``normalize_input``):

    YYYY                       1800
    MONTHSTRING YYYY           jan 1800, winter 1800
    YYYY MONTHSTRING           1800 january, 1800 winter
    DAY MONTHSTRING YYYY       1 jan 1800
    MONTHSTRING DAY YYYY       jan 1 1800
    YYYY MONTHSTRING DAY       1800 jan 1
    YYYY DAY MONTHSTRING       1800 1 jan
    MONTHDIGIT YYYY            01 1800
    YYYY MONTHDIGIT            1800 01
    DAY MONTHDIGIT YYYY        1 1 1800
    YYYY MONTHDIGIT DAY        1800 1 1
    YYYYs                      1800s
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern, Tuple

from fuzzy_date.instant import Instant, from_civil
from fuzzy_date.intervals import point_value
from fuzzy_date.result import Err, Ok, ParseErrorKind, Result
from fuzzy_date.types import DateValue, FormatTag, MONTH_NAMES, SEASON_MONTHS


# ---------------------------------------------------------------------------
# Field patterns
# ---------------------------------------------------------------------------

DAY = r"(?P<day>[0-9]{1,2})"
MONTH_DIGIT = r"(?P<month>[0-9]{1,2})"
MONTH_STRING = r"(?P<month>[a-z]+)"
YEAR = r"(?P<year>[0-9]{4})"
DECADE = r"(?P<decade>[0-9]{4})s"

_MONTH_NUMBER_RE = re.compile(r"0?[1-9]|1[0-2]")
_DAY_NUMBER_RE = re.compile(r"0?[1-9]|[12][0-9]|3[01]")


@dataclass(frozen=True)
class InputFormat:
    """One recognised segment shape."""
    name: str
    pattern: Pattern[str]
    format: FormatTag


def _shape(name: str, fmt: FormatTag, *fields: str) -> InputFormat:
    return InputFormat(name=name, pattern=re.compile(r"\s".join(fields)), format=fmt)


# Order matters: first structural match wins.
INPUT_FORMATS: Tuple[InputFormat, ...] = (
    _shape("YYYY", FormatTag.YEAR, YEAR),
    _shape("MONTHSTRING YYYY", FormatTag.MONTH_YEAR, MONTH_STRING, YEAR),
    _shape("YYYY MONTHSTRING", FormatTag.MONTH_YEAR, YEAR, MONTH_STRING),
    _shape("DAY MONTHSTRING YYYY", FormatTag.DAY_MONTH_YEAR, DAY, MONTH_STRING, YEAR),
    _shape("MONTHSTRING DAY YYYY", FormatTag.DAY_MONTH_YEAR, MONTH_STRING, DAY, YEAR),
    _shape("YYYY MONTHSTRING DAY", FormatTag.DAY_MONTH_YEAR, YEAR, MONTH_STRING, DAY),
    _shape("YYYY DAY MONTHSTRING", FormatTag.DAY_MONTH_YEAR, YEAR, DAY, MONTH_STRING),
    _shape("MONTHDIGIT YYYY", FormatTag.MONTH_YEAR, MONTH_DIGIT, YEAR),
    _shape("YYYY MONTHDIGIT", FormatTag.MONTH_YEAR, YEAR, MONTH_DIGIT),
    _shape("DAY MONTHDIGIT YYYY", FormatTag.DAY_MONTH_YEAR, DAY, MONTH_DIGIT, YEAR),
    _shape("YYYY MONTHDIGIT DAY", FormatTag.DAY_MONTH_YEAR, YEAR, MONTH_DIGIT, DAY),
    _shape("YYYYs", FormatTag.DECADE, DECADE),
)


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------

def resolve_month(token: str) -> Result[int]:
    """
    Month number 1-12 for a month token.

    Tried in order: numeric month, month name/abbreviation, season word
    (mapped to the season's first month).
    """
    token = token.lower()
    if _MONTH_NUMBER_RE.fullmatch(token):
        return Ok(int(token))
    if token in MONTH_NAMES:
        return Ok(MONTH_NAMES[token])
    if token in SEASON_MONTHS:
        return Ok(SEASON_MONTHS[token])
    return Err(ParseErrorKind.UNKNOWN_MONTH)


def resolve_date_groups(groups: Dict[str, Optional[str]]) -> Result[Instant]:
    """Midnight UTC of the first day described by the captured fields."""
    year_token = groups.get("year")
    decade_token = groups.get("decade")
    if not year_token and not decade_token:
        return Err(ParseErrorKind.YEAR_REQUIRED)
    year = int(decade_token or year_token)

    month = 1
    month_token = groups.get("month")
    if month_token:
        resolved = resolve_month(month_token)
        if not resolved.ok:
            return resolved
        month = resolved.value

    day = 1
    day_token = groups.get("day")
    if day_token:
        if not _DAY_NUMBER_RE.fullmatch(day_token):
            return Err(ParseErrorKind.UNKNOWN_DATE_FORMAT)
        day = int(day_token)

    return Ok(from_civil(year, month, day))


def _is_season(groups: Dict[str, Optional[str]]) -> bool:
    month_token = groups.get("month")
    return bool(month_token) and month_token.lower() in SEASON_MONTHS


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def match_format(segment: str) -> Result[DateValue]:
    """
    Resolve a modifier-free segment to a point ``DateValue``.

    Returns ``Err(UNKNOWN_DATE_FORMAT)`` if no shape matches, or the field
    error of the first shape that does.
    """
    for input_format in INPUT_FORMATS:
        match = input_format.pattern.fullmatch(segment)
        if match is None:
            continue

        groups = match.groupdict()
        resolved = resolve_date_groups(groups)
        if not resolved.ok:
            return resolved

        fmt = input_format.format
        if fmt == FormatTag.MONTH_YEAR and _is_season(groups):
            fmt = FormatTag.SEASON_YEAR

        return Ok(point_value(resolved.value, fmt))

    return Err(ParseErrorKind.UNKNOWN_DATE_FORMAT)
