# src/fuzzy_date/parser/modifiers.py

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from fuzzy_date.instant import NEG_INFINITY, POS_INFINITY
from fuzzy_date.intervals import early_window, late_window, mid_window
from fuzzy_date.parser.formats import match_format
from fuzzy_date.result import Err, Ok, ParseErrorKind, Result
from fuzzy_date.types import RANGE_MODIFIERS, DateValue, FuzzyDateModel, Modifier

# Unconfigured child logger; handlers come from fuzzy_date.logging.get_logger.
log = logging.getLogger("fuzzy_date.parser.modifiers")


# ---------------------------------------------------------------------------
# Modifier vocabulary
# ---------------------------------------------------------------------------

# Leading keyword -> modifier. Checked longest first.
MODIFIER_KEYWORDS: Dict[str, Modifier] = {
    "before": Modifier.BEFORE,
    "after": Modifier.AFTER,
    "about": Modifier.ABOUT,
    "between": Modifier.BETWEEN,
    "from": Modifier.FROM,
    "early": Modifier.EARLY,
    "mid": Modifier.MID,
    "late": Modifier.LATE,
}

# Range modifier -> (splitting keyword, error when the split is not 2 parts)
RANGE_SEPARATORS: Dict[Modifier, Tuple[str, ParseErrorKind]] = {
    Modifier.BETWEEN: (" and ", ParseErrorKind.INVALID_BETWEEN_MODIFIER),
    Modifier.FROM: (" to ", ParseErrorKind.INVALID_FROM_MODIFIER),
}

_KEYWORDS_BY_LENGTH: List[Tuple[str, Modifier]] = sorted(
    MODIFIER_KEYWORDS.items(), key=lambda kv: len(kv[0]), reverse=True
)


def dispatch_modifier(cleaned: str) -> Tuple[Modifier, str]:
    """
    Split a cleaned input into (modifier, remainder).

    A keyword only counts when followed by a space, so ``"before"`` on its
    own is handed to the NONE path unchanged.
    """
    for keyword, modifier in _KEYWORDS_BY_LENGTH:
        prefix = keyword + " "
        if cleaned.startswith(prefix):
            return modifier, cleaned[len(prefix):]
    return Modifier.NONE, cleaned


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------

def _single(modifier: Modifier, value: DateValue) -> FuzzyDateModel:
    return FuzzyDateModel(modifier=modifier, start=value, end=value)


def _none(value: DateValue) -> FuzzyDateModel:
    return _single(Modifier.NONE, value)


def _about(value: DateValue) -> FuzzyDateModel:
    return _single(Modifier.ABOUT, value)


def _early(value: DateValue) -> FuzzyDateModel:
    return _single(Modifier.EARLY, early_window(value))


def _mid(value: DateValue) -> FuzzyDateModel:
    return _single(Modifier.MID, mid_window(value))


def _late(value: DateValue) -> FuzzyDateModel:
    return _single(Modifier.LATE, late_window(value))


def _before(value: DateValue) -> FuzzyDateModel:
    return FuzzyDateModel(
        modifier=Modifier.BEFORE,
        start=DateValue(value.format, NEG_INFINITY, value.min_date),
        end=value,
    )


def _after(value: DateValue) -> FuzzyDateModel:
    return FuzzyDateModel(
        modifier=Modifier.AFTER,
        start=value,
        end=DateValue(value.format, value.max_date, POS_INFINITY),
    )


_POINT_RESOLVERS: Dict[Modifier, Callable[[DateValue], FuzzyDateModel]] = {
    Modifier.NONE: _none,
    Modifier.ABOUT: _about,
    Modifier.EARLY: _early,
    Modifier.MID: _mid,
    Modifier.LATE: _late,
    Modifier.BEFORE: _before,
    Modifier.AFTER: _after,
}


def _chronological(first: DateValue, second: DateValue) -> Tuple[DateValue, DateValue]:
    # A reversed range ("from 1905 to 1900") would put start after end.
    if first.min_date > second.max_date:
        return second, first
    return first, second


def _resolve_range(modifier: Modifier, remainder: str) -> Result[FuzzyDateModel]:
    separator, error = RANGE_SEPARATORS[modifier]
    segments = remainder.split(separator)
    if len(segments) != 2:
        return Err(error)

    start = match_format(segments[0])
    if not start.ok:
        return start
    end = match_format(segments[1])
    if not end.ok:
        return end

    first, second = _chronological(start.value, end.value)
    if first is not start.value:
        log.debug("Reordered reversed %s range %r", modifier.value, remainder)

    return Ok(FuzzyDateModel(modifier=modifier, start=first, end=second))


def resolve_modifier(modifier: Modifier, remainder: str) -> Result[FuzzyDateModel]:
    """Build the canonical model for ``modifier`` applied to ``remainder``."""
    if modifier in RANGE_MODIFIERS:
        return _resolve_range(modifier, remainder)

    resolved = match_format(remainder)
    if not resolved.ok:
        return resolved
    return Ok(_POINT_RESOLVERS[modifier](resolved.value))
