"""
Parse pipeline: normalize input -> dispatch modifier -> match format(s) ->
resolve the canonical model.
"""

from __future__ import annotations

import logging

from fuzzy_date.parser.formats import INPUT_FORMATS, match_format, resolve_month
from fuzzy_date.parser.modifiers import dispatch_modifier, resolve_modifier
from fuzzy_date.parser.normalizer import normalize_input
from fuzzy_date.result import Result
from fuzzy_date.types import FuzzyDateModel

log = logging.getLogger("fuzzy_date.parser")


def parse(raw: str) -> Result[FuzzyDateModel]:
    """
    Parse a human-entered date expression into a ``FuzzyDateModel``.

    Never raises for string input; failures come back as ``Err(kind)``.
    """
    cleaned = normalize_input(raw)
    modifier, remainder = dispatch_modifier(cleaned)
    result = resolve_modifier(modifier, remainder)

    if not result.ok:
        log.debug("Rejected %r (cleaned %r): %s", raw, cleaned, result.error.value)

    return result


__all__ = [
    "INPUT_FORMATS",
    "dispatch_modifier",
    "match_format",
    "normalize_input",
    "parse",
    "resolve_modifier",
    "resolve_month",
]
