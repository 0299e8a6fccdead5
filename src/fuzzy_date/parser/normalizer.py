# src/fuzzy_date/parser/normalizer.py

from __future__ import annotations

import re

# "1st", "2 nd", "30th of", "4 of" -> the bare number
_ORDINAL_RE = re.compile(r"([0-9]+)\s*(?:st|nd|rd|th|of)\b(?:\s*of)?")
_SEPARATOR_RE = re.compile(r"[.,/\-_]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_input(raw: str) -> str:
    """
    Clean a human-entered date expression before matching.

        '    1st    of    February    1900 '  -> '1 february 1900'
        'feb 1st, 1900'                        -> 'feb 1 1900'
        '18/03/1905'                           -> '18 03 1905'

    Total: any string in, a (possibly empty) string out.
    """
    s = raw.lower()
    s = _ORDINAL_RE.sub(r"\1", s)
    s = _SEPARATOR_RE.sub(" ", s)
    s = _WHITESPACE_RE.sub(" ", s)
    return s.strip()
