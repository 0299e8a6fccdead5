"""
fuzzy_date: parse free-form historical date expressions ("before 1900",
"between 1 Jan 1900 and 31 Dec 1901", "winter 1800") into a canonical
interval model, and derive a normalized string, a collation key, query
bounds and a GEDCOM X formal date from it.
"""

from fuzzy_date.fuzzy_date import FuzzyDate
from fuzzy_date.instant import NEG_INFINITY, POS_INFINITY, from_iso, to_iso
from fuzzy_date.parser import parse
from fuzzy_date.result import Err, Ok, ParseErrorKind, Result
from fuzzy_date.serialization import (
    model_from_json,
    model_to_json,
    validate_canonical_json,
)
from fuzzy_date.types import DateValue, FormatTag, FuzzyDateModel, Modifier

__version__ = "0.1.0"

__all__ = [
    "DateValue",
    "Err",
    "FormatTag",
    "FuzzyDate",
    "FuzzyDateModel",
    "Modifier",
    "NEG_INFINITY",
    "Ok",
    "POS_INFINITY",
    "ParseErrorKind",
    "Result",
    "from_iso",
    "model_from_json",
    "model_to_json",
    "parse",
    "to_iso",
    "validate_canonical_json",
]
