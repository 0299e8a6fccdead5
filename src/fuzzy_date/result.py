# src/fuzzy_date/result.py

"""
Tagged parse results.

Parsing never raises on bad input; it hands back either ``Ok(value)`` or
``Err(kind)``. Callers branch on ``result.ok``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ParseErrorKind(str, Enum):
    UNKNOWN_DATE_FORMAT = "Unknown date format."
    UNKNOWN_MONTH = "Unknown month."
    YEAR_REQUIRED = "Year is required."
    INVALID_BETWEEN_MODIFIER = 'Invalid "BETWEEN" modifier.'
    INVALID_FROM_MODIFIER = 'Invalid "FROM" modifier.'


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ParseErrorKind

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
