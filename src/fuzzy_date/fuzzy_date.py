# src/fuzzy_date/fuzzy_date.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from fuzzy_date.instant import Instant
from fuzzy_date.parser import parse
from fuzzy_date.projections import collate, lower_bound, normalize, to_gedcomx, upper_bound
from fuzzy_date.result import Ok, Result
from fuzzy_date.serialization import model_from_json, model_to_json, validate_canonical_json
from fuzzy_date.types import FuzzyDateModel, Modifier


@dataclass(frozen=True)
class FuzzyDate:
    """
    An immutable, parsed fuzzy date.

    Wraps the canonical ``FuzzyDateModel`` and exposes the projections built
    from it:

    - ``normalized``: standardized human-readable string
    - ``collation_key``: string whose ordering is chronological ordering
    - ``lower_bound`` / ``upper_bound``: inclusive query bounds (None = unbounded)
    - ``formal``: GEDCOM X formal date
    - ``to_json()``: canonical JSON for storage

    Use ``FuzzyDate.parse`` for untrusted, human-entered input and
    ``FuzzyDate.from_json`` to rehydrate a stored model. Instances compare
    equal when their models are equal; ``<`` and friends order by
    ``collation_key``, so ``sorted()`` yields chronological order.
    """

    model: FuzzyDateModel
    original: Optional[str] = field(default=None, compare=False)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Result["FuzzyDate"]:
        result = parse(text)
        if not result.ok:
            return result
        return Ok(cls(model=result.value, original=text))

    @classmethod
    def from_json(
        cls,
        data: Mapping[str, Any],
        *,
        original: Optional[str] = None,
        validate: bool = False,
    ) -> "FuzzyDate":
        model = validate_canonical_json(data) if validate else model_from_json(data)
        return cls(model=model, original=original)

    def to_json(self) -> Dict[str, Any]:
        return model_to_json(self.model)

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    @property
    def modifier(self) -> Modifier:
        return self.model.modifier

    @property
    def normalized(self) -> str:
        return normalize(self.model)

    @property
    def collation_key(self) -> str:
        return collate(self.model)

    @property
    def lower_bound(self) -> Optional[Instant]:
        return lower_bound(self.model)

    @property
    def upper_bound(self) -> Optional[Instant]:
        return upper_bound(self.model)

    @property
    def formal(self) -> str:
        return to_gedcomx(self.model)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def __lt__(self, other: "FuzzyDate") -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.collation_key < other.collation_key

    def __le__(self, other: "FuzzyDate") -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.collation_key <= other.collation_key

    def __gt__(self, other: "FuzzyDate") -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.collation_key > other.collation_key

    def __ge__(self, other: "FuzzyDate") -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.collation_key >= other.collation_key

    def __str__(self) -> str:
        return self.normalized
