# src/fuzzy_date/serialization.py

"""
Canonical JSON for ``FuzzyDateModel``.

Shape::

    {
      "modifier": "BETWEEN",
      "start": {"format": "D_MMMM_YYYY", "minDate": "1900-02-01T00:00:00.000Z", "maxDate": "..."},
      "end":   {"format": "D_MMMM_YYYY", "minDate": "1905-03-18T00:00:00.000Z", "maxDate": "..."}
    }

Unbounded ends serialize as the sentinel instants themselves.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import ValidationError as SchemaError

from fuzzy_date.core.exceptions import ValidationError
from fuzzy_date.instant import Instant, from_iso, to_iso
from fuzzy_date.types import DateValue, FormatTag, FuzzyDateModel, Modifier


# ---------------------------------------------------------------------------
# Serialize / deserialize
# ---------------------------------------------------------------------------

def value_to_json(value: DateValue) -> Dict[str, str]:
    return {
        "format": value.format.value,
        "minDate": to_iso(value.min_date),
        "maxDate": to_iso(value.max_date),
    }


def model_to_json(model: FuzzyDateModel) -> Dict[str, Any]:
    return {
        "modifier": model.modifier.value,
        "start": value_to_json(model.start),
        "end": value_to_json(model.end),
    }


def value_from_json(data: Mapping[str, Any]) -> DateValue:
    return DateValue(
        format=FormatTag(data["format"]),
        min_date=from_iso(data["minDate"]),
        max_date=from_iso(data["maxDate"]),
    )


def model_from_json(data: Mapping[str, Any]) -> FuzzyDateModel:
    """
    Rebuild a model from trusted canonical JSON.

    No shape checking beyond what construction needs; run
    ``validate_canonical_json`` first for anything not produced by this
    package.
    """
    return FuzzyDateModel(
        modifier=Modifier(data["modifier"]),
        start=value_from_json(data["start"]),
        end=value_from_json(data["end"]),
    )


# ---------------------------------------------------------------------------
# Shape validation
# ---------------------------------------------------------------------------

class DateValueSchema(BaseModel):
    """One canonical endpoint. ``minDate``/``maxDate`` come out as instants."""

    model_config = ConfigDict(extra="forbid")

    format: FormatTag
    minDate: Instant
    maxDate: Instant

    @field_validator("minDate", "maxDate", mode="before")
    @classmethod
    def _parse_instant(cls, value: Any) -> Instant:
        if not isinstance(value, str):
            raise ValueError("expected an ISO-8601 string")
        return from_iso(value)

    @model_validator(mode="after")
    def _check_order(self) -> "DateValueSchema":
        if self.minDate > self.maxDate:
            raise ValueError("minDate is after maxDate")
        return self

    def to_value(self) -> DateValue:
        return DateValue(self.format, self.minDate, self.maxDate)


class FuzzyDateSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    modifier: Modifier
    start: DateValueSchema
    end: DateValueSchema

    @model_validator(mode="after")
    def _check_span(self) -> "FuzzyDateSchema":
        if self.start.minDate > self.end.maxDate:
            raise ValueError("start.minDate is after end.maxDate")
        return self

    def to_model(self) -> FuzzyDateModel:
        return FuzzyDateModel(self.modifier, self.start.to_value(), self.end.to_value())


def validate_canonical_json(data: Any) -> FuzzyDateModel:
    """
    Check that ``data`` has the canonical model shape and build the model.

    Raises ValidationError naming the first offending path
    (``start.minDate``; ``""`` for the document itself).
    """
    try:
        schema = FuzzyDateSchema.model_validate(data)
    except SchemaError as exc:
        first = exc.errors()[0]
        path = ".".join(str(part) for part in first["loc"])
        raise ValidationError(path, first["msg"]) from None
    return schema.to_model()
