# tests/test_serialization.py

from __future__ import annotations

import copy
import json

import pytest

from fuzzy_date.core.exceptions import ValidationError
from fuzzy_date.parser import parse
from fuzzy_date.serialization import model_from_json, model_to_json, validate_canonical_json


def _model(text):
    result = parse(text)
    assert result.ok, f"{text!r}: {result.error}"
    return result.value


def test_canonical_json_shape():
    assert model_to_json(_model("between 1st of February 1900 and 18/03/1905")) == {
        "modifier": "BETWEEN",
        "start": {
            "format": "D_MMMM_YYYY",
            "minDate": "1900-02-01T00:00:00.000Z",
            "maxDate": "1900-02-01T23:59:59.999Z",
        },
        "end": {
            "format": "D_MMMM_YYYY",
            "minDate": "1905-03-18T00:00:00.000Z",
            "maxDate": "1905-03-18T23:59:59.999Z",
        },
    }


def test_sentinels_serialize_as_expanded_years():
    data = model_to_json(_model("before 1900"))
    assert data["start"]["minDate"] == "-271821-04-20T00:00:00.000Z"

    data = model_to_json(_model("after 1900"))
    assert data["end"]["maxDate"] == "+275760-09-13T00:00:00.000Z"


@pytest.mark.parametrize(
    "text",
    ["1800s", "winter 1800", "before jan 1900", "after 1 jan 1900", "late 1800s", "mid 2000", "from 1900 to 1905"],
)
def test_model_survives_a_json_round_trip(text):
    model = _model(text)
    data = json.loads(json.dumps(model_to_json(model)))
    validate_canonical_json(data)
    assert model_from_json(data) == model


def _valid():
    return model_to_json(_model("jan 1900"))


def _path_of(data):
    with pytest.raises(ValidationError) as exc_info:
        validate_canonical_json(data)
    return exc_info.value.path


def test_validation_rejects_non_objects():
    assert _path_of([]) == ""
    data = _valid()
    data["start"] = "1900"
    assert _path_of(data) == "start"


def test_validation_rejects_missing_and_unexpected_keys():
    data = _valid()
    del data["end"]
    assert _path_of(data) == "end"

    data = _valid()
    data["extra"] = 1
    assert _path_of(data) == "extra"

    data = _valid()
    del data["start"]["maxDate"]
    assert _path_of(data) == "start.maxDate"

    data = _valid()
    data["end"]["precision"] = "day"
    assert _path_of(data) == "end.precision"


def test_validation_rejects_unknown_enum_values():
    data = _valid()
    data["modifier"] = "CIRCA"
    assert _path_of(data) == "modifier"

    data = _valid()
    data["start"]["format"] = "YYYY_MM"
    assert _path_of(data) == "start.format"


def test_validation_rejects_bad_instants():
    data = _valid()
    data["start"]["minDate"] = "1900-01-01"
    assert _path_of(data) == "start.minDate"

    data = _valid()
    data["end"]["maxDate"] = 0
    assert _path_of(data) == "end.maxDate"


def test_validation_rejects_inverted_ranges():
    data = _valid()
    data["start"]["minDate"], data["start"]["maxDate"] = data["start"]["maxDate"], data["start"]["minDate"]
    assert _path_of(data) == "start"

    later = model_to_json(_model("1905"))
    data = _valid()
    data["start"] = copy.deepcopy(later["start"])
    assert _path_of(data) == ""


def test_validation_error_message_names_the_path():
    data = _valid()
    data["modifier"] = "CIRCA"
    with pytest.raises(ValidationError, match=r"^modifier: "):
        validate_canonical_json(data)


def test_validation_returns_the_model():
    model = _model("between 1900 and 1905")
    assert validate_canonical_json(model_to_json(model)) == model


def test_validated_sentinels_come_back_unbounded():
    data = model_to_json(_model("before 1900"))
    assert validate_canonical_json(data).start.unbounded_start
