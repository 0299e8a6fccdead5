# tests/test_fuzzy_date.py

from __future__ import annotations

import pytest

from fuzzy_date import FuzzyDate, Modifier, ParseErrorKind, from_iso
from fuzzy_date.core.exceptions import ValidationError


def test_parse_errors_are_values():
    cases = {
        "a": "Unknown date format.",
        "between 1900": 'Invalid "BETWEEN" modifier.',
        "from 1900": 'Invalid "FROM" modifier.',
        "jam 1900": "Unknown month.",
    }
    for text, message in cases.items():
        result = FuzzyDate.parse(text)
        assert not result.ok
        assert result.error.value == message


@pytest.mark.parametrize("text", ["", "   ", "?", "1900 and", "before before 1900", "été 1900", "99999999"])
def test_parse_never_raises(text):
    result = FuzzyDate.parse(text)
    assert not result.ok
    assert isinstance(result.error, ParseErrorKind)


def test_projections(parsed):
    date = parsed("between 1st of February 1900 and 18/03/1905")
    assert date.modifier == Modifier.BETWEEN
    assert date.normalized == "between 1 February 1900 and 18 March 1905"
    assert date.formal == "+1900-02-01/+1905-03-18"
    assert date.lower_bound == from_iso("1900-02-01T00:00:00.000Z")
    assert date.upper_bound == from_iso("1900-02-01T23:59:59.999Z")
    assert str(date) == date.normalized


def test_original_text_is_kept_but_ignored_for_equality(parsed):
    a = parsed("1 Jan 1800")
    b = parsed("jan 1st, 1800")
    assert a.original == "1 Jan 1800"
    assert b.original == "jan 1st, 1800"
    assert a == b
    assert hash(a) == hash(b)


def test_json_round_trip(parsed):
    date = parsed("late 1800s")
    restored = FuzzyDate.from_json(date.to_json(), original="late 1800s")
    assert restored == date
    assert restored.collation_key == date.collation_key
    assert restored.normalized == "late 1800s"


def test_from_json_validates_on_request(parsed):
    data = parsed("1900").to_json()
    data["modifier"] = "CIRCA"
    with pytest.raises(ValidationError):
        FuzzyDate.from_json(data, validate=True)


def test_sorting_is_chronological(parsed):
    texts = ["after 1900", "1900", "before 1900", "about 1900", "between 1900 and 1901", "1800s"]
    dates = sorted(parsed(t) for t in texts)
    # "before" has no lower bound, so it sorts ahead of everything
    assert [d.original for d in dates] == [
        "before 1900",
        "1800s",
        "about 1900",
        "1900",
        "between 1900 and 1901",
        "after 1900",
    ]
    assert dates[0] < dates[1] <= dates[1]
    assert dates[-1] > dates[0] >= dates[0]


def test_comparison_with_other_types_is_unsupported(parsed):
    with pytest.raises(TypeError):
        parsed("1900") < "1900"
