# tests/test_projections.py

from __future__ import annotations

import pytest

from fuzzy_date.instant import NEG_INFINITY, POS_INFINITY, from_civil
from fuzzy_date.parser import parse
from fuzzy_date.projections import (
    collate,
    in_window,
    lower_bound,
    normalize,
    render_date,
    simple_date,
    sortable_timestamp,
    to_gedcomx,
    upper_bound,
)
from fuzzy_date.types import FormatTag


def _model(text):
    result = parse(text)
    assert result.ok, f"{text!r}: {result.error}"
    return result.value


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------

NORMALIZED = {
    "1800s": "1800s",
    "1800": "1800",
    "Winter 1800": "winter 1800",
    "1800 Winter": "winter 1800",
    "Jan 1800": "January 1800",
    "1800 January": "January 1800",
    "1 1800": "January 1800",
    "1800 01": "January 1800",
    "1 Jan 1800": "1 January 1800",
    "01 January 1800": "1 January 1800",
    "January 01 1800": "1 January 1800",
    "1800 Jan 01": "1 January 1800",
    "1800 01 January": "1 January 1800",
    "01 1 1800": "1 January 1800",
    "1800 1 01": "1 January 1800",
    "    1st    of    February    1900    ": "1 February 1900",
    "feb 1st, 1900": "1 February 1900",
    "February 1st, 1900": "1 February 1900",
    "  ---___////,,,,    sEpTeMbEr 30  th ,,,   ---// 1984": "30 September 1984",
}


@pytest.mark.parametrize("raw,expected", sorted(NORMALIZED.items()))
def test_normalize_plain_dates(raw, expected):
    assert normalize(_model(raw)) == expected


def test_normalize_modifier_phrasing():
    assert normalize(_model("before 1st of February 1900")) == "before 1 February 1900"
    assert normalize(_model("after 1st of February 1900")) == "after 1 February 1900"
    assert normalize(_model("about 1st of February 1900")) == "about 1 February 1900"
    assert (
        normalize(_model("between 1st of February 1900 and 18/03/1905"))
        == "between 1 February 1900 and 18 March 1905"
    )
    assert (
        normalize(_model("from 1st of February 1900 to 18/03/1905"))
        == "from 1 February 1900 to 18 March 1905"
    )


def test_normalize_bisection_names_the_original_span():
    assert normalize(_model("early 1800s")) == "early 1800s"
    assert normalize(_model("mid 1800s")) == "mid 1800s"
    assert normalize(_model("late 1800s")) == "late 1800s"
    assert normalize(_model("late 1800")) == "late 1800"
    assert normalize(_model("mid 2000")) == "mid 2000"
    assert normalize(_model("mid winter 1800")) == "mid winter 1800"
    assert normalize(_model("late winter 1800")) == "late winter 1800"
    assert normalize(_model("late feb 2000")) == "late February 2000"
    assert normalize(_model("late 1 jan 1800")) == "late 1 January 1800"


def test_normalize_reversed_range_comes_out_in_order():
    assert normalize(_model("from 1905 to 1900")) == "from 1900 to 1905"


def test_normalized_form_parses_back_to_the_same_model():
    for raw in ("between 1st of February 1900 and 18/03/1905", "late 1800s", "winter 1800", "before jan 1900"):
        model = _model(raw)
        assert _model(normalize(model)) == model


def test_render_date():
    assert render_date(from_civil(1800), FormatTag.DECADE) == "1800s"
    assert render_date(from_civil(1800, 6, 1), FormatTag.SEASON_YEAR) == "summer 1800"
    assert render_date(from_civil(1800, 9, 1), FormatTag.SEASON_YEAR) == "fall 1800"
    assert render_date(from_civil(1905, 3, 18), FormatTag.DAY_MONTH_YEAR) == "18 March 1905"


# ---------------------------------------------------------------------------
# collate
# ---------------------------------------------------------------------------

CHRONOLOGICAL = [
    "before 2000",
    "before jan 2000",
    "before jan 1 2000",
    "about 2000",
    "about jan 2000",
    "about jan 1 2000",
    "2000",
    "jan 2000",
    "jan 1 2000",
    "from 2000 to 2001",
    "from 2000 to jan 2001",
    "from 2000 to 1 jan 2001",
    "from jan 2000 to 2001",
    "from jan 2000 to jan 2001",
    "from jan 2000 to 1 jan 2001",
    "from 1 jan 2000 to 2001",
    "from 1 jan 2000 to jan 2001",
    "from 1 jan 2000 to 1 jan 2001",
    "between 2000 and 2001",
    "between 2000 and jan 2001",
    "between 2000 and 1 jan 2001",
    "between jan 2000 and 2001",
    "between jan 2000 and jan 2001",
    "between jan 2000 and 1 jan 2001",
    "between 1 jan 2000 and 2001",
    "between 1 jan 2000 and jan 2001",
    "between 1 jan 2000 and 1 jan 2001",
    "after 2000",
    "after jan 2000",
    "after jan 1 2000",
    "jan 2 2000",
    "dec 31 2000",
]


def test_collation_keys_sort_chronologically():
    keys = [collate(_model(text)) for text in CHRONOLOGICAL]
    for previous, current, text in zip(keys, keys[1:], CHRONOLOGICAL[1:]):
        assert previous < current, text


def test_collation_shuffled_input_sorts_back():
    shuffled = list(reversed(CHRONOLOGICAL[::2])) + list(CHRONOLOGICAL[1::2])
    ordered = sorted(shuffled, key=lambda text: collate(_model(text)))
    assert ordered == [t for t in CHRONOLOGICAL if t in shuffled]


def test_collation_handles_negative_and_far_years():
    older = collate(_model("before 0050"))
    ancient = collate(_model("0050"))
    modern = collate(_model("2000"))
    assert older < ancient < modern


def test_equal_models_have_equal_keys():
    assert collate(_model("1 jan 1800")) == collate(_model("jan 1st, 1800"))


def test_sortable_timestamp_is_fixed_width():
    assert sortable_timestamp(NEG_INFINITY) == "0" * 17
    assert sortable_timestamp(0) == "08640000000000000"
    assert sortable_timestamp(POS_INFINITY) == "17280000000000000"
    assert sortable_timestamp(-1) < sortable_timestamp(0) < sortable_timestamp(1)


def test_collation_key_layout():
    key = collate(_model("2000"))
    fields = key.split("|")
    assert len(fields) == 5
    assert fields[0] == sortable_timestamp(from_civil(2000))
    assert fields[1:3] == ["02", "01"]
    assert fields[3] == fields[0]


# ---------------------------------------------------------------------------
# bounds
# ---------------------------------------------------------------------------

def test_bounds_of_a_plain_date():
    m = _model("1900")
    assert lower_bound(m) == from_civil(1900)
    assert upper_bound(m) == from_civil(1901) - 1


def test_bounds_of_before_and_after():
    before = _model("before 1900")
    assert lower_bound(before) is None
    assert upper_bound(before) == from_civil(1900)

    after = _model("after 1900")
    assert lower_bound(after) == from_civil(1900)
    assert upper_bound(after) == from_civil(1901) - 1


def test_bounds_of_a_range_come_from_its_start():
    m = _model("between 1900 and 1905")
    assert lower_bound(m) == from_civil(1900)
    assert upper_bound(m) == from_civil(1901) - 1


def test_in_window():
    m = _model("jan 1900")
    assert in_window(m, from_civil(1899), from_civil(1900, 1, 15))
    assert in_window(m, from_civil(1900, 1, 20), from_civil(1901))
    assert not in_window(m, from_civil(1901), from_civil(1902))

    # unbounded ends never match
    before = _model("before 1900")
    assert not in_window(before, NEG_INFINITY, from_civil(1800))


def test_in_window_rejects_reversed_window():
    with pytest.raises(ValueError):
        in_window(_model("1900"), from_civil(1901), from_civil(1900))


# ---------------------------------------------------------------------------
# GEDCOM X
# ---------------------------------------------------------------------------

GEDCOMX = {
    "1800": "+1800",
    "1800s": "+1800",
    "winter 1800": "+1800-12",
    "jan 1800": "+1800-01",
    "18 march 1905": "+1905-03-18",
    "0050": "+0050",
    "about jan 1800": "A+1800-01",
    "before 1 feb 1900": "/+1900-02-01",
    "after 1900": "+1900/",
    "between 1900 and 1905": "+1900/+1905",
    "from jan 1900 to 18 mar 1905": "+1900-01/+1905-03-18",
    "late 1800s": "+1805/+1809",
    "early 1800": "+1800/+1800",
    "mid jan 1900": "+1900-01/+1900-01",
}


@pytest.mark.parametrize("raw,expected", sorted(GEDCOMX.items()))
def test_gedcomx(raw, expected):
    assert to_gedcomx(_model(raw)) == expected


def test_simple_date_negative_year():
    assert simple_date(from_civil(-1), FormatTag.YEAR) == "-0001"
    assert simple_date(from_civil(-44, 3, 15), FormatTag.DAY_MONTH_YEAR) == "-0044-03-15"
