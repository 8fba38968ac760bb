"""Criteria Enforcement tests: pure request validation before the engine.

Tests cover:
    - count/limit range including both edges
    - Length bound ordering, equal bounds allowed
    - Author resolution to canonical casing, all unknowns reported
    - Tag vocabulary checks, all unknowns reported
"""

import pytest

from quotes_api.core.enforce_criteria import (
    check_count_range,
    check_decodable,
    check_length_bounds,
    check_tags_known,
    resolve_authors,
)
from quotes_api.core.errors import (
    CountOutOfRangeError,
    InvalidCriteriaError,
    LengthBoundsError,
    MalformedEncodingError,
    UnknownAuthorError,
    UnknownTagError,
)

_DIRECTORY = {"Mark Twain": 2, "Oscar Wilde": 2, "Socrates": 1}


# ─── check_count_range ───────────────────────────────────────────

@pytest.mark.parametrize("value", [1, 25, 50])
def test_count_within_range_passes(value):
    assert check_count_range(value, 50, "count") == value


@pytest.mark.parametrize("value", [0, -1, 51])
def test_count_outside_range_raises(value):
    with pytest.raises(CountOutOfRangeError) as exc_info:
        check_count_range(value, 50, "count")
    assert exc_info.value.message == "Count must be a number between 1 and 50."
    assert exc_info.value.http_status == 400


def test_limit_message_names_parameter():
    with pytest.raises(CountOutOfRangeError) as exc_info:
        check_count_range(101, 100, "limit")
    assert exc_info.value.message == "Limit must be a number between 1 and 100."
    assert exc_info.value.parameter == "limit"


# ─── check_length_bounds ─────────────────────────────────────────

@pytest.mark.parametrize("bounds", [(None, None), (10, None), (None, 10), (50, 50), (1, 2)])
def test_valid_length_bounds_pass(bounds):
    check_length_bounds(*bounds)


def test_min_greater_than_max_raises():
    with pytest.raises(LengthBoundsError):
        check_length_bounds(60, 59)


# ─── resolve_authors ─────────────────────────────────────────────

def test_authors_resolved_to_canonical_case():
    assert resolve_authors(["mark twain", "OSCAR WILDE"], _DIRECTORY) == [
        "Mark Twain", "Oscar Wilde",
    ]


def test_unknown_authors_all_reported():
    with pytest.raises(UnknownAuthorError) as exc_info:
        resolve_authors(["Socrates", "Plato", "Kant"], _DIRECTORY)
    assert exc_info.value.authors == ["Plato", "Kant"]
    assert exc_info.value.message == "Invalid author(s): Plato, Kant"
    assert isinstance(exc_info.value, InvalidCriteriaError)


# ─── check_tags_known ────────────────────────────────────────────

def test_known_tags_pass():
    check_tags_known(["wisdom", "life"], ["life", "wisdom", "humor"])


def test_unknown_tags_all_reported():
    with pytest.raises(UnknownTagError) as exc_info:
        check_tags_known(["wisdom", "cats", "dogs"], ["wisdom"])
    assert exc_info.value.tags == ["cats", "dogs"]
    assert exc_info.value.to_response()["error"]["context"]["invalid_values"] == [
        "cats", "dogs",
    ]


# ─── check_decodable ─────────────────────────────────────────────

def test_decodable_terms_pass():
    check_decodable(["mark%20twain", "wilde"], "terms")


def test_undecodable_term_raises_with_parameter():
    with pytest.raises(MalformedEncodingError) as exc_info:
        check_decodable(["ok", "50%"], "authors")
    assert exc_info.value.parameter == "authors"
    assert exc_info.value.value == "50%"
