"""Normalization tests: author decoding/casing and tag casing.

Tests cover:
    - Percent-decoding, trimming and lowercasing of authors
    - Tags lowercased but never decoded
    - Malformed escapes raise MalformedEncodingError
"""

import pytest

from quotes_api.core.errors import MalformedEncodingError
from quotes_api.core.normalize import normalize_author, normalize_tag, percent_decode


def test_normalize_author_decodes_and_lowercases():
    assert normalize_author("mark%20twain") == "mark twain"
    assert normalize_author("Mark%20TWAIN") == "mark twain"


def test_normalize_author_strips_surrounding_whitespace():
    assert normalize_author("  Oscar Wilde\t") == "oscar wilde"
    assert normalize_author("%20Oscar%20Wilde%20") == "oscar wilde"


def test_normalize_author_decodes_utf8_escapes():
    assert normalize_author("Ren%C3%A9%20Descartes") == "rené descartes"


def test_plus_is_not_treated_as_space():
    assert normalize_author("a+b") == "a+b"


def test_normalize_tag_lowercases_only():
    assert normalize_tag("Famous-Quotes") == "famous-quotes"
    assert normalize_tag("self%20help") == "self%20help"


@pytest.mark.parametrize("raw", ["100%", "%zz", "mark%2", "%C3%28"])
def test_malformed_escape_raises(raw):
    with pytest.raises(MalformedEncodingError) as exc_info:
        percent_decode(raw)
    assert exc_info.value.http_status == 400
    assert exc_info.value.code == "MALFORMED_ENCODING"


def test_plain_string_passes_through():
    assert percent_decode("Socrates") == "Socrates"


def test_malformed_escape_reports_given_parameter():
    with pytest.raises(MalformedEncodingError) as exc_info:
        percent_decode("%zz", "terms")
    assert exc_info.value.parameter == "terms"
    assert exc_info.value.to_response()["error"]["context"]["parameter"] == "terms"
