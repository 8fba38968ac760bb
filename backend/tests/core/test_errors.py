"""Error Hierarchy tests: codes, statuses and the REST envelope.

Tests:
    - Criteria errors are 400 / validation
    - NoQuotesFoundError is 404 / resource_not_found
    - DataUnavailableError is 500 / critical
    - to_response() carries code, message, category, severity, timestamp, context
"""

from quotes_api.core.errors import (
    DataUnavailableError,
    ErrorCategory,
    ErrorSeverity,
    LengthBoundsError,
    NoQuotesFoundError,
    QuotesError,
)


def test_criteria_errors_are_400_validation():
    err = LengthBoundsError()
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.code == "INVALID_LENGTH_BOUNDS"


def test_no_quotes_found_is_404():
    err = NoQuotesFoundError()
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.message == "No quotes found matching the criteria."


def test_data_unavailable_is_critical_500():
    err = DataUnavailableError("Error reading tags", "tags")
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.source == "tags"
    assert isinstance(err, QuotesError)


def test_to_response_envelope_shape():
    body = LengthBoundsError().to_response()["error"]
    assert body["code"] == "INVALID_LENGTH_BOUNDS"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"]["parameter"] == "minLength"
    assert "timestamp" in body
