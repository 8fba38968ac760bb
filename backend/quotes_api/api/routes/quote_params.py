"""Quote Route Helpers: query-string parsing and result rendering shared by quote routes.

Invariants:
    - Comma-separated parameters split on "," with empty items dropped
    - Absent parameter → None (no filter), never an empty filter
    - Blank integer parameter (`?maxLength=`) counts as absent, not as invalid
    - NO_MATCH is converted to NoQuotesFoundError (404) here and only here
"""

from typing import Annotated, Any

from pydantic import BeforeValidator

from quotes_api.core.domain_types import NO_MATCH, MatchResult
from quotes_api.core.errors import NoQuotesFoundError
from quotes_api.schemas.quote import QuoteResponse


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalInt = Annotated[int | None, BeforeValidator(blank_to_none)]


def split_csv(value: str | None) -> list[str] | None:
    if not value:
        return None
    items = [item for item in value.split(",") if item]
    return items or None


def lowercase_all(values: list[str] | None) -> list[str] | None:
    if values is None:
        return None
    return [v.lower() for v in values]


def render_quotes(result: MatchResult) -> list[dict]:
    """Serialize a match result, raising 404 on NO_MATCH."""
    if result is NO_MATCH:
        raise NoQuotesFoundError()
    return [QuoteResponse.from_quote(q).to_json() for q in result]
