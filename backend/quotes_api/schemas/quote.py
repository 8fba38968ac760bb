"""Quote Schemas: Pydantic models for quote API responses.

Invariants:
    - QuoteResponse mirrors the corpus record field for field
    - `_id` only present when the corpus entry carried one

Design Decisions:
    - serialization_alias for `_id`: keeps the dataset's public key without a
      leading-underscore attribute on the model
"""

from pydantic import BaseModel, Field

from quotes_api.core.domain_types import Quote


class QuoteResponse(BaseModel):
    """A single quotation as returned to clients."""
    id: str | None = Field(None, serialization_alias="_id")
    text: str
    author: str
    tags: list[str] = []
    length: int

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            id=quote.id,
            text=quote.text,
            author=quote.author,
            tags=list(quote.tags),
            length=quote.length,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
