"""Corpus Loader: reads the quote corpus and auxiliary directories from JSON files.

Invariants:
    - load_corpus returns an immutable tuple of Quote; called once at startup
    - Every entry must carry text/content, author, tags and length; length is
      trusted as stored and never recomputed
    - Any read/parse failure raises DataUnavailableError naming the source
    - QuoteCatalog re-reads authors/tags on each call: a bad file fails the
      request (500), not the process

Design Decisions:
    - Pydantic TypeAdapter over hand-rolled dict checks: one validation pass,
      field-level messages in the error
    - "content" accepted as an alias of "text" and "_id" of "id": the public
      quotes dataset ships those keys
"""

import json
import logging
from pathlib import Path

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from quotes_api.core.domain_types import Quote
from quotes_api.core.errors import DataUnavailableError, MalformedEncodingError
from quotes_api.core.normalize import percent_decode

logger = logging.getLogger(__name__)


class QuoteRecord(BaseModel):
    """One entry of quotes.json as stored on disk."""
    text: str = Field(validation_alias=AliasChoices("text", "content"))
    author: str
    tags: list[str] = []
    length: int = Field(ge=0)
    id: str | None = Field(None, validation_alias=AliasChoices("id", "_id"))

    @field_validator("author")
    @classmethod
    def author_must_decode(cls, v: str) -> str:
        """Matchers percent-decode authors; a bad escape here is a corpus fault."""
        try:
            percent_decode(v)
        except MalformedEncodingError as e:
            raise ValueError(f"author has malformed percent-encoding: {v!r}") from e
        return v

    def to_quote(self) -> Quote:
        return Quote(
            text=self.text,
            author=self.author,
            tags=tuple(self.tags),
            length=self.length,
            id=self.id,
        )


_records_adapter = TypeAdapter(list[QuoteRecord])
_authors_adapter = TypeAdapter(dict[str, int])
_tags_adapter = TypeAdapter(list[str])


def _read_json(path: Path, source: str) -> object:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(
            f"Failed to read {source} from {path}: {e}",
            extra={"error_code": "DATA_UNAVAILABLE"},
        )
        raise DataUnavailableError(f"Error reading {source}", source) from e


def load_corpus(path: Path) -> tuple[Quote, ...]:
    """Load and validate the quote corpus. Fatal at startup on failure."""
    raw = _read_json(path, "quotes")
    try:
        records = _records_adapter.validate_python(raw)
    except ValidationError as e:
        logger.error(
            f"Invalid quotes file {path}: {e.error_count()} error(s)",
            extra={"error_code": "DATA_UNAVAILABLE"},
        )
        raise DataUnavailableError("Quotes file is malformed", "quotes") from e
    corpus = tuple(record.to_quote() for record in records)
    logger.info(f"Loaded {len(corpus)} quotes", extra={"quote_count": len(corpus)})
    return corpus


class QuoteCatalog:
    """Authors directory and tags vocabulary, read on demand."""

    def __init__(self, authors_path: Path, tags_path: Path):
        self._authors_path = authors_path
        self._tags_path = tags_path

    def authors(self) -> dict[str, int]:
        """Canonical author display name -> number of quotes."""
        raw = _read_json(self._authors_path, "authors")
        try:
            return _authors_adapter.validate_python(raw)
        except ValidationError as e:
            raise DataUnavailableError("Authors file is malformed", "authors") from e

    def tags(self) -> list[str]:
        raw = _read_json(self._tags_path, "tags")
        try:
            return _tags_adapter.validate_python(raw)
        except ValidationError as e:
            raise DataUnavailableError("Tags file is malformed", "tags") from e
