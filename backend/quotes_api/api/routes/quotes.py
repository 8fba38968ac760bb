"""Quote Routes: random, list and search endpoints over the quote engine.

Invariants:
    - Every input check (count/limit range, length order, known authors/tags)
      runs before the engine is called
    - Exact mode validates authors AND tags against the catalog; partial mode
      never consults the tags vocabulary
    - /random returns a single object when count == 1, otherwise an array;
      every other endpoint always returns an array
    - NO_MATCH → 404 on every endpoint

Design Decisions:
    - Sync handlers: matching is CPU-only and the catalog reads files, so
      FastAPI's threadpool is the right place for them
    - Query aliases keep the public camelCase names (maxLength, exactTags)
    - /list in partial mode ignores authors after validating them: search by
      author lives on /author-search and /search
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from quotes_api.api.dependencies import get_catalog, get_engine
from quotes_api.api.routes.quote_params import (
    OptionalInt,
    lowercase_all,
    render_quotes,
    split_csv,
)
from quotes_api.config import Settings, get_settings
from quotes_api.core.criteria import ExactCriteria, PartialCriteria
from quotes_api.core.enforce_criteria import (
    check_count_range,
    check_decodable,
    check_length_bounds,
    check_tags_known,
    resolve_authors,
)
from quotes_api.core.quote_engine import QuoteEngine
from quotes_api.infrastructure.corpus_loader import QuoteCatalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/quotes", tags=["quotes"])


def _resolve_exact_filters(
    catalog: QuoteCatalog,
    authors: list[str] | None,
    tags: list[str] | None,
) -> tuple[tuple[str, ...] | None, frozenset[str] | None]:
    """Canonicalize authors and check tags against the catalog (exact mode)."""
    resolved_authors = None
    if authors:
        resolved_authors = tuple(resolve_authors(authors, catalog.authors()))
    tag_set = None
    if tags:
        check_tags_known(tags, catalog.tags())
        tag_set = frozenset(tags)
    return resolved_authors, tag_set


@router.get("/random")
def random_quotes(
    max_length: Annotated[OptionalInt, Query(alias="maxLength")] = None,
    min_length: Annotated[OptionalInt, Query(alias="minLength")] = None,
    tags: str | None = Query(None),
    authors: str | None = Query(None),
    count: Annotated[OptionalInt, Query()] = None,
    engine: QuoteEngine = Depends(get_engine),
    catalog: QuoteCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Random quote(s) with exact author/tag matching."""
    count = 1 if count is None else count
    check_count_range(count, settings.max_random_count, "count")
    resolved_authors, tag_set = _resolve_exact_filters(
        catalog, split_csv(authors), lowercase_all(split_csv(tags)),
    )
    check_length_bounds(min_length, max_length)

    quotes = render_quotes(engine.get_quotes(ExactCriteria(
        min_length=min_length,
        max_length=max_length,
        tags=tag_set,
        count=count,
        authors=resolved_authors,
    )))
    return quotes[0] if count == 1 else quotes


@router.get("/list")
def list_quotes(
    max_length: Annotated[OptionalInt, Query(alias="maxLength")] = None,
    min_length: Annotated[OptionalInt, Query(alias="minLength")] = None,
    tags: str | None = Query(None),
    authors: str | None = Query(None),
    limit: Annotated[OptionalInt, Query()] = None,
    exact_tags: str | None = Query(None, alias="exactTags"),
    engine: QuoteEngine = Depends(get_engine),
    catalog: QuoteCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Quote list; exact tag matching when exactTags=true, partial otherwise."""
    exact = exact_tags == "true"
    limit = settings.default_list_limit if limit is None else limit
    check_count_range(limit, settings.max_list_limit, "limit")

    requested_authors = split_csv(authors)
    if exact:
        resolved_authors, tag_set = _resolve_exact_filters(
            catalog, requested_authors, lowercase_all(split_csv(tags)),
        )
        check_length_bounds(min_length, max_length)
        result = engine.get_quotes(ExactCriteria(
            min_length=min_length,
            max_length=max_length,
            tags=tag_set,
            count=limit,
            authors=resolved_authors,
        ))
    else:
        if requested_authors:
            resolve_authors(requested_authors, catalog.authors())
        check_length_bounds(min_length, max_length)
        result = engine.search_quotes(PartialCriteria(
            min_length=min_length,
            max_length=max_length,
            tag_terms=tuple(split_csv(tags) or ()),
            limit=limit,
        ))
    return render_quotes(result)


def _partial_search(
    engine: QuoteEngine,
    settings: Settings,
    author_param: str,
    author_terms: str | None,
    tag_terms: str | None,
    min_length: int | None,
    max_length: int | None,
    limit: int | None,
) -> list[dict]:
    limit = settings.default_list_limit if limit is None else limit
    check_count_range(limit, settings.max_list_limit, "limit")
    terms = split_csv(author_terms) or []
    check_decodable(terms, author_param)
    check_length_bounds(min_length, max_length)
    return render_quotes(engine.search_quotes(PartialCriteria(
        min_length=min_length,
        max_length=max_length,
        tag_terms=tuple(split_csv(tag_terms) or ()),
        author_terms=tuple(terms),
        limit=limit,
    )))


@router.get("/author-search")
def author_search(
    terms: str | None = Query(None),
    tags: str | None = Query(None),
    max_length: Annotated[OptionalInt, Query(alias="maxLength")] = None,
    min_length: Annotated[OptionalInt, Query(alias="minLength")] = None,
    limit: Annotated[OptionalInt, Query()] = None,
    engine: QuoteEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    """Partial author-name search; `terms` are author fragments (all must match)."""
    return _partial_search(
        engine, settings, "terms", terms, tags, min_length, max_length, limit,
    )


@router.get("/search")
def search_quotes(
    authors: str | None = Query(None),
    tags: str | None = Query(None),
    max_length: Annotated[OptionalInt, Query(alias="maxLength")] = None,
    min_length: Annotated[OptionalInt, Query(alias="minLength")] = None,
    limit: Annotated[OptionalInt, Query()] = None,
    engine: QuoteEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    """Combined partial search over author and tag fragments."""
    return _partial_search(
        engine, settings, "authors", authors, tags, min_length, max_length, limit,
    )
