"""Quote Predicates: pure per-quote filters for exact and partial matching.

Invariants:
    - All functions are PURE: no IO, no side effects, no mutation of the quote
    - Absent or empty requests are vacuously true
    - Authors: OR across requested values (a quote has exactly one author)
    - Tags: AND across requested values (a quote carries many tags)
    - Partial tags: AND across terms, OR across the quote's tags per term

Design Decisions:
    - Author/tag asymmetry is intentional and mirrored in both modes
    - Exact tag membership is case-sensitive as stored; the route layer
      lowercases requested tags before calling
"""

from collections.abc import Collection, Iterable

from quotes_api.core.domain_types import Quote
from quotes_api.core.normalize import normalize_author, normalize_tag


def matches_authors_exact(quote: Quote, requested_authors: Iterable[str] | None) -> bool:
    """True if the quote's author equals any requested author (normalized)."""
    if not requested_authors:
        return True
    quote_author = normalize_author(quote.author)
    return any(
        normalize_author(author) == quote_author for author in requested_authors
    )


def matches_tags_exact(quote: Quote, requested_tags: Collection[str] | None) -> bool:
    """True if every requested tag is present on the quote."""
    if not requested_tags:
        return True
    quote_tags = set(quote.tags)
    return all(tag in quote_tags for tag in requested_tags)


def matches_author_partial(quote: Quote, terms: Iterable[str] | None) -> bool:
    """True if every term is a substring of the quote's author (normalized)."""
    if not terms:
        return True
    quote_author = normalize_author(quote.author)
    return all(normalize_author(term) in quote_author for term in terms)


def matches_tag_partial(quote: Quote, terms: Iterable[str] | None) -> bool:
    """True if every term is contained in at least one of the quote's tags."""
    if not terms:
        return True
    quote_tags = [normalize_tag(tag) for tag in quote.tags]
    return all(
        any(normalize_tag(term) in tag for tag in quote_tags)
        for term in terms
    )
