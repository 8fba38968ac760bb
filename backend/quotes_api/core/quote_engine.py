"""Quote Engine: exact and partial matchers over an injected, read-only corpus.

Invariants:
    - Corpus is a tuple fixed at construction: never reloaded, never mutated
    - Filter order is fixed: author -> tags -> length
    - Emptiness is checked twice: after category filters, after length filters
    - Empty candidate set returns NO_MATCH (a value), never raises
    - Sample size is clamped to the candidate count

Design Decisions:
    - Corpus and RandomSource injected at construction (no module-level data)
    - Shared _select() keeps both matchers structurally identical; only the
      category predicates and the size field differ
    - No locking: every call filters into request-local lists
"""

import logging
import random
from collections.abc import Callable, Iterable

from quotes_api.core.criteria import ExactCriteria, PartialCriteria
from quotes_api.core.domain_types import NO_MATCH, MatchResult, Quote
from quotes_api.core.predicates import (
    matches_author_partial,
    matches_authors_exact,
    matches_tag_partial,
    matches_tags_exact,
)
from quotes_api.core.sampler import RandomSource, sample_without_replacement

logger = logging.getLogger(__name__)

QuoteFilter = Callable[[Quote], bool]


def filter_by_length(
    quotes: list[Quote], min_length: int | None, max_length: int | None,
) -> list[Quote]:
    """Inclusive length bounds; None leaves that side open."""
    if min_length is not None:
        quotes = [q for q in quotes if q.length >= min_length]
    if max_length is not None:
        quotes = [q for q in quotes if q.length <= max_length]
    return quotes


class QuoteEngine:
    """Retrieval engine: filter the corpus, then sample without replacement."""

    def __init__(self, corpus: Iterable[Quote], rng: RandomSource | None = None):
        self._corpus: tuple[Quote, ...] = tuple(corpus)
        self._rng: RandomSource = rng if rng is not None else random.Random()

    @property
    def corpus(self) -> tuple[Quote, ...]:
        return self._corpus

    @property
    def size(self) -> int:
        return len(self._corpus)

    def get_quotes(self, criteria: ExactCriteria) -> MatchResult:
        """Exact matcher: author equality (any of), tag superset, length bounds."""
        category_filters: list[QuoteFilter] = []
        if criteria.authors:
            category_filters.append(
                lambda q: matches_authors_exact(q, criteria.authors),
            )
        if criteria.tags:
            category_filters.append(
                lambda q: matches_tags_exact(q, criteria.tags),
            )
        return self._select(
            category_filters, criteria.min_length, criteria.max_length,
            criteria.count,
        )

    def search_quotes(self, criteria: PartialCriteria) -> MatchResult:
        """Partial matcher: substring terms over author and tags, length bounds."""
        category_filters: list[QuoteFilter] = []
        if criteria.author_terms:
            category_filters.append(
                lambda q: matches_author_partial(q, criteria.author_terms),
            )
        if criteria.tag_terms:
            category_filters.append(
                lambda q: matches_tag_partial(q, criteria.tag_terms),
            )
        return self._select(
            category_filters, criteria.min_length, criteria.max_length,
            criteria.limit,
        )

    def _select(
        self,
        category_filters: list[QuoteFilter],
        min_length: int | None,
        max_length: int | None,
        size: int,
    ) -> MatchResult:
        candidates = list(self._corpus)
        for predicate in category_filters:
            candidates = [q for q in candidates if predicate(q)]
        if not candidates:
            logger.debug("No candidates after category filters")
            return NO_MATCH

        candidates = filter_by_length(candidates, min_length, max_length)
        if not candidates:
            logger.debug("No candidates after length filters")
            return NO_MATCH

        size = min(size, len(candidates))
        return sample_without_replacement(candidates, size, self._rng)
