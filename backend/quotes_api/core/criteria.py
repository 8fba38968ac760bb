"""Filter Criteria: one explicit, immutable record per matcher.

Invariants:
    - ExactCriteria is only accepted by QuoteEngine.get_quotes
    - PartialCriteria is only accepted by QuoteEngine.search_quotes
    - None / empty collections mean "no filter", never "match nothing"
    - Length bounds are inclusive

Design Decisions:
    - Frozen dataclasses over loose dicts: each matcher's accepted fields are
      named and checked by the type checker
    - Criteria are NOT re-validated here; range checks live in enforce_criteria
      and run in the route layer before the engine is called
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExactCriteria:
    """Exact-mode filter: author equality (any of) and full tag membership."""
    min_length: int | None = None
    max_length: int | None = None
    tags: frozenset[str] | None = None
    count: int = 1
    authors: tuple[str, ...] | None = None


@dataclass(frozen=True)
class PartialCriteria:
    """Partial-mode filter: substring containment over author and tags."""
    min_length: int | None = None
    max_length: int | None = None
    tag_terms: tuple[str, ...] = ()
    author_terms: tuple[str, ...] = ()
    limit: int = 10
