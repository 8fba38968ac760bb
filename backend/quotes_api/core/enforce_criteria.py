"""Criteria Enforcement: pure validation run by routes before the engine.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Raise an InvalidCriteriaError subclass on violation, return on success
    - Unknown authors/tags are reported all at once, in request order

Design Decisions:
    - Exceptions over error dicts: the FastAPI global handler renders every
      QuotesError uniformly, so routes stay free of status-code branching
    - Authors directory and tags vocabulary passed in by the caller: the
      route layer owns reading them, these checks never touch the filesystem
"""

from collections.abc import Iterable, Mapping

from quotes_api.core.normalize import percent_decode
from quotes_api.core.errors import (
    CountOutOfRangeError,
    LengthBoundsError,
    UnknownAuthorError,
    UnknownTagError,
)


def check_count_range(value: int, maximum: int, name: str) -> int:
    """count/limit must lie in 1..maximum."""
    if value < 1 or value > maximum:
        raise CountOutOfRangeError(name, maximum)
    return value


def check_decodable(values: Iterable[str], parameter: str) -> None:
    """Author terms are percent-decoded by the matchers; reject bad escapes up front."""
    for value in values:
        percent_decode(value, parameter)


def check_length_bounds(min_length: int | None, max_length: int | None) -> None:
    """When both bounds are given, min must not exceed max."""
    if min_length is not None and max_length is not None and min_length > max_length:
        raise LengthBoundsError()


def resolve_authors(
    requested: Iterable[str], directory: Mapping[str, int],
) -> list[str]:
    """Map each requested author case-insensitively to its canonical display name."""
    canonical = {name.lower(): name for name in directory}
    resolved: list[str] = []
    unknown: list[str] = []
    for author in requested:
        match = canonical.get(author.lower())
        if match is None:
            unknown.append(author)
        else:
            resolved.append(match)
    if unknown:
        raise UnknownAuthorError(unknown)
    return resolved


def check_tags_known(tags: Iterable[str], vocabulary: Iterable[str]) -> None:
    """Exact mode only: every requested tag must exist in the vocabulary."""
    valid = set(vocabulary)
    unknown = [tag for tag in tags if tag not in valid]
    if unknown:
        raise UnknownTagError(unknown)
