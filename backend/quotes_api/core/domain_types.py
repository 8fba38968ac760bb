"""Domain Types: the Quote record and the NO_MATCH result value.

Invariants:
    - Quote is frozen: the corpus is never mutated after load
    - Quote.length is trusted as loaded, never recomputed from text
    - NO_MATCH is a value, not an exception; callers compare with `is`

Design Decisions:
    - Single-member Enum for NO_MATCH: distinct from None and from an empty
      list, and type checkers narrow on `is NO_MATCH`
    - tags stored as tuple: hashable, immutable, keeps file order
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal


@dataclass(frozen=True, eq=False)
class Quote:
    """One quotation from the corpus.

    eq=False keeps identity semantics: two entries with the same text are
    still distinct corpus members.
    """
    text: str
    author: str
    tags: tuple[str, ...]
    length: int
    id: str | None = None


class NoMatch(Enum):
    """Filters produced an empty candidate set."""
    NO_MATCH = "no_match"

    def __bool__(self) -> bool:
        return False


NO_MATCH: Final = NoMatch.NO_MATCH

MatchResult = list[Quote] | Literal[NoMatch.NO_MATCH]
