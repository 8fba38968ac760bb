"""Sampler: uniform draw-without-replacement over a candidate list.

Invariants:
    - Input sequence is never mutated (a working copy is consumed instead)
    - Each draw picks a uniform index over the REMAINING population
    - Population shrinks by exactly one per draw; no element is drawn twice
    - count is clamped to len(candidates); count <= 0 yields []

Design Decisions:
    - Swap-remove over list.pop(i): O(1) per draw, uniformity preserved
      (partial Fisher-Yates, first `count` positions only)
    - RandomSource protocol: random.Random / SystemRandom satisfy it, tests
      inject a seeded instance for reproducible sequences
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Uniform integer generator: randrange(stop) returns 0 <= n < stop."""
    def randrange(self, stop: int) -> int: ...


def sample_without_replacement(
    candidates: Sequence[T], count: int, rng: RandomSource,
) -> list[T]:
    pool = list(candidates)
    count = min(count, len(pool))
    picked: list[T] = []
    for _ in range(max(count, 0)):
        index = rng.randrange(len(pool))
        picked.append(pool[index])
        pool[index] = pool[-1]
        pool.pop()
    return picked
