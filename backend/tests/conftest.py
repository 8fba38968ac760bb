"""Root conftest: shared corpus fixtures."""

import pytest

from quotes_api.core.domain_types import Quote


def _make_quote(
    text: str = "A quote.",
    author: str = "Mark Twain",
    tags: tuple[str, ...] = ("wisdom",),
    length: int | None = None,
    id: str | None = None,
) -> Quote:
    return Quote(
        text=text,
        author=author,
        tags=tags,
        length=len(text) if length is None else length,
        id=id,
    )


@pytest.fixture
def make_quote():
    """Quote factory: defaults to a short Mark Twain quote tagged 'wisdom'."""
    return _make_quote


@pytest.fixture
def corpus() -> tuple[Quote, ...]:
    """Small corpus covering author, tag and length variations."""
    return (
        _make_quote("Twain short", "Mark Twain", ("wisdom", "life"), 20, "t1"),
        _make_quote("Twain long", "Mark Twain", ("humor",), 120, "t2"),
        _make_quote("Wilde one", "Oscar Wilde", ("wisdom", "humor"), 50, "w1"),
        _make_quote("Wilde two", "Oscar Wilde", ("tough-love", "lifestyle"), 80, "w2"),
        _make_quote("Curie", "Marie Curie", ("science", "life"), 61, "c1"),
    )
