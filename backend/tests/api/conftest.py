"""API test fixtures: FastAPI test client over an in-test corpus.

Invariants:
    - get_engine / get_catalog overridden per test; lifespan never runs
    - Catalog files written to tmp_path, so file errors can be simulated

Design Decisions:
    - httpx ASGITransport: exercises the real app (middleware, handlers, routes)
      without a server process
"""

import json
import random

import pytest
from httpx import ASGITransport, AsyncClient

from quotes_api.api.dependencies import get_catalog, get_engine
from quotes_api.core.quote_engine import QuoteEngine
from quotes_api.infrastructure.corpus_loader import QuoteCatalog
from quotes_api.main import app


@pytest.fixture
def catalog_dir(tmp_path):
    (tmp_path / "authors.json").write_text(json.dumps({
        "Mark Twain": 2, "Oscar Wilde": 2, "Marie Curie": 1,
    }), encoding="utf-8")
    (tmp_path / "tags.json").write_text(json.dumps([
        "wisdom", "life", "humor", "tough-love", "lifestyle", "science",
    ]), encoding="utf-8")
    return tmp_path


@pytest.fixture
def engine(corpus):
    return QuoteEngine(corpus, random.Random(1))


@pytest.fixture
async def client(engine, catalog_dir):
    """FastAPI test client with engine and catalog dependencies overridden."""
    catalog = QuoteCatalog(catalog_dir / "authors.json", catalog_dir / "tags.json")
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_catalog] = lambda: catalog

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
