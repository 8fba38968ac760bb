"""Route Dependencies: hand the startup-built engine and catalog to handlers.

Invariants:
    - Engine and catalog are built once in the lifespan and stored on app.state
    - A request arriving before the engine is ready gets DataUnavailableError (500)

Design Decisions:
    - Depends() over module globals: tests swap both via app.dependency_overrides
"""

from fastapi import Request

from quotes_api.core.errors import DataUnavailableError
from quotes_api.core.quote_engine import QuoteEngine
from quotes_api.infrastructure.corpus_loader import QuoteCatalog


def get_engine(request: Request) -> QuoteEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise DataUnavailableError("Quote corpus is not loaded", "quotes")
    return engine


def get_catalog(request: Request) -> QuoteCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise DataUnavailableError("Quote catalog is not configured", "catalog")
    return catalog
