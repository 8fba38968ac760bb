"""Quotes API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map QuotesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Corpus loaded once on startup via lifespan; a load failure aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Engine and catalog stored on app.state and handed out through Depends()
    - Static files mounted last so /api/* takes precedence
"""

import logging
import random
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from quotes_api.api.error_handlers import register_error_handlers
from quotes_api.api.middleware import register_request_logging
from quotes_api.api.routes import catalog, health, quotes
from quotes_api.config import get_settings
from quotes_api.core.quote_engine import QuoteEngine
from quotes_api.infrastructure.corpus_loader import QuoteCatalog, load_corpus
from quotes_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    corpus = load_corpus(settings.quotes_path)
    app.state.engine = QuoteEngine(corpus, random.Random(settings.random_seed))
    app.state.catalog = QuoteCatalog(settings.authors_path, settings.tags_path)
    logger.info("Quotes API started", extra={"quote_count": len(corpus)})
    yield
    logger.info("Quotes API shutting down")


app = FastAPI(
    title="Quotes API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app, settings.trust_proxy)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(quotes.router)

# html=True serves public/index.html at "/"
if settings.public_dir.is_dir():
    app.mount(
        "/", StaticFiles(directory=settings.public_dir, html=True), name="static",
    )
