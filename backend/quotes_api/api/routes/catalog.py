"""Catalog Routes: authors directory and tags vocabulary.

Invariants:
    - Files are read per request; a read failure is a 500 for that request only
    - Payloads are passed through unchanged (authors: name → count, tags: list)
"""

import logging

from fastapi import APIRouter, Depends

from quotes_api.api.dependencies import get_catalog
from quotes_api.infrastructure.corpus_loader import QuoteCatalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/authors")
def list_authors(catalog: QuoteCatalog = Depends(get_catalog)) -> dict[str, int]:
    """All known authors with their quote counts."""
    return catalog.authors()


@router.get("/tags")
def list_tags(catalog: QuoteCatalog = Depends(get_catalog)) -> list[str]:
    """All valid tags."""
    return catalog.tags()
