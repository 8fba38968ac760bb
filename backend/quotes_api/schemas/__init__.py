"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Schemas describe the wire shape; domain types from core/ stay plain dataclasses

Design Decisions:
    - Separate from domain types: schemas are API contracts, Quote is the corpus record
"""
