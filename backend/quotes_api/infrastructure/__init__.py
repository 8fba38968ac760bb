"""Infrastructure Layer: data files and cross-cutting concerns.

Invariants:
    - Infrastructure never contains matching logic
    - Every IO failure is mapped to DataUnavailableError, never masked
"""
