"""Core Layer: pure matching logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure; randomness arrives through an injected RandomSource

Design Decisions:
    - Functional core separated from imperative shell: routes and loaders
      wrap the engine, the engine never reaches out
"""
