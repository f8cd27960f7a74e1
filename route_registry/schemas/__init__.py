"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas check JSON types only; domain rules live in core/ so that error
      codes and their precedence are identical for every caller

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
