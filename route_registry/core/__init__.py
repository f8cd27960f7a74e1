"""Core Layer — pure domain logic for route validation and storage, no IO.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validators are pure and deterministic; the in-memory store is the only stateful piece

Design Decisions:
    - Functional core separated from imperative shell (ADR: validator testable without mocks)
"""
