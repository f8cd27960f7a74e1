"""Services Layer — orchestration around the pure validator.

Invariants:
    - Services call core validators first, then the store; never the reverse

Design Decisions:
    - Impureim sandwich: pure checks, one locked mutation, log
"""
