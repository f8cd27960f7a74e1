"""Infrastructure — logging, authority oracle, logical clock, and SQL persistence.

Invariants:
    - Implements the Protocols from core/repository_protocols.py
    - SQLAlchemy errors never cross this boundary unmapped (StorageError)
"""
