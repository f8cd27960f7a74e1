"""Database Infrastructure — SQLAlchemy Base for the optional SQL route store.

Invariants:
    - One engine per app, built by create_app when store_backend is "sql"
    - Sessions are synchronous: store methods run inside the service lock
"""
