"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up a developer's .env store settings
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("AUTHORITIES", '["ST1TEST"]')
