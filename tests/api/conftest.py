"""API test fixtures — isolated app per test + async HTTP client.

Invariants:
    - Every test gets a fresh app (fresh store, clock, and authority registry)
    - Requests go through ASGITransport; no server, no lifespan

Design Decisions:
    - max_routes=3 keeps capacity tests short
"""

import pytest
from httpx import ASGITransport, AsyncClient

from route_registry.config import Settings
from route_registry.main import create_app
from tests.route_factory import AUTHORITY


@pytest.fixture
def api_app():
    return create_app(Settings(authorities=[AUTHORITY], max_routes=3, store_backend="memory"))


@pytest.fixture
async def client(api_app):
    async with AsyncClient(
        transport=ASGITransport(app=api_app), base_url="http://test",
    ) as c:
        yield c
