"""Route Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RouteRegistryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Service, store, authority registry, and clock built once per app in create_app

Design Decisions:
    - create_app factory plus module-level app: uvicorn serves `route_registry.main:app`,
      tests build isolated apps from their own Settings
    - Wiring in the factory, not the lifespan: ASGI test transports skip lifespan events,
      and the service must exist for every request
    - Lifespan owns logging setup and SQL engine disposal
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from route_registry.api.error_handlers import register_error_handlers
from route_registry.api.routes import health, routes
from route_registry.config import Settings, get_settings
from route_registry.core.route_store import InMemoryRouteStore
from route_registry.infrastructure.authority_registry import StaticAuthorityRegistry
from route_registry.infrastructure.database import DatabaseSessionManager
from route_registry.infrastructure.logical_clock import LogicalClock
from route_registry.infrastructure.observability import setup_logging
from route_registry.infrastructure.sql_route_store import SqlRouteStore
from route_registry.services.registration_service import RegistrationService

logger = logging.getLogger(__name__)


def _build_store(settings: Settings, app: FastAPI):
    if settings.store_backend == "sql":
        db = DatabaseSessionManager(settings.database_url)
        db.create_all()
        app.state.db_manager = db
        return SqlRouteStore(db, max_routes=settings.max_routes)
    app.state.db_manager = None
    return InMemoryRouteStore(max_routes=settings.max_routes)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"Route Registry API started ({settings.store_backend} store, "
            f"max_routes={settings.max_routes})",
        )
        yield
        if app.state.db_manager is not None:
            app.state.db_manager.dispose()
        logger.info("Route Registry API shutting down")

    app = FastAPI(
        title="Route Registry API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.authorities = StaticAuthorityRegistry(settings.authorities)
    app.state.registration_service = RegistrationService(
        _build_store(settings, app), app.state.authorities,
    )
    app.state.clock = LogicalClock()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(routes.router)
    register_error_handlers(app)
    return app


app = create_app()
