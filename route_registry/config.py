"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - max_routes is positive; store_backend is "memory" or "sql"

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: in-memory store works out-of-the-box
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from route_registry.core.domain_types import DEFAULT_MAX_ROUTES


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Registry
    max_routes: int = Field(default=DEFAULT_MAX_ROUTES, gt=0)
    authorities: list[str] = []

    # Storage
    store_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///routes.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def strip_async_driver(cls, v: str) -> str:
        """The store is synchronous; drop an async driver suffix if one was configured."""
        if isinstance(v, str):
            for async_driver in ("+asyncpg", "+aiosqlite"):
                v = v.replace(async_driver, "", 1)
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
