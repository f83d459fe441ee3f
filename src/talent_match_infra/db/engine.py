"""Async database engine factory."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from talent_match_core.config.settings import Settings


def create_engine(settings: Settings, url: str | None = None) -> AsyncEngine:
    """Create an async SQLAlchemy engine for the configured backend.

    ``url`` overrides ``settings.database_url`` (used by tests and one-off
    scripts pointing at a scratch database).
    """
    database_url = url or settings.database_url
    echo = settings.log_level.upper() == "DEBUG"
    if database_url.startswith("sqlite"):
        # concurrent ranking fetches share the file; wait on the write lock
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": 15},
        )
    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )
