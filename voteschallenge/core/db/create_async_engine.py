# Standard library imports
from typing import Any

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine as sa_create_async_engine

# Local application imports
from voteschallenge.settings import settings


def create_async_engine(url: str | None = None, **kwargs: Any) -> AsyncEngine:
    """
    Build an async engine for the configured database.

    PostgreSQL goes through asyncpg; a ``sqlite+aiosqlite`` URL is accepted for
    local development.
    """
    url = url or settings.SQLALCHEMY_ASYNC_DATABASE_URI
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return sa_create_async_engine(url, echo=settings.SQL_ECHO, future=True, **kwargs)


# Asynchronous Engine
async_engine = create_async_engine()
