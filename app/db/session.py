"""Async engine, session factory and the request-scoped session dependency."""
import logging
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def _normalize_url(url: str) -> str:
    # Hosting providers hand out sync-style URLs; the app always talks async
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://") and not url.startswith("sqlite+aiosqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    url = _normalize_url(database_url.strip())
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory SQLite lives in one connection; share it across sessions
        if url in ("sqlite+aiosqlite://", "sqlite+aiosqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, **kwargs)
    logger.info(
        "Using database backend=%s url=%s",
        engine.url.get_backend_name(),
        engine.url.render_as_string(hide_password=True),
    )
    return engine


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a session bound to the app's engine for the duration of one request."""
    async with request.app.state.sessionmaker() as session:
        yield session
