"""Database engine, session factory and declarative base."""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from travel_api.config import settings


class Base(DeclarativeBase):
    """Declarative base shared by every model."""


def _engine_options(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session.

    Everything a request writes is committed together when the handler
    returns, or rolled back if it raises.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def registered_tables() -> list[str]:
    """Names of every table registered on the shared metadata."""
    import travel_api.models  # noqa: F401

    return sorted(Base.metadata.tables)


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    import travel_api.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the engine connection pool."""
    await engine.dispose()


def utc_now() -> datetime:
    """Timezone-aware current time for model timestamps."""
    return datetime.now(UTC)
