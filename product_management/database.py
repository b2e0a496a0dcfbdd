from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from product_management.core.config import settings


def _engine_options(database_url: str) -> dict[str, Any]:
    """Pool and driver options for the configured backend."""
    if database_url.startswith("sqlite"):
        # In-memory SQLite only lives as long as its single connection
        if database_url.endswith("://") or ":memory:" in database_url:
            return {"poolclass": StaticPool}
        return {}
    
    # pool_size: base connections always available
    # max_overflow: additional connections that can be created on demand
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_pre_ping": True,  # Verify connections before using
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "connect_args": {
            "timeout": 10,  # 10 second connection timeout
            "server_settings": {"statement_timeout": "30000"},  # 30 second statement timeout
        },
    }


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    **_engine_options(settings.DATABASE_URL),
)
# Committed entities are projected to responses after commit, so they must not expire
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)

Base = declarative_base()


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dependency to get database session."""
    async with SessionLocal() as db:
        yield db


async def init_db(bind: AsyncEngine = engine) -> None:
    """Create all tables known to the declarative base."""
    # Register models on the metadata before create_all
    from product_management.models import product  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
