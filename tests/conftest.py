# tests/conftest.py
import os

# Point the app at a throwaway in-memory database before any app module is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SEED_ON_STARTUP"] = "false"

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from product_management.database import Base, SessionLocal, engine, init_db  # noqa: E402
from product_management.main import app  # noqa: E402
from product_management.services.product_service import ProductService  # noqa: E402
from tests.utils import sample_products  # noqa: E402


@pytest_asyncio.fixture
async def tables():
    """
    Create the schema in the in-memory database and tear it down afterwards.
    Disposing the engine drops the single pooled connection, so the next test
    (and its event loop) starts from an empty database.
    """
    await init_db(engine)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture
async def seeded_db(tables):
    """Tables plus the three sample products (ids 1, 2, 3)."""
    async with SessionLocal() as session:
        session.add_all(sample_products())
        await session.commit()
    yield tables


@pytest_asyncio.fixture
async def db_session(seeded_db):
    async with SessionLocal() as session:
        yield session


@pytest.fixture
def service(db_session):
    return ProductService(db_session)


@pytest_asyncio.fixture
async def client(seeded_db):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
