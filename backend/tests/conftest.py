"""Root conftest — shared test configuration and store/client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite store
    - get_db dependency overridden to use the test store
    - db_manager patched so the readiness endpoint sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL row locks are not exercised here)
    - StaticPool: one shared connection, so every session sees the same in-memory store
"""

import os

# Ensure tests never reach a real store
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import inventory.infrastructure.database as db_module  # noqa: E402
from inventory.db.base import Base  # noqa: E402
from inventory.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from inventory.main import app  # noqa: E402
from inventory.models.product import Product  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def asgi_transport(test_engine, test_session_factory):
    """ASGI transport into the app with the store dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.database_url = "sqlite+aiosqlite:///:memory:"
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield ASGITransport(app=app)

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(asgi_transport):
    """FastAPI test client with store dependency overridden."""
    async with AsyncClient(
        transport=asgi_transport, base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_products(test_db):
    """Insert two products directly into the test store."""
    products = [
        Product(document={"productName": "Bolt", "quantity": 10, "price": 1.5}),
        Product(document={"productName": "Nut", "quantity": 5, "price": 0.5}),
    ]
    test_db.add_all(products)
    await test_db.commit()
    return products


@pytest.fixture
def count_products(test_session_factory):
    """Async callable returning the number of stored products."""
    async def _count() -> int:
        async with test_session_factory() as session:
            result = await session.execute(select(func.count()).select_from(Product))
            return result.scalar_one()
    return _count
