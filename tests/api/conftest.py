"""API test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine for the readiness probe
    - spy_repository replaces the store entirely and records every call

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so the schema
      created by the fixture is visible to every request session
"""

from datetime import datetime, timezone
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

from products_api.api.dependencies import get_product_repository
from products_api.db.base import Base
from products_api.infrastructure.database import DatabaseSessionManager, get_db
from products_api.main import app
from products_api.models.product import Product


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager


class SpyRepository:
    """In-memory ProductRepository that records every call."""

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []
        self.rows: dict[int, Product] = {}
        self.fail_with: Exception | None = None

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.fail_with is not None:
            raise self.fail_with

    async def list_all(self):
        self._record("list_all")
        return [self.rows[k] for k in sorted(self.rows)]

    async def get(self, product_id):
        self._record("get", product_id)
        return self.rows.get(product_id)

    async def create(self, fields):
        self._record("create", fields)
        now = datetime.now(timezone.utc)
        product = Product(
            id=len(self.rows) + 1, created_at=now, updated_at=now, **fields,
        )
        self.rows[product.id] = product
        return product

    async def update(self, product_id, fields):
        self._record("update", product_id, fields)
        product = self.rows.get(product_id)
        if product is None:
            return None
        for name, value in fields.items():
            setattr(product, name, value)
        return product

    async def delete(self, product_id):
        self._record("delete", product_id)
        return self.rows.pop(product_id, None) is not None


@pytest.fixture
async def spy_repository():
    """Swap the store for a SpyRepository; yields the spy."""
    spy = SpyRepository()
    app.dependency_overrides[get_product_repository] = lambda: spy
    yield spy
    app.dependency_overrides.pop(get_product_repository, None)


@pytest.fixture
async def spy_client(spy_repository):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def product_payload() -> dict:
    return {
        "title": "X",
        "description": "Y",
        "category": "z",
        "isAvailable": True,
        "image": "http://i",
        "price": 10,
    }


@pytest.fixture
async def seed_product(test_db):
    """Insert a product directly into the test DB."""
    product = Product(
        title="Samsung Galaxy S21",
        description="A powerful smartphone with a sleek design.",
        category="smartphone",
        is_available=True,
        image="https://example.com/galaxy-s21.png",
        price=899.99,
    )
    test_db.add(product)
    await test_db.commit()
    await test_db.refresh(product)
    return product
