"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.infrastructure.zapi_client import get_sender_factory
from app.persistence.database import Base, get_db, get_session_factory
from app.persistence.models import *  # noqa: F401, F403
from tests.factories import FakeSender


@pytest.fixture
async def engine(tmp_path):
    """SQLite engine backed by a file so concurrent sessions see each other's writes."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def sender_factory(sender):
    return lambda bot: sender


@pytest.fixture
def redis_mock():
    """Redis stand-in whose setnx accepts every key once."""
    seen: set[str] = set()

    async def setnx(key, value, ttl=None):
        if key in seen:
            return False
        seen.add(key)
        return True

    mock = AsyncMock()
    mock.setnx.side_effect = setnx
    return mock


@pytest.fixture
async def client(session_factory, sender_factory):
    """Create a test HTTP client bound to the test database and fake sender."""
    from app.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_sender_factory] = lambda: sender_factory

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()
