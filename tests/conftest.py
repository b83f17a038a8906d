"""Pytest configuration and fixtures.

Each test gets its own SQLite database file through aiosqlite, so
repository operations run real SQL without an external server.
"""

import os
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Set test environment variables before importing app modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from logins.database import Base  # noqa: E402
from logins.models import Login  # noqa: E402,F401
from logins.repositories import SqlLoginRepository  # noqa: E402


class TickingClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


# --- Database Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    """Create a fresh SQLite database with all tables."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'logins.db'}",
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def repository(session_factory, clock) -> SqlLoginRepository:
    return SqlLoginRepository(session_factory, clock=clock)


@pytest.fixture
def id_range_repository(session_factory, clock) -> SqlLoginRepository:
    return SqlLoginRepository(session_factory, clock=clock, strategy="id_range")


@pytest.fixture
def login_factory(repository):
    """Insert logins by name, in order."""

    async def _create(*names: str, banned: bool = False):
        return [await repository.insert(Login(login=name, banned=banned)) for name in names]

    return _create


@pytest_asyncio.fixture(scope="function")
async def async_client(repository) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with the repository dependency overridden."""
    from logins.api.dependencies import get_login_repository
    from logins.main import app

    app.dependency_overrides[get_login_repository] = lambda: repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
