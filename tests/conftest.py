"""Pytest configuration.

Settings are environment-driven, so test defaults are set here before the
application is imported. Storage-backed tests run against an in-memory
SQLite database through aiosqlite.
"""

import os


os.environ.setdefault("APP_NAME", "Agent Ledger")
os.environ["APP_ENV"] = "test"
os.environ.setdefault("API_PREFIX", "/api/v1")
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from agent_ledger.main import app
from agent_ledger.core.database import get_db
from agent_ledger.models import Base, User, Workspace


TEST_DATABASE_URL = os.environ["TEST_DATABASE_URL"]


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a fresh in-memory database with all tables."""
    # One shared connection, otherwise every checkout sees an empty :memory: DB
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """AsyncSession bound to the test engine for seeding and assertions."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    user = User(
        email="test@example.com",
        display_name="Test User",
        timezone="UTC",
        llm_provider="openai",
        llm_model="gpt-4",
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    user = User(
        email="test2@example.com",
        display_name="Test User 2",
        timezone="UTC",
        llm_provider="anthropic",
        llm_model="claude-3",
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def workspace_id(db_session: AsyncSession, test_user: User) -> str:
    """Workspace owned by test_user."""
    workspace = Workspace(owner_id=test_user.id, name="Test Workspace", settings={"theme": "dark"})
    db_session.add(workspace)
    await db_session.commit()
    return workspace.id


@pytest_asyncio.fixture
async def other_workspace_id(db_session: AsyncSession, other_user: User) -> str:
    """Workspace owned by other_user."""
    workspace = Workspace(owner_id=other_user.id, name="Test Workspace 2", settings={})
    db_session.add(workspace)
    await db_session.commit()
    return workspace.id


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests read from db_session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client backed by a session whose reads always fail.

    App exceptions are rendered as 500 responses instead of being raised
    into the test.
    """
    from sqlalchemy.exc import OperationalError

    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("connection refused")))

    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
