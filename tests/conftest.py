"""Shared test fixtures and configuration."""

import pytest
from typing import AsyncGenerator, Callable, Dict, Generator
import os

# Set TESTING flag to prevent loading .env file
os.environ['TESTING'] = '1'

# Set up test environment BEFORE any imports
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite://'
os.environ['SECRET_KEY'] = 'test_secret_key_at_least_32_characters_long_for_security'

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from petcare.config import Settings
from petcare.database import get_async_session, get_engine, get_session_maker, init_models
from petcare.models import User


TEST_PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def setup_test_env() -> Generator[None, None, None]:
    """Set up test environment variables before each test."""
    original_env = os.environ.copy()

    os.environ['TESTING'] = '1'
    os.environ['DATABASE_URL'] = 'sqlite+aiosqlite://'
    os.environ['SECRET_KEY'] = 'test_secret_key_at_least_32_characters_long_for_security'

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide a clean environment for tests that need to test missing variables."""
    original_env = os.environ.copy()

    # Clear all environment variables except TESTING
    os.environ.clear()
    os.environ['TESTING'] = '1'

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """A fresh SQLite database file per test, with every table created."""
    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    test_engine = get_engine(settings)
    await init_models(test_engine)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return get_session_maker(engine)


@pytest.fixture
async def async_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Provide async database session for tests."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_user(async_session: AsyncSession) -> User:
    """Create a user directly in the database."""
    user = User(
        email="test@example.com",
        hashed_password="hashed_password_placeholder",
        name="Test User",
        is_active=True,
        is_superuser=False,
        is_verified=False
    )
    async_session.add(user)
    await async_session.commit()
    return user


@pytest.fixture
async def other_user(async_session: AsyncSession) -> User:
    user = User(
        email="other@example.com",
        hashed_password="hashed_password_placeholder",
        name="Other User",
        is_active=True,
        is_superuser=False,
        is_verified=False
    )
    async_session.add(user)
    await async_session.commit()
    return user


@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Test client whose requests each get their own session on the test database."""
    from petcare.main import app

    async def override_get_async_session():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client: AsyncClient) -> Callable:
    """
    Factory registering a user through the API.

    Returns the auth headers and the user payload.
    """

    async def _register(email: str, name: str = "Pet Owner", password: str = TEST_PASSWORD):
        response = await client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]

    return _register


@pytest.fixture
async def auth_headers(register_user) -> Dict[str, str]:
    headers, _ = await register_user("owner@example.com", name="Owner")
    return headers


@pytest.fixture
async def other_headers(register_user) -> Dict[str, str]:
    headers, _ = await register_user("stranger@example.com", name="Stranger")
    return headers
