"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from typing import AsyncGenerator, Callable, Optional

import pytest
import pytest_asyncio
from faker import Faker
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Configure the service before any letterhouse module reads its settings
os.environ["LETTERHOUSE_DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LETTERHOUSE_JWT_SECRET_KEY"] = "test_secret_key_123456789"
os.environ.pop("LETTERHOUSE_JWT_AUDIENCE", None)

from letterhouse.core.auth import create_access_token  # noqa: E402
from letterhouse.core.database import Base, House  # noqa: E402
from letterhouse.core.dependencies import get_db_session  # noqa: E402
from letterhouse.main import app  # noqa: E402

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

fake = Faker()


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a database")
    config.addinivalue_line("markers", "integration: API tests against SQLite")


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(bind=test_engine, expire_on_commit=False)


@pytest.fixture
def override_dependencies(session_maker):
    """Point the API at the test database."""

    async def get_test_db_session():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = get_test_db_session
    yield
    # Clean up
    app.dependency_overrides = {}


@pytest.fixture
def client():
    """Create a test client for endpoints that do not touch the database."""
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(override_dependencies) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client


def auth_headers(user_id: str) -> dict:
    token = create_access_token(user_id, email=f"{user_id}@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_auth_headers() -> Callable[[str], dict]:
    return auth_headers


@pytest.fixture
def owner_headers():
    return auth_headers("owner-1")


@pytest.fixture
def visitor_headers():
    return auth_headers("visitor-1")


@pytest.fixture
def make_house(session_maker) -> Callable:
    """Insert a house directly, with full control over ``created_at``."""

    async def _make_house(
        owner_id: str = "owner-1",
        house_type: str = "house1",
        tz: str = "America/New_York",
        created_at: Optional[datetime] = None,
    ) -> House:
        async with session_maker() as session:
            house = House(
                owner_id=owner_id,
                name=f"{fake.first_name()}'s house",
                house_type=house_type,
                timezone=tz,
                created_at=created_at or datetime.now(timezone.utc),
            )
            session.add(house)
            await session.commit()
            await session.refresh(house)
            return house

    return _make_house


@pytest.fixture
def freeze_time(monkeypatch) -> Callable[[datetime], None]:
    """Pin the clock used by the Christmas gate."""

    def _freeze(instant: datetime):
        monkeypatch.setattr("letterhouse.core.christmas.utcnow", lambda: instant)

    return _freeze


@pytest.fixture
def letter_data() -> Callable[..., dict]:
    def _letter_data(**overrides) -> dict:
        data = {
            "character_type": "character3",
            "frame_design": "window1",
            "background_color": "#FFE4E1",
            "visitor_name": fake.name(),
            "letter_content": fake.paragraph(),
        }
        data.update(overrides)
        return data

    return _letter_data
