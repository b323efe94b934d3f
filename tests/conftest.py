"""
Pytest configuration and fixtures for testing.
"""
import os

# Settings are read at import time, so the environment must be in place first
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_eventsnap.db")

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from datetime import datetime, timedelta, timezone
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from eventsnap.main import app
from eventsnap.db.session import Base, get_session
from eventsnap.core.security import hash_password, create_access_token
from eventsnap.core.rate_limit import limiter
from eventsnap.db.models import User, RoleEnum, EventTheme, Event, EventProgram, ContactPerson, GuestUpload


# Test database URL - use environment variable if available (for Docker / Postgres runs)
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    "sqlite+aiosqlite:///./test_eventsnap.db"
)

# Create test engine
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    poolclass=NullPool,  # Disable connection pooling for tests
    echo=False,
)

# Create test session factory
TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

TEST_PASSWORD = "Test123!@#"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database session for each test.
    Every table is dropped and recreated around the test.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async HTTP client for testing API endpoints.
    Overrides the database session dependency.
    """
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _make_user(session: AsyncSession, username: str, email: str, role: RoleEnum, **extra) -> User:
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(TEST_PASSWORD),
        role=role,
        **extra
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_organizer(db_session: AsyncSession) -> User:
    """Event organizer admitting 5 guest uploads per address per window."""
    return await _make_user(
        db_session, "organizer", "organizer@example.com", RoleEnum.event_organizer, upload_rate_limit=5
    )


@pytest_asyncio.fixture
async def other_organizer(db_session: AsyncSession) -> User:
    return await _make_user(db_session, "other", "other@example.com", RoleEnum.event_organizer)


@pytest_asyncio.fixture
async def test_admin(db_session: AsyncSession) -> User:
    return await _make_user(db_session, "admin", "admin@example.com", RoleEnum.administrator)


def _token_for(user: User) -> str:
    return create_access_token({"sub": str(user.id), "role": user.role.value})


@pytest.fixture
def organizer_token(test_organizer: User) -> str:
    """Generate a valid access token for test_organizer."""
    return _token_for(test_organizer)


@pytest.fixture
def other_organizer_token(other_organizer: User) -> str:
    return _token_for(other_organizer)


@pytest.fixture
def admin_token(test_admin: User) -> str:
    """Generate a valid access token for test_admin."""
    return _token_for(test_admin)


@pytest_asyncio.fixture
async def test_theme(db_session: AsyncSession) -> EventTheme:
    theme = EventTheme(name="Garden", is_standard=True, image_url="https://cdn.example.com/garden.png")
    db_session.add(theme)
    await db_session.commit()
    await db_session.refresh(theme)
    return theme


@pytest_asyncio.fixture
async def test_event(db_session: AsyncSession, test_organizer: User) -> Event:
    """Create a test event owned by test_organizer."""
    event = Event(
        organizer_id=test_organizer.id,
        name="Anna & Ben's Wedding",
        topic="Wedding",
        event_date=datetime.now(timezone.utc) + timedelta(days=30),
        event_time="15:00",
        city="Hamburg",
        qr_code_token="qr-test-token-1",
    )
    db_session.add(event)
    await db_session.commit()
    await db_session.refresh(event)
    return event


@pytest_asyncio.fixture
async def populated_event(db_session: AsyncSession, test_event: Event) -> Event:
    """test_event with two program entries, two contacts and two uploads."""
    db_session.add_all([
        EventProgram(event_id=test_event.id, topic="Ceremony", time="15:00", order_index=0),
        EventProgram(event_id=test_event.id, topic="Dinner", time="18:00", order_index=1),
        ContactPerson(event_id=test_event.id, name="Clara", phone_number="+49 40 123", is_contact_person=True),
        ContactPerson(event_id=test_event.id, name="Dieter", email="dieter@example.com"),
        GuestUpload(
            event_id=test_event.id, guest_name="Eva", file_url="https://files.example.com/1.jpg",
            file_name="1.jpg", file_size=1024, mime_type="image/jpeg", upload_ip="10.0.0.1",
        ),
        GuestUpload(
            event_id=test_event.id, guest_name="Finn", file_url="https://files.example.com/2.jpg",
            file_name="2.jpg", file_size=2048, mime_type="image/jpeg", upload_ip="10.0.0.2",
        ),
    ])
    await db_session.commit()
    return test_event


@pytest.fixture(autouse=True)
def mock_password_hashing(monkeypatch):
    """
    Mock bcrypt password hashing; real bcrypt rounds make the suite slow.
    This fixture is autouse, so it applies to all tests automatically.
    """
    class MockPasswordContext:
        """Mock password context that doesn't require bcrypt."""
        def hash(self, password: str) -> str:
            return f"$2b$12$mockedhash{password}"

        def verify(self, plain: str, hashed: str) -> bool:
            return hashed == f"$2b$12$mockedhash{plain}"

    from eventsnap.core import security
    monkeypatch.setattr(security, "pwd_context", MockPasswordContext())


class InMemoryTokenStore:
    """Stands in for Redis; TTLs are recorded but never expire during a test."""

    def __init__(self):
        self.keys = {}

    async def add(self, key: str, ttl: int) -> bool:
        self.keys[key] = ttl
        return True

    async def exists(self, key: str) -> bool:
        return key in self.keys

    async def close(self):
        self.keys.clear()


@pytest.fixture(autouse=True)
def token_store(monkeypatch) -> InMemoryTokenStore:
    """Replace the Redis revocation store for every test."""
    from eventsnap.cache import redis_client
    store = InMemoryTokenStore()
    monkeypatch.setattr(redis_client, "token_store", store)
    return store


@pytest.fixture(autouse=True)
def disable_rate_limiting(monkeypatch):
    """Disable slowapi request limits on the auth endpoints."""
    monkeypatch.setattr(limiter, "enabled", False)
