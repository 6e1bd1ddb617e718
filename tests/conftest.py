"""Shared pytest fixtures configured to use SQLite in-memory for unit tests."""

import logging
import os
import tempfile

# Keep app import side effects local: no table creation at startup, logs in a temp dir
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="pocketnotes-logs-"))

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.pocketnotes.config import Settings, get_settings  # noqa: E402
from src.pocketnotes.core.models import BaseModel, User  # noqa: E402
from src.pocketnotes.database import get_db_session  # noqa: E402
from src.pocketnotes.main import app  # noqa: E402
from src.pocketnotes.security import SessionIssuer, hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "Password123!"


@pytest.fixture
def test_settings():
    """Override settings for testing using SQLite in-memory DB."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        debug=True,
        auto_create_tables=False,
    )


@pytest.fixture
async def test_engine(test_settings):
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces foreign keys when asked to
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Database session bound to the test engine."""
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_session, test_settings):
    """The application with the database and settings dependencies overridden."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async HTTP client talking to the app in-process."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def issuer(test_settings):
    return SessionIssuer(test_settings)


@pytest.fixture
def make_user(test_session):
    """Factory inserting a user straight into the database."""

    async def _make_user(username: str, email: str = None, password: str = TEST_PASSWORD) -> User:
        user = User(
            username=username,
            email=email or f"{username}@example.com",
            password_hash=hash_password(password),
        )
        test_session.add(user)
        await test_session.commit()
        return user

    return _make_user


@pytest.fixture
async def alice(make_user):
    return await make_user("alice")


@pytest.fixture
async def bob(make_user):
    return await make_user("bob")


@pytest.fixture
async def carol(make_user):
    return await make_user("carol")


@pytest.fixture
def auth_headers(issuer):
    """Build bearer headers for a user."""

    def _auth_headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {issuer.issue(user.id)}"}

    return _auth_headers
