"""
Shared fixtures.

Every API test gets its own application wired to a private in-memory
SQLite database, so tests never see each other's rows.
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time by app.main; configure before importing it.
TEST_SECRET = "test-secret-key-with-enough-length-for-hs256-signing"
os.environ.setdefault("JWT_SECRET_KEY", TEST_SECRET)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.core.database import close_db, init_db  # noqa: E402
from app.main import create_app  # noqa: E402

JANE = {"name": "Jane", "email": "jane@x.com", "password": "secret1"}


@pytest.fixture
def settings() -> Settings:
    """Test settings: in-memory database and cheap bcrypt rounds."""
    return Settings(
        _env_file=None,
        python_env="test",
        database_url="sqlite+aiosqlite://",
        jwt_secret_key=TEST_SECRET,
        bcrypt_rounds=4,
        cors_origins="http://localhost:3000",
    )


@pytest_asyncio.fixture
async def app(settings):
    """Application with its tables created."""
    application = create_app(settings)
    await init_db(application.state.engine)
    yield application
    await close_db(application.state.engine)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session(app):
    """A session on the application's database, for arranging and inspecting rows."""
    async with app.state.session_maker() as session:
        yield session


async def register_and_login(client: AsyncClient, **overrides) -> tuple[dict, str]:
    """Register a user (Jane by default) and return ``(user, token)``."""
    data = {**JANE, **overrides}
    response = await client.post("/auth/register", json=data)
    assert response.status_code == 201, response.text
    login = await client.post(
        "/auth/login", json={"email": data["email"], "password": data["password"]}
    )
    assert login.status_code == 200, login.text
    return response.json()["user"], login.json()["token"]


@pytest_asyncio.fixture
async def jane(client) -> tuple[dict, str]:
    """Registered and logged-in Jane: ``(user, token)``."""
    return await register_and_login(client)


@pytest.fixture
def auth_headers(jane) -> dict[str, str]:
    """Authorization header for Jane."""
    _user, token = jane
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.flush = AsyncMock()
    db.refresh = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db
