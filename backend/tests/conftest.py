"""
Shared test fixtures for VibeTune Backend tests.

Provides:
- Test settings (fixed secret, in-memory SQLite, temporary library dirs)
- Test database (SQLite in-memory, one per test)
- Async test client (httpx over ASGI)
- Registered user / second user / admin user factories
- Sample song library on disk
"""

import io
import os
import struct
import uuid
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app modules
TEST_SECRET_KEY = "test-secret-key-for-testing-purposes-only-32chars"
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = TEST_SECRET_KEY
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

from vibetune.core.config import Settings
from vibetune.core.database import Database
from vibetune.main import create_app
from vibetune.services import users as user_service


# =============================================================================
# Settings & Database Fixtures
# =============================================================================


@pytest.fixture
def songs_dir(tmp_path: Path) -> Path:
    """Empty song library root."""
    path = tmp_path / "Songs"
    path.mkdir()
    return path


@pytest.fixture
def frontend_dir(tmp_path: Path) -> Path:
    """Frontend root holding a minimal index.html."""
    path = tmp_path / "Frontend"
    path.mkdir()
    (path / "index.html").write_text("<html><body>VibeTune</body></html>")
    return path


@pytest.fixture
def test_settings(songs_dir: Path, frontend_dir: Path) -> Settings:
    """Settings object handed to create_app in tests."""
    return Settings(
        _env_file=None,
        secret_key=TEST_SECRET_KEY,
        database_url=TEST_DATABASE_URL,
        songs_path=str(songs_dir),
        frontend_path=str(frontend_dir),
    )


@pytest_asyncio.fixture(scope="function")
async def test_database() -> AsyncGenerator[Database, None]:
    """
    Provide a fresh in-memory database for each test.

    Creates all tables before the test and drops them after.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    database = Database(engine)
    await database.create_all_tables()

    yield database

    await database.drop_all_tables()
    await database.dispose()


@pytest_asyncio.fixture
async def db_session(test_database: Database):
    """A committed-on-exit session against the test database."""
    async with test_database.session() as session:
        yield session


# =============================================================================
# Test Client Fixtures
# =============================================================================


@pytest.fixture
def app(test_settings: Settings, test_database: Database):
    return create_app(test_settings, test_database)


@pytest_asyncio.fixture(scope="function")
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing the FastAPI application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# =============================================================================
# User Fixtures
# =============================================================================


async def register_user(
    client: AsyncClient,
    username: str,
    email: str,
    password: str,
) -> dict:
    """Register through the API and return user data plus the token."""
    response = await client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, f"Failed to create user: {response.text}"
    data = response.json()
    return {
        "id": data["user"]["id"],
        "username": username,
        "email": email,
        "password": password,
        "token": data["token"],
    }


@pytest.fixture
def test_user_data() -> dict:
    """Provide test user data."""
    suffix = uuid.uuid4().hex[:8]
    return {
        "username": f"testuser_{suffix}",
        "email": f"testuser_{suffix}@example.com",
        "password": "TestPassword123!",
    }


@pytest_asyncio.fixture
async def test_user(async_client: AsyncClient, test_user_data: dict) -> dict:
    """
    Create a test user and return user data with ID.

    Returns dict with id, username, email, password, and token.
    """
    return await register_user(async_client, **test_user_data)


@pytest.fixture
def auth_headers(test_user: dict) -> dict:
    """Provide authentication headers for the test user."""
    return {"Authorization": f"Bearer {test_user['token']}"}


@pytest_asyncio.fixture
async def second_test_user(async_client: AsyncClient) -> dict:
    """Create a second test user for ownership tests."""
    suffix = uuid.uuid4().hex[:8]
    return await register_user(
        async_client,
        username=f"seconduser_{suffix}",
        email=f"seconduser_{suffix}@example.com",
        password="SecondPassword123!",
    )


@pytest.fixture
def second_auth_headers(second_test_user: dict) -> dict:
    """Provide authentication headers for the second test user."""
    return {"Authorization": f"Bearer {second_test_user['token']}"}


@pytest_asyncio.fixture
async def admin_user(async_client: AsyncClient, test_database: Database) -> dict:
    """Register a user and promote it to admin directly in the database."""
    suffix = uuid.uuid4().hex[:8]
    user = await register_user(
        async_client,
        username=f"admin_{suffix}",
        email=f"admin_{suffix}@example.com",
        password="AdminPassword123!",
    )
    async with test_database.session() as session:
        await user_service.set_admin(session, user["email"], is_admin=True)
    return user


@pytest.fixture
def admin_headers(admin_user: dict) -> dict:
    return {"Authorization": f"Bearer {admin_user['token']}"}


# =============================================================================
# Song Library Fixtures
# =============================================================================


def make_wav(duration: float = 0.1, sample_rate: int = 44100) -> bytes:
    """Build a silent mono 16-bit PCM WAV file."""
    num_samples = int(sample_rate * duration)
    audio_data = b"\x00\x00" * num_samples

    wav_data = io.BytesIO()

    # RIFF header
    wav_data.write(b"RIFF")
    wav_data.write(struct.pack("<I", 36 + len(audio_data)))
    wav_data.write(b"WAVE")

    # fmt chunk
    wav_data.write(b"fmt ")
    wav_data.write(struct.pack("<I", 16))
    wav_data.write(struct.pack("<H", 1))   # PCM
    wav_data.write(struct.pack("<H", 1))   # mono
    wav_data.write(struct.pack("<I", sample_rate))
    wav_data.write(struct.pack("<I", sample_rate * 2))
    wav_data.write(struct.pack("<H", 2))
    wav_data.write(struct.pack("<H", 16))

    # data chunk
    wav_data.write(b"data")
    wav_data.write(struct.pack("<I", len(audio_data)))
    wav_data.write(audio_data)

    return wav_data.getvalue()


@pytest.fixture
def sample_library(songs_dir: Path) -> Path:
    """
    A two-album library:

        Songs/f1/info.json, Songs/f1/track one.wav
        Songs/f2/info.json, Songs/f2/song.wav
    """
    for folder, track in (("f1", "track one.wav"), ("f2", "song.wav")):
        album = songs_dir / folder
        album.mkdir()
        (album / "info.json").write_text(
            f'{{"title": "Album {folder}", "description": "Test album"}}'
        )
        (album / track).write_bytes(make_wav())
    (songs_dir / ".hidden").write_text("not listed")
    return songs_dir
