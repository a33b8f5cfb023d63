"""
Shared test fixtures.
"""

import pytest
import pytest_asyncio

from app.config import Settings
from app.infrastructure.db.database import Database


@pytest.fixture
def test_settings():
    """Settings for an isolated in-memory application."""
    return Settings(
        environment="testing",
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret_key="test-secret-key",
        bcrypt_rounds=4,
        rate_limit_enabled=False,
        log_requests=False,
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """Fresh in-memory database with all tables created."""
    db = Database(test_settings.database_url_async)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session_factory() as db_session:
        yield db_session
