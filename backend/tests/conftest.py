"""
Blog Backend - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test that needs persistence gets a fresh SQLite file database
       (aiosqlite) in pytest's tmp_path; nothing touches PostgreSQL.

Fixture Hierarchy (all function-scoped):
    ├── test_settings: Settings pointing at a temp SQLite file
    ├── database:      Database with tables created, disposed after the test
    ├── app:           FastAPI app built by create_app() around that database
    ├── test_client:   HTTPX AsyncClient talking to the app via ASGITransport
    ├── failing_store: AsyncMock PostStore whose every method raises
    └── fake_api:      AsyncMock PostsApi for view tests
"""

import os
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

# Override settings for testing BEFORE any app imports
# `blogapp.main` builds a default app at import time from these values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ.pop("API_BASE_URL", None)

from blogapp.config import Settings  # noqa: E402
from blogapp.database import Database  # noqa: E402
from blogapp.main import create_app  # noqa: E402
from blogapp.schemas.post import PostResponse  # noqa: E402


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        log_level="WARNING",
        auto_create_tables=False,
        api_base_url=None,
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """A Database with the posts table created; disposed after the test."""
    db = Database(test_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(test_settings, database):
    application = create_app(config=test_settings, database=database)
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def failing_store():
    """A PostStore double whose operations all fail like a lost connection."""
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    store = AsyncMock()
    for method in ("create", "find_many", "find_unique", "delete_many", "delete"):
        getattr(store, method).side_effect = error
    return store


@pytest.fixture
def sample_posts():
    return [
        PostResponse(id=1, title="First", content="Hello", published=False),
        PostResponse(id=2, title="Second", content="World", published=True),
    ]


@pytest.fixture
def fake_api(sample_posts):
    """
    A PostsApi double for view tests.

    Defaults: list returns sample_posts, every mutation succeeds.
    """
    api = AsyncMock()
    api.list_posts.return_value = list(sample_posts)
    return api
