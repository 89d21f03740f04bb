"""
Blog Backend - Application-Level Tests
=======================================

What:  Health check, request ID propagation and settings validation.
"""

import logging

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from pydantic import ValidationError as SettingsValidationError

from blogapp.config import Settings


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_with_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unhealthy_without_database(self, test_client, database):
        await database.dispose()
        # A disposed SQLite pool reconnects on demand; point at an unopenable path
        database.engine = create_async_engine("sqlite+aiosqlite:////nonexistent-dir/x.db")

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/api/posts")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_value_echoed(self, test_client):
        response = await test_client.get("/api/posts", headers={"X-Request-ID": "abc"})

        assert response.headers["X-Request-ID"] == "abc"

    @pytest.mark.asyncio
    async def test_malformed_client_value_replaced(self, test_client):
        response = await test_client.get(
            "/api/posts", headers={"X-Request-ID": "bad id with spaces"}
        )

        rid = response.headers["X-Request-ID"]
        assert rid != "bad id with spaces"
        assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, test_client):
        response = await test_client.get("/api/posts/999", headers={"X-Request-ID": "trace-1"})

        assert response.json()["request_id"] == "trace-1"


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_page_and_its_api_calls_are_told_apart(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="blogapp.access")

        await test_client.get("/posts", headers={"X-Request-ID": "page-1"})

        lines = [r.getMessage() for r in caplog.records if r.name == "blogapp.access"]
        page_lines = [line for line in lines if line.startswith("GET /posts ")]
        api_lines = [line for line in lines if line.startswith("GET /api/posts ")]
        assert len(page_lines) == 1
        assert "[page-1] from " in page_lines[0]
        assert len(api_lines) == 1
        assert api_lines[0].endswith("[page-1] via pages")

    @pytest.mark.asyncio
    async def test_client_errors_logged_as_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="blogapp.access")

        await test_client.get("/api/posts/999")

        records = [r for r in caplog.records if r.name == "blogapp.access"]
        assert [r.levelno for r in records] == [logging.WARNING]

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="blogapp.access")

        await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "blogapp.access"]


class TestSettings:

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(log_level="LOUD")

    def test_no_cross_origin_callers_by_default(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert Settings().cors_origins_list == []

    def test_cors_origins_split(self):
        config = Settings(cors_origins="http://a.test, http://b.test")
        assert config.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///./x.db").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@h/db").is_sqlite
