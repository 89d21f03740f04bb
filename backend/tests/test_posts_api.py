"""
Blog Backend - Posts API Integration Tests
===========================================

What:  Exercises /api/posts end to end: routes → service → store → SQLite.
How:   test_client talks to a freshly built app with its own temp database.
       Store failures are simulated by overriding `get_post_store`.
"""

import pytest

from blogapp.store.post_store import get_post_store


async def create(client, title="A", content="B"):
    response = await client.post("/api/posts", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()


class TestListAndCreate:

    @pytest.mark.asyncio
    async def test_list_empty_store(self, test_client):
        response = await test_client.get("/api/posts")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create_returns_post_with_defaults(self, test_client):
        response = await test_client.post("/api/posts", json={"title": "A", "content": "B"})

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body == {"id": body["id"], "title": "A", "content": "B", "published": False}

    @pytest.mark.asyncio
    async def test_created_post_appears_once_in_list(self, test_client):
        existing = await create(test_client, "Old", "Post")
        created = await create(test_client, "A", "B")

        posts = (await test_client.get("/api/posts")).json()

        assert created["id"] != existing["id"]
        assert [p for p in posts if p["id"] == created["id"]] == [created]
        assert len(posts) == 2

    @pytest.mark.asyncio
    async def test_list_keeps_insertion_order(self, test_client):
        for i in range(3):
            await create(test_client, f"Post {i}", "body")

        titles = [p["title"] for p in (await test_client.get("/api/posts")).json()]

        assert titles == ["Post 0", "Post 1", "Post 2"]

    @pytest.mark.asyncio
    async def test_empty_strings_are_accepted(self, test_client):
        response = await test_client.post("/api/posts", json={"title": "", "content": ""})

        assert response.status_code == 201
        assert response.json()["title"] == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload,missing", [
        ({"content": "B"}, ["title"]),
        ({"title": "A"}, ["content"]),
        ({}, ["title", "content"]),
    ])
    async def test_missing_fields_rejected(self, test_client, payload, missing):
        response = await test_client.post("/api/posts", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["kind"] == "validation_error"
        assert body["details"] == {"fields": missing}
        assert body["error"] == f"Missing required field(s): {', '.join(missing)}"
        assert (await test_client.get("/api/posts")).json() == []

    @pytest.mark.asyncio
    async def test_malformed_json_rejected(self, test_client):
        response = await test_client.post(
            "/api/posts",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"


class TestGetOne:

    @pytest.mark.asyncio
    async def test_get_existing_post(self, test_client):
        created = await create(test_client)

        response = await test_client.get(f"/api/posts/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_get_missing_post_is_404(self, test_client):
        response = await test_client.get("/api/posts/999")

        assert response.status_code == 404
        body = response.json()
        assert body["kind"] == "not_found"
        assert body["error"] == "Post with ID '999' was not found"

    @pytest.mark.asyncio
    async def test_non_integer_id_is_400(self, test_client):
        response = await test_client.get("/api/posts/abc")

        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_all_empties_store(self, test_client):
        for i in range(3):
            await create(test_client, f"Post {i}", "body")

        response = await test_client.delete("/api/posts")

        assert response.status_code == 200
        assert response.json() == {"message": "All posts deleted successfully"}
        assert (await test_client.get("/api/posts")).json() == []

    @pytest.mark.asyncio
    async def test_delete_all_on_empty_store(self, test_client):
        response = await test_client.delete("/api/posts")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_delete_one_removes_only_that_post(self, test_client):
        keep = await create(test_client, "Keep", "me")
        drop = await create(test_client, "Drop", "me")

        response = await test_client.delete(f"/api/posts/{drop['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted successfully", "deleted": True}
        assert (await test_client.get("/api/posts")).json() == [keep]

    @pytest.mark.asyncio
    async def test_delete_missing_post_still_succeeds(self, test_client):
        response = await test_client.delete("/api/posts/12345")

        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted successfully", "deleted": False}

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, test_client):
        first = await create(test_client)
        await test_client.delete(f"/api/posts/{first['id']}")

        second = await create(test_client)

        assert second["id"] != first["id"]


class TestStoreFailures:
    """Every store failure becomes a 500 with the operation's static message."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path,kwargs,message", [
        ("GET", "/api/posts", {}, "Failed to fetch posts"),
        ("POST", "/api/posts", {"json": {"title": "A", "content": "B"}}, "Failed to create post"),
        ("DELETE", "/api/posts", {}, "Failed to delete all posts"),
        ("DELETE", "/api/posts/1", {}, "Failed to delete post"),
        ("GET", "/api/posts/1", {}, "Failed to fetch post"),
    ])
    async def test_store_failure_maps_to_500(
        self, app, test_client, failing_store, method, path, kwargs, message
    ):
        app.dependency_overrides[get_post_store] = lambda: failing_store

        response = await test_client.request(method, path, **kwargs)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == message
        assert body["kind"] == "store_error"
        # Driver details stay server-side
        assert "connection refused" not in response.text

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, app, test_client, failing_store):
        app.dependency_overrides[get_post_store] = lambda: failing_store

        response = await test_client.get("/api/posts", headers={"X-Request-ID": "req-123"})

        assert response.json()["request_id"] == "req-123"
        assert response.headers["X-Request-ID"] == "req-123"
