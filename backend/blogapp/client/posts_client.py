"""
Blog Backend - Posts API Client
================================

What:  Async HTTP client for /api/posts, the "fetch" layer of the pages.
How:   Wraps an httpx.AsyncClient. Successful responses are parsed into
       schemas; non-2xx responses raise ApiClientError with the server's
       error payload; transport failures propagate as httpx.HTTPError.
Who:   Used by the views in blogapp.views, built per page request by the
       `get_posts_client` dependency.

Base URL:
    settings.api_base_url set   → real network calls to that server
    settings.api_base_url unset → in-process calls to this same app via
                                  httpx.ASGITransport (full middleware chain,
                                  no socket)
"""

import logging
from typing import Any, AsyncGenerator, Dict, List, Protocol

import httpx
from fastapi import Request

from blogapp.exceptions import ApiClientError
from blogapp.middleware.logging import REQUEST_SOURCE_HEADER
from blogapp.middleware.request_id import REQUEST_ID_HEADER
from blogapp.schemas.post import DeleteResponse, MessageResponse, PostResponse

logger = logging.getLogger(__name__)

IN_PROCESS_BASE_URL = "http://blogapp.internal"
PAGES_SOURCE = "pages"


class PostsApi(Protocol):
    """Operations the views need from the posts API."""

    async def list_posts(self) -> List[PostResponse]: ...
    async def get_post(self, post_id: int) -> PostResponse: ...
    async def create_post(self, title: str, content: str) -> PostResponse: ...
    async def delete_post(self, post_id: int) -> DeleteResponse: ...
    async def delete_all_posts(self) -> MessageResponse: ...


class PostsClient:
    """httpx-based implementation of PostsApi."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    @staticmethod
    def _raise_for_status(resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            payload: Dict[str, Any] = resp.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        raise ApiClientError(status_code=resp.status_code, payload=payload)

    async def list_posts(self) -> List[PostResponse]:
        resp = await self._http.get("/api/posts")
        self._raise_for_status(resp)
        return [PostResponse.model_validate(item) for item in resp.json()]

    async def get_post(self, post_id: int) -> PostResponse:
        resp = await self._http.get(f"/api/posts/{post_id}")
        self._raise_for_status(resp)
        return PostResponse.model_validate(resp.json())

    async def create_post(self, title: str, content: str) -> PostResponse:
        resp = await self._http.post(
            "/api/posts",
            json={"title": title, "content": content},
        )
        self._raise_for_status(resp)
        return PostResponse.model_validate(resp.json())

    async def delete_post(self, post_id: int) -> DeleteResponse:
        resp = await self._http.delete(f"/api/posts/{post_id}")
        self._raise_for_status(resp)
        return DeleteResponse.model_validate(resp.json())

    async def delete_all_posts(self) -> MessageResponse:
        resp = await self._http.delete("/api/posts")
        self._raise_for_status(resp)
        return MessageResponse.model_validate(resp.json())


def build_http_client(request: Request) -> httpx.AsyncClient:
    """
    Create the httpx client for one page request.

    The incoming X-Request-ID is forwarded so the page request and the API
    calls it triggers share one correlation id in the logs; X-Request-Source
    marks those calls as coming from the pages in the access log.
    """
    config = request.app.state.settings
    headers = {"Accept": "application/json", REQUEST_SOURCE_HEADER: PAGES_SOURCE}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        headers[REQUEST_ID_HEADER] = request_id

    if config.api_base_url:
        return httpx.AsyncClient(
            base_url=config.api_base_url.rstrip("/"),
            headers=headers,
            timeout=config.api_timeout,
        )
    return httpx.AsyncClient(
        # Unhandled API exceptions come back as 500 responses, as over a socket
        transport=httpx.ASGITransport(app=request.app, raise_app_exceptions=False),
        base_url=IN_PROCESS_BASE_URL,
        headers=headers,
        timeout=config.api_timeout,
    )


async def get_posts_client(request: Request) -> AsyncGenerator[PostsClient, None]:
    """FastAPI dependency yielding a PostsClient closed after the request."""
    client = PostsClient(build_http_client(request))
    try:
        yield client
    finally:
        await client.close()
