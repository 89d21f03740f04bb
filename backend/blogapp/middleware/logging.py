"""
Blog Backend - Access Log Middleware
=====================================

What:  One access-log line per HTTP request.
How:   Times the request and logs method, path, status, duration, request ID
       and where the request came from once the response is ready.

Log lines for one "delete post" click:
    POST /posts/3/delete 200 9.8ms [a1b2c3d4] from 127.0.0.1
    DELETE /api/posts/3 200 2.1ms [a1b2c3d4] via pages
    GET /api/posts 200 1.4ms [a1b2c3d4] via pages

API calls made by the HTML pages carry the X-Request-Source header (set by
blogapp.client.posts_client) and are logged "via <source>"; everything else
is logged with the client address. Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from blogapp.middleware.request_id import request_id_var

REQUEST_SOURCE_HEADER = "X-Request-Source"
SKIPPED_PATHS = frozenset({"/health"})

logger = logging.getLogger("blogapp.access")


def status_log_level(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def describe_origin(request: Request) -> str:
    source = request.headers.get(REQUEST_SOURCE_HEADER)
    if source:
        return f"via {source}"
    # request.client is None under some test transports
    host = request.client.host if request.client else "unknown"
    return f"from {host}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request at INFO, 4xx at WARNING, 5xx at ERROR; skips /health."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.log(
            status_log_level(response.status_code),
            "%s %s %d %.1fms [%s] %s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id_var.get(""),
            describe_origin(request),
        )
        return response
