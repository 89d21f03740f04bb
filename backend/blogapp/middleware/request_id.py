"""
Blog Backend - Request ID Middleware
=====================================

What:  Assigns an ID to each incoming request and echoes it in the response.
How:   Accepts a well-formed X-Request-ID from the caller (or generates a
       short UUID), binds it to a ContextVar for the duration of the request
       and to request.state, and returns it as a header.
Who:   Applied to every request; the value appears in access logs and in
       every error body (`request_id`).

Page requests forward their ID to the API calls they make (see
blogapp.client.posts_client), so one user action shares one ID in the logs.
Those nested calls run inside the page request's context, so the variable is
reset when each request finishes.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# IDs end up verbatim in log lines and response headers
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(header_value: Optional[str]) -> str:
    """Return the caller's ID when it is well-formed, otherwise a fresh one."""
    if header_value and _VALID_REQUEST_ID.match(header_value):
        return header_value
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = rid

        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
