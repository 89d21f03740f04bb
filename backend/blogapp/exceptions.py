"""
Blog Backend - Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions, one per error kind the API reports.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return tagged JSON error responses with the matching HTTP status code.
Who:   Raised by services, routes and the API client; caught by global
       handlers on the server and by the views on the client side.

Exception Hierarchy:
    BlogError (base)
    ├── ValidationError   → 400 Bad Request   (kind: validation_error)
    ├── NotFoundError     → 404 Not Found     (kind: not_found)
    ├── StoreError        → 500 Internal      (kind: store_error)
    └── ApiClientError    → raised by PostsClient on non-2xx responses

Response body for every server-side error:
    {"error": "<message>", "kind": "<tag>", "request_id": "<id>"}
"""

from typing import Any, Dict, Optional


class BlogError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    kind = "internal_error"
    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BlogError):
    """
    Raised when client input fails validation.

    When:    Missing `title`/`content`, malformed JSON body, non-integer post id.
    HTTP:    400 Bad Request

    Unlike the other kinds, `context` is client input metadata and is
    returned as `details`.

    Example response:
        {
            "error": "Missing required field(s): title",
            "kind": "validation_error",
            "details": {"fields": ["title"]}
        }
    """

    kind = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BlogError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/posts/{id} with an id that is not in the store.
    HTTP:    404 Not Found

    The store returns None for missing rows; the service layer converts
    that into this exception. Delete-by-id never raises it, deleting an
    absent post is a success.
    """

    kind = "not_found"
    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(BlogError):
    """
    Raised when a store (database) operation fails.

    When:    Connection lost, constraint violation, missing table, etc.
    HTTP:    500 Internal Server Error

    The message is the static per-operation text ("Failed to fetch posts",
    "Failed to create post", ...). The underlying SQLAlchemy error is kept
    in `context` for the server log only.
    """

    kind = "store_error"
    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ApiClientError(BlogError):
    """
    Raised by PostsClient when the posts API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response
        payload:     Decoded JSON error body (empty dict if not JSON)
        kind:        Error tag from the payload, if the server sent one
    """

    def __init__(
        self,
        status_code: int,
        payload: Optional[Dict[str, Any]] = None,
    ):
        self.payload = payload or {}
        message = self.payload.get("error") or f"Request failed with status {status_code}"
        super().__init__(message=message, context={"status_code": status_code})
        # Instance attributes shadow the server-side class defaults
        self.status_code = status_code
        self.kind = self.payload.get("kind", "unknown")
