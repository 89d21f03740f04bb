"""
Blog Backend - Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the API contract between pages and backend.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI documentation.
Who:   Used by the posts routes as body/response types and by PostsClient
       to parse responses.

Schemas are kept separate from the SQLAlchemy model so the API decides
exactly which fields leave the server.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PostCreate(BaseModel):
    """
    Body of POST /api/posts.

    Both fields must be present. Their contents are not checked further:
    an empty string is stored as-is.
    """
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """A stored post, as returned by list, create and get-one."""
    id: int = Field(description="Store-generated post identifier")
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")
    published: bool = Field(description="Publication flag (defaults to false)")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Confirmation body, e.g. after DELETE /api/posts."""
    message: str = Field(description="Human-readable confirmation")


class DeleteResponse(MessageResponse):
    """
    Body of DELETE /api/posts/{id}.

    `deleted` is false when no post had that id; the request still succeeds.
    """
    deleted: bool = Field(description="Whether a post was actually removed")


class ErrorResponse(BaseModel):
    """
    Tagged error body shared by every failing endpoint.

    Example:
        {
            "error": "Failed to fetch posts",
            "kind": "store_error",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Human-readable error message")
    kind: str = Field(description="Error tag: validation_error, not_found, store_error, internal_error")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
