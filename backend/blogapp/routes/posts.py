"""
Blog Backend - Posts API Route Handlers
========================================

What:  JSON endpoints over the Post Store.
How:   Each handler maps one method+path to one PostService call.
       Errors are raised as exceptions and rendered by the global handlers
       in main.py, so handlers contain no try/except.
Who:   Called by PostsClient (the pages) and any other HTTP consumer.

Endpoints:
    GET    /api/posts        → 200 [Post]             | 500 store_error
    POST   /api/posts        → 201 Post               | 400 validation_error, 500
    DELETE /api/posts        → 200 {message}          | 500
    GET    /api/posts/{id}   → 200 Post               | 404 not_found, 500
    DELETE /api/posts/{id}   → 200 {message, deleted} | 500

Delete-all has no server-side confirmation: any caller reaching this
endpoint removes every post.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from blogapp.schemas.post import (
    DeleteResponse,
    ErrorResponse,
    MessageResponse,
    PostCreate,
    PostResponse,
)
from blogapp.services.post_service import PostService, get_post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Posts"])

STORE_FAILURE = {"description": "Store operation failed", "model": ErrorResponse}
BAD_REQUEST = {"description": "Missing field or malformed input", "model": ErrorResponse}


@router.get(
    "/posts",
    response_model=List[PostResponse],
    responses={500: STORE_FAILURE},
    summary="List all posts",
)
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostResponse]:
    return await service.list_posts()


@router.post(
    "/posts",
    status_code=201,
    response_model=PostResponse,
    responses={400: BAD_REQUEST, 500: STORE_FAILURE},
    summary="Create a post",
    description=(
        "Creates a post from `title` and `content`. Both must be present; "
        "`published` is defaulted by the store."
    ),
)
async def create_post(
    body: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.create_post(title=body.title, content=body.content)


@router.delete(
    "/posts",
    response_model=MessageResponse,
    responses={500: STORE_FAILURE},
    summary="Delete every post",
)
async def delete_all_posts(service: PostService = Depends(get_post_service)) -> MessageResponse:
    logger.warning("Deleting all posts")
    return await service.delete_all_posts()


@router.get(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={
        400: BAD_REQUEST,
        404: {"description": "Post not found", "model": ErrorResponse},
        500: STORE_FAILURE,
    },
    summary="Get a single post by ID",
)
async def get_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return await service.get_post(post_id)


@router.delete(
    "/posts/{post_id}",
    response_model=DeleteResponse,
    responses={400: BAD_REQUEST, 500: STORE_FAILURE},
    summary="Delete a single post by ID",
    description="Idempotent: deleting an unknown id succeeds with `deleted: false`.",
)
async def delete_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
) -> DeleteResponse:
    return await service.delete_post(post_id)
