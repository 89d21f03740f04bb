"""
Blog Backend - Post Service
============================

What:  Business layer between the posts routes and the Post Store.
How:   Each method runs one store operation, converts ORM objects to
       response schemas, and translates failures into tagged exceptions:
         - missing row on get-one         → NotFoundError (404)
         - any store exception            → StoreError (500, static message)
Who:   Called by the posts route handlers; calls the injected PostStore.

The service holds no state beyond its store, so one instance is built per
request by the `get_post_service` dependency.
"""

import logging
from typing import List

from fastapi import Depends

from blogapp.exceptions import NotFoundError, StoreError
from blogapp.schemas.post import DeleteResponse, MessageResponse, PostResponse
from blogapp.store.post_store import PostStore, get_post_store

logger = logging.getLogger(__name__)

# Static messages returned to clients when the store fails
LIST_FAILED = "Failed to fetch posts"
GET_FAILED = "Failed to fetch post"
CREATE_FAILED = "Failed to create post"
DELETE_ALL_FAILED = "Failed to delete all posts"
DELETE_ONE_FAILED = "Failed to delete post"

ALL_DELETED_MESSAGE = "All posts deleted successfully"
POST_DELETED_MESSAGE = "Post deleted successfully"


class PostService:
    """
    Post operations with uniform error mapping.

    Error Handling Strategy:
        Store exceptions are logged with their type and text, then replaced
        by StoreError carrying only the operation's static message.
    """

    def __init__(self, store: PostStore):
        self.store = store

    def _store_failure(self, message: str, error: Exception, **context) -> StoreError:
        logger.error("%s: %s", message, error, exc_info=True)
        return StoreError(
            message=message,
            context={"original_error": type(error).__name__, **context},
        )

    async def list_posts(self) -> List[PostResponse]:
        """All posts, in the store's default (id) order."""
        try:
            posts = await self.store.find_many()
        except Exception as e:
            raise self._store_failure(LIST_FAILED, e)
        return [PostResponse.model_validate(post) for post in posts]

    async def get_post(self, post_id: int) -> PostResponse:
        """
        One post by id.

        Raises:
            NotFoundError: no post has that id (→ 404)
            StoreError:    the lookup failed (→ 500)
        """
        try:
            post = await self.store.find_unique(post_id)
        except Exception as e:
            raise self._store_failure(GET_FAILED, e, post_id=post_id)
        if post is None:
            raise NotFoundError(resource="post", resource_id=str(post_id))
        return PostResponse.model_validate(post)

    async def create_post(self, title: str, content: str) -> PostResponse:
        """Store a new post and return it with its generated id and defaults."""
        try:
            post = await self.store.create(title=title, content=content)
        except Exception as e:
            raise self._store_failure(CREATE_FAILED, e)
        logger.info("Created post %s", post.id)
        return PostResponse.model_validate(post)

    async def delete_all_posts(self) -> MessageResponse:
        try:
            count = await self.store.delete_many()
        except Exception as e:
            raise self._store_failure(DELETE_ALL_FAILED, e)
        logger.info("Deleted all posts (%d removed)", count)
        return MessageResponse(message=ALL_DELETED_MESSAGE)

    async def delete_post(self, post_id: int) -> DeleteResponse:
        """
        Delete one post by id.

        Deleting an id that does not exist is still a success; the
        `deleted` flag in the response tells the two cases apart.
        """
        try:
            removed = await self.store.delete(post_id)
        except Exception as e:
            raise self._store_failure(DELETE_ONE_FAILED, e, post_id=post_id)
        if removed is None:
            logger.info("Delete requested for missing post %s", post_id)
        else:
            logger.info("Deleted post %s", post_id)
        return DeleteResponse(message=POST_DELETED_MESSAGE, deleted=removed is not None)


async def get_post_service(store: PostStore = Depends(get_post_store)) -> PostService:
    """FastAPI dependency building a PostService around the request's store."""
    return PostService(store)
