"""
Blog Backend - Post Store
==========================

What:  Create / read / delete operations over the `posts` table.
How:   Thin wrapper around one AsyncSession. Writes are flushed immediately
       so database errors surface inside the calling service, where they are
       mapped to StoreError. The commit happens when the request's session
       closes (see Database.session).
Who:   Used by PostService; built per request by `get_post_store`.

Every method raises sqlalchemy.exc.SQLAlchemyError on connectivity or
constraint failures. Missing rows are reported as None, never raised.
"""

import logging
from typing import List, Optional, Protocol

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blogapp.database import get_db_session
from blogapp.models.post import Post

logger = logging.getLogger(__name__)


class PostStore(Protocol):
    """Interface of the post data-access client."""

    async def create(self, title: str, content: str) -> Post: ...
    async def find_many(self) -> List[Post]: ...
    async def find_unique(self, post_id: int) -> Optional[Post]: ...
    async def delete_many(self) -> int: ...
    async def delete(self, post_id: int) -> Optional[Post]: ...


class SqlAlchemyPostStore:
    """PostStore backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, title: str, content: str) -> Post:
        """
        Insert a post and return it with its generated id and defaults.

        flush() sends the INSERT (assigning the id); refresh() reloads the
        row so server-side defaults like `published` are populated.
        """
        post = Post(title=title, content=content)
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        logger.debug("Inserted post %s", post.id)
        return post

    async def find_many(self) -> List[Post]:
        """All posts in insertion (id) order."""
        result = await self.session.execute(select(Post).order_by(Post.id))
        return list(result.scalars().all())

    async def find_unique(self, post_id: int) -> Optional[Post]:
        result = await self.session.execute(select(Post).where(Post.id == post_id))
        return result.scalar_one_or_none()

    async def delete_many(self) -> int:
        """Delete every post; returns the number of rows removed."""
        result = await self.session.execute(delete(Post))
        return result.rowcount or 0

    async def delete(self, post_id: int) -> Optional[Post]:
        """Delete one post by id; returns the removed post or None if absent."""
        post = await self.find_unique(post_id)
        if post is None:
            return None
        await self.session.delete(post)
        await self.session.flush()
        return post


async def get_post_store(
    db: AsyncSession = Depends(get_db_session),
) -> PostStore:
    """
    FastAPI dependency providing the post store for the current request.

    Tests replace it through `app.dependency_overrides[get_post_store]`.
    """
    return SqlAlchemyPostStore(db)
