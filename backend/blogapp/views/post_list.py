"""
Blog Backend - Post List View
==============================

What:  State and actions behind the "All Posts" page.
How:   Holds a component-local list of posts. `refresh()` is the only way
       the list is (re)loaded from the API; delete actions patch it only
       after the server confirmed the change.

Failure visibility:
    refresh / delete-one failures are logged only, the page keeps showing
    the last known list. Delete-all failures also set an error notice.
"""

import logging
from typing import List, Optional

import httpx

from blogapp.client.posts_client import PostsApi
from blogapp.exceptions import ApiClientError
from blogapp.schemas.post import PostResponse
from blogapp.views.notice import Confirm, Notice

logger = logging.getLogger(__name__)

CONFIRM_DELETE_ONE = "Are you sure you want to delete this post?"
CONFIRM_DELETE_ALL = "Are you sure you want to delete ALL posts? This action cannot be undone."

ALL_DELETED = "All posts have been deleted successfully"
DELETE_ALL_FAILED = "Failed to delete all posts"
DELETE_ALL_ERROR = "An error occurred while deleting all posts"
EMPTY_PLACEHOLDER = "No posts available"


class PostListView:
    """
    Attributes:
        posts:  ordered posts as last confirmed by the server
        notice: message for the user after delete-all, if any
    """

    def __init__(self, api: PostsApi):
        self.api = api
        self.posts: List[PostResponse] = []
        self.notice: Optional[Notice] = None

    @property
    def is_empty(self) -> bool:
        return not self.posts

    async def refresh(self) -> bool:
        """
        Replace local state with the server's post list.

        Returns False (state unchanged) when the request fails.
        """
        try:
            self.posts = await self.api.list_posts()
        except (ApiClientError, httpx.HTTPError) as e:
            logger.error("Failed to fetch posts: %s", e)
            return False
        return True

    async def delete_one(self, post_id: int, confirm: Confirm) -> bool:
        """
        Delete one post after confirmation.

        On success the post is dropped from local state without re-fetching.
        On failure nothing changes and the error is only logged.
        """
        if not confirm(CONFIRM_DELETE_ONE):
            return False
        try:
            await self.api.delete_post(post_id)
        except (ApiClientError, httpx.HTTPError) as e:
            logger.error("Failed to delete post %s: %s", post_id, e)
            return False
        self.posts = [post for post in self.posts if post.id != post_id]
        return True

    async def delete_all(self, confirm: Confirm) -> bool:
        """Delete every post after confirmation and report the outcome in `notice`."""
        if not confirm(CONFIRM_DELETE_ALL):
            return False
        try:
            await self.api.delete_all_posts()
        except ApiClientError as e:
            logger.error("Failed to delete all posts: %s", e.message)
            self.notice = Notice.error(DELETE_ALL_FAILED)
            return False
        except httpx.HTTPError as e:
            logger.error("Failed to delete all posts: %s", e)
            self.notice = Notice.error(DELETE_ALL_ERROR)
            return False
        self.posts = []
        self.notice = Notice.success(ALL_DELETED)
        return True
