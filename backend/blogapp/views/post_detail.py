"""Blog Backend - Post Detail View: one post, looked up by id."""

import logging
from typing import Optional

import httpx

from blogapp.client.posts_client import PostsApi
from blogapp.exceptions import ApiClientError
from blogapp.schemas.post import PostResponse
from blogapp.views.notice import Notice

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load post"


class PostDetailView:
    def __init__(self, api: PostsApi):
        self.api = api
        self.post: Optional[PostResponse] = None
        self.missing = False
        self.notice: Optional[Notice] = None

    async def load(self, post_id: int) -> bool:
        """Fetch the post; sets `missing` on 404 and `notice` on other failures."""
        try:
            self.post = await self.api.get_post(post_id)
        except ApiClientError as e:
            if e.status_code == 404:
                self.missing = True
            else:
                logger.error("Failed to load post %s: %s", post_id, e.message)
                self.notice = Notice.error(LOAD_FAILED)
            return False
        except httpx.HTTPError as e:
            logger.error("Failed to load post %s: %s", post_id, e)
            self.notice = Notice.error(LOAD_FAILED)
            return False
        return True
