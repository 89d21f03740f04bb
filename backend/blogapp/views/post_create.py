"""
Blog Backend - Post Create View
================================

What:  Form state behind the "Create Post" page.
How:   `submit()` sends the current title/content to the API. The fields are
       cleared only when the post was created, so a failed submission can be
       retried without retyping.
"""

import logging
from typing import Optional

import httpx

from blogapp.client.posts_client import PostsApi
from blogapp.exceptions import ApiClientError
from blogapp.schemas.post import PostResponse
from blogapp.views.notice import Notice

logger = logging.getLogger(__name__)

CREATED = "Post created successfully!"
CREATE_FAILED = "Failed to create post"
CREATE_ERROR = "Error creating post"


class PostCreateView:
    def __init__(self, api: PostsApi, title: str = "", content: str = ""):
        self.api = api
        self.title = title
        self.content = content
        self.notice: Optional[Notice] = None
        self.created: Optional[PostResponse] = None

    async def submit(self) -> bool:
        try:
            self.created = await self.api.create_post(title=self.title, content=self.content)
        except ApiClientError as e:
            logger.error("Failed to create post: %s", e.message)
            self.notice = Notice.error(CREATE_FAILED)
            return False
        except httpx.HTTPError as e:
            logger.error("Error creating post: %s", e)
            self.notice = Notice.error(CREATE_ERROR)
            return False
        self.title = ""
        self.content = ""
        self.notice = Notice.success(CREATED)
        return True
