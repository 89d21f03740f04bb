"""HTTP client for the posts API, used by the page views."""

from blogapp.client.posts_client import PostsClient, get_posts_client

__all__ = ["PostsClient", "get_posts_client"]
