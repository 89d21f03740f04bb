# Views package init
"""
Blog Backend - Page Views
==========================

What:  Per-request state holders behind the HTML pages.
How:   Each view owns its page state (posts, form fields, a notice),
       calls the posts API through PostsClient, and is rendered by a
       Jinja2 template afterwards. Nothing is shared between requests.

View Inventory:
    - PostListView:   all posts, delete one, delete all
    - PostCreateView: title/content form
    - PostDetailView: a single post
"""

from blogapp.views.notice import Notice
from blogapp.views.post_create import PostCreateView
from blogapp.views.post_detail import PostDetailView
from blogapp.views.post_list import PostListView

__all__ = ["Notice", "PostCreateView", "PostDetailView", "PostListView"]
