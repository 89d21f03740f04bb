"""ORM models. Importing this package registers every table on Base.metadata."""

from blogapp.models.post import Post

__all__ = ["Post"]
