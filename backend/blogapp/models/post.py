"""
Blog Backend - Post SQLAlchemy Model
=====================================

What:  ORM model representing the `posts` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SqlAlchemyPostStore for create/find/delete and by Alembic.

Table Design:
    - Integer autoincrement primary key: assigned by the database on insert
    - title / content: required text
    - published: defaults to false; the API never sets it
"""

from sqlalchemy import Boolean, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from blogapp.database import Base


class Post(Base):
    """
    A single blog entry.

    Lifecycle:
        1. Created by POST /api/posts (published = False)
        2. Read by the list and detail endpoints
        3. Removed by delete-one or delete-all; there is no update
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-generated identifier, the only lookup and delete key",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Post title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post body",
    )

    published: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="Publication flag, defaulted by the store",
    )

    # SQLite would otherwise hand out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title={self.title!r}, published={self.published})>"
