"""Create posts table

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates the `posts` table, the only table of the blog.
Rollback: downgrade() drops the table (all posts are lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the posts table. Column docs live in blogapp/models/post.py."""
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Store-generated identifier, the only lookup and delete key",
        ),
        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            comment="Post title",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Post body",
        ),
        sa.Column(
            "published",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
            comment="Publication flag, defaulted by the store",
        ),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("posts")
