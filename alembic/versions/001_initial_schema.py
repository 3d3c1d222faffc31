"""Initial schema — users (with embedded address/company), posts, comments, albums, photos, todos.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

Child foreign keys carry ON DELETE CASCADE so that rows removed outside the
API still take their dependents with them.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("phone", sa.String(50), nullable=False, server_default=""),
        sa.Column("website", sa.String(255), nullable=False, server_default=""),
        sa.Column("address_street", sa.String(200), nullable=False),
        sa.Column("address_suite", sa.String(100), nullable=False),
        sa.Column("address_city", sa.String(100), nullable=False),
        sa.Column("address_zipcode", sa.String(20), nullable=False),
        sa.Column("address_geo_lat", sa.String(50), nullable=False),
        sa.Column("address_geo_lng", sa.String(50), nullable=False),
        sa.Column("company_name", sa.String(100), nullable=False),
        sa.Column("company_catch_phrase", sa.String(200), nullable=False, server_default=""),
        sa.Column("company_bs", sa.String(100), nullable=False, server_default=""),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("body", sa.Text, nullable=False),
    )
    op.create_index("ix_posts_user_id", "posts", ["user_id"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("post_id", sa.Integer, sa.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("body", sa.Text, nullable=False),
    )
    op.create_index("ix_comments_post_id", "comments", ["post_id"])

    op.create_table(
        "albums",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
    )
    op.create_index("ix_albums_user_id", "albums", ["user_id"])

    op.create_table(
        "photos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("album_id", sa.Integer, sa.ForeignKey("albums.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("url", sa.String(2048), nullable=False),
        sa.Column("thumbnail_url", sa.String(2048), nullable=False),
    )
    op.create_index("ix_photos_album_id", "photos", ["album_id"])

    op.create_table(
        "todos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_todos_user_id", "todos", ["user_id"])


def downgrade() -> None:
    op.drop_table("todos")
    op.drop_table("photos")
    op.drop_table("albums")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("users")
