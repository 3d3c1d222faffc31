"""Post ORM — belongs to a User, owns Comments.

Invariants:
    - user_id references users.id (ON DELETE CASCADE)
    - title <= 200 chars, body non-nullable text
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from placeholder_api.db.base import Base


class Post(Base):
    """Post entity."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
