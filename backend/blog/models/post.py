"""Post ORM — persists posts and their ordered tag labels.

Invariants:
    - id is a 24-char hex string assigned on insert (generate_post_id), never updated
    - title and body are non-nullable text
    - tag_rows keep the submitted order via position; deleting a post deletes its tags
    - to_dict() is the only shape that leaves the repository

Design Decisions:
    - Tags as child rows (not a JSON column): the ?tag= filter stays an indexed
      EXISTS subquery on every backend, SQLite included
    - lazy="selectin" on tag_rows: async sessions cannot lazy-load on attribute access
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog.core.object_id import generate_post_id
from blog.db.base import Base


class Post(Base):
    """A blog post."""
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=generate_post_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    tag_rows: Mapped[list["PostTag"]] = relationship(
        "PostTag", back_populates="post",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="PostTag.position",
    )

    @property
    def tags(self) -> list[str]:
        return [row.name for row in self.tag_rows]

    @tags.setter
    def tags(self, names: list[str]) -> None:
        self.tag_rows = [
            PostTag(position=i, name=name) for i, name in enumerate(names)
        ]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "tags": self.tags,
            "created_at": self.created_at,
        }


class PostTag(Base):
    """One tag label on a post, at a fixed position."""
    __tablename__ = "post_tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)

    post: Mapped["Post"] = relationship("Post", back_populates="tag_rows")
