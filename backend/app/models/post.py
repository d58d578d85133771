"""Post ORM — persists a user's image post and its embedded comments.

Invariants:
    - author_id always references an existing user (FK)
    - date is set once at creation (UTC)
    - comments are ordered oldest first

Design Decisions:
    - cascade delete-orphan on comments: removing a comment from post.comments and
      saving the post deletes it, the same way an embedded array behaves
    - lazy="selectin": comments load with the post, no lazy IO in async context
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.domain_types import OBJECT_ID_LENGTH, new_object_id
from app.db.base import Base


class Post(Base):
    """Post aggregate root — owns its comments."""
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id,
    )
    author_id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image: Mapped[str] = mapped_column(String(2000), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="post",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Comment.date",
    )

    def find_comment(self, comment_id: str) -> "Comment | None":
        """Embedded lookup by id, None when the post has no such comment."""
        return next((c for c in self.comments if c.id == comment_id), None)
