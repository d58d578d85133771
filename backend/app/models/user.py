"""User ORM — persists registered identities.

Invariants:
    - id is a 24-char hex string generated on the client side (new_object_id)
    - email and username are unique
    - password holds the salted hash, never the plain text
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import OBJECT_ID_LENGTH, new_object_id
from app.db.base import Base


class User(Base):
    """User entity — author of posts and comments."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    username: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
