"""ORM Models — SQLAlchemy declarative models for users, posts and comments.

Invariants:
    - All models inherit from Base (db/base.py)
    - Post is the aggregate root for its comments; comments never outlive their post

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.user import User  # noqa: F401
from app.models.post import Post  # noqa: F401
from app.models.comment import Comment  # noqa: F401
