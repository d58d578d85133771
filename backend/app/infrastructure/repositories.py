"""Repositories — collection-style access to users and posts.

Invariants:
    - Every call borrows its own short-lived session: concurrent calls never share one
    - find_by_id returns None for a missing document, never raises NotFoundError
    - save() persists the whole post aggregate, comments included (added, edited, removed)
    - Database failures surface as SystemError (raised by the session manager)

Design Decisions:
    - Module-level instances (users, posts): logic reads like users.find_by_id(...)
    - save() merges the detached post: documents are loaded in one session and
      written back in another, exactly like fetch-then-save on a document store
"""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from app.core.errors import DuplicityError
from app.infrastructure.database import get_db_manager
from app.models.comment import Comment
from app.models.post import Post
from app.models.user import User


class UserRepository:
    """Users collection."""

    async def find_by_id(self, user_id: str) -> User | None:
        async with get_db_manager().session() as db:
            return await db.get(User, user_id)

    async def create(self, **fields: object) -> User:
        """Insert one user. Unique email/username clash → DuplicityError."""
        async with get_db_manager().session() as db:
            user = User(**fields)
            db.add(user)
            try:
                await db.commit()
            except IntegrityError as e:
                raise DuplicityError("user already exists") from e
            return user

    async def delete_many(self) -> None:
        async with get_db_manager().session() as db:
            await db.execute(delete(User))
            await db.commit()


class PostRepository:
    """Posts collection, comments embedded."""

    async def find_by_id(self, post_id: str) -> Post | None:
        async with get_db_manager().session() as db:
            return await db.get(Post, post_id)

    async def find_one(self) -> Post | None:
        """Oldest post, or None when the collection is empty."""
        async with get_db_manager().session() as db:
            result = await db.scalars(
                select(Post).order_by(Post.date).limit(1),
            )
            return result.first()

    async def create(self, **fields: object) -> Post:
        async with get_db_manager().session() as db:
            post = Post(**fields)
            db.add(post)
            await db.commit()
            return post

    async def save(self, post: Post) -> Post:
        async with get_db_manager().session() as db:
            merged = await db.merge(post)
            await db.commit()
            return merged

    async def delete_many(self) -> None:
        async with get_db_manager().session() as db:
            await db.execute(delete(Comment))
            await db.execute(delete(Post))
            await db.commit()


users = UserRepository()
posts = PostRepository()
