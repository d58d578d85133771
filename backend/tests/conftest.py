"""Root conftest — environment defaults and a fresh SQLite database per test.

Invariants:
    - Every test using `db` gets its own SQLite file database with all tables created
    - infrastructure.database.db_manager is swapped for the test manager and restored
    - make_user / make_post seed documents through the same repositories the logic uses

Design Decisions:
    - SQLite file over :memory:: concurrent lookups open separate connections,
      and each one must see the same data
"""

import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

import app.infrastructure.database as db_module
import app.models  # noqa: F401
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.repositories import posts, users
from app.models.comment import Comment

# Cheap password hashing and a throwaway database for every test run
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'unsocial-test.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(test_engine):
    """Global session manager pointed at the test database."""
    original_manager = db_module.db_manager
    db_module.db_manager = DatabaseSessionManager.from_engine(test_engine)
    yield db_module.db_manager
    db_module.db_manager = original_manager


@pytest.fixture
def make_user(db):
    async def _make_user(**overrides):
        fields = {
            "name": "Coco Loco",
            "email": "coco@loco.com",
            "username": "cocoloco",
            "password": "123123123",
        }
        fields.update(overrides)
        return await users.create(**fields)
    return _make_user


@pytest.fixture
def make_post(db):
    """Seed a post; comments given as (author_id, text) pairs."""
    async def _make_post(author_id, comments=(), **overrides):
        fields = {
            "author_id": author_id,
            "image": "https://www.image.com",
            "text": "hello world",
            "comments": [
                Comment(author_id=comment_author, text=text)
                for comment_author, text in comments
            ],
        }
        fields.update(overrides)
        return await posts.create(**fields)
    return _make_post


@pytest.fixture
def fail_session(monkeypatch):
    """Make an AsyncSession method raise SQLAlchemyError(message) from now on."""
    from sqlalchemy.exc import SQLAlchemyError
    from sqlalchemy.ext.asyncio import AsyncSession

    def _fail(method_name: str, message: str):
        async def _raise(self, *args, **kwargs):
            raise SQLAlchemyError(message)
        monkeypatch.setattr(AsyncSession, method_name, _raise)
    return _fail
