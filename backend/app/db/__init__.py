"""Database Schema — SQLAlchemy Base shared by all models and migrations.

Invariants:
    - Single async engine per process (initialized via connect)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
