"""Unsocial — process entry point for the logic layer.

Invariants:
    - lifespan() sets up logging and connects the database before yielding
    - The database is disconnected on exit, even when the body raises

Design Decisions:
    - Async context manager lifespan: any host (web server, worker, script)
      wraps its lifetime in it instead of calling connect/disconnect by hand
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from app.config import Settings, get_settings
from app.infrastructure.database import (
    DatabaseSessionManager, connect, disconnect,
)
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
) -> AsyncGenerator[DatabaseSessionManager, None]:
    """Startup/shutdown lifecycle."""
    settings = settings or get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    manager = connect(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Unsocial started")
    try:
        yield manager
    finally:
        await disconnect()
        logger.info("Unsocial shutting down")
        logging.root.removeHandler(handler)
