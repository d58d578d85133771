"""Register User — creates a new identity from sign-up form fields.

Invariants:
    - Every field validated synchronously; mismatched passwords rejected before IO
    - The stored password is a salted hash (core/passwords.py)
    - Taken email or username → DuplicityError("user already exists")
"""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from app.config import get_settings
from app.core.domain_types import UserId
from app.core.passwords import hash_password
from app.core.validate import (
    validate_email,
    validate_name,
    validate_password,
    validate_passwords_match,
    validate_username,
)
from app.infrastructure.repositories import users

logger = logging.getLogger(__name__)


def register_user(
    name: str, email: str, username: str, password: str, password_repeat: str,
) -> Coroutine[Any, Any, UserId]:
    validate_name(name)
    validate_email(email)
    validate_username(username)
    validate_password(password)
    validate_password(password_repeat, "password_repeat")
    validate_passwords_match(password, password_repeat)

    return _register_user(name, email, username, password)


async def _register_user(
    name: str, email: str, username: str, password: str,
) -> UserId:
    hashed = await asyncio.to_thread(
        hash_password, password, get_settings().password_hash_iterations,
    )
    user = await users.create(
        name=name, email=email, username=username, password=hashed,
    )
    logger.info("User registered", extra={"user_id": user.id})
    return UserId(user.id)
