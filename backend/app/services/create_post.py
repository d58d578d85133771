"""Create Post — publishes an image post on behalf of an existing user.

Invariants:
    - user_id, image, text validated synchronously, in that order, before any IO
    - Exactly one post persisted per successful call, dated now (UTC)
    - Missing user → NotFoundError("user not found"); nothing persisted
"""

import logging
from collections.abc import Coroutine
from datetime import datetime, timezone
from typing import Any

from app.core.domain_types import UserId
from app.core.errors import ErrorContext, NotFoundError
from app.core.validate import validate_id, validate_image, validate_text
from app.infrastructure.repositories import posts, users

logger = logging.getLogger(__name__)


def create_post(
    user_id: str, image: str, text: str,
) -> Coroutine[Any, Any, None]:
    validate_id(user_id, "user_id")
    validate_image(image)
    validate_text(text)

    return _create_post(UserId(user_id.lower()), image, text)


async def _create_post(user_id: UserId, image: str, text: str) -> None:
    user = await users.find_by_id(user_id)
    if not user:
        raise NotFoundError("user not found", ErrorContext(user_id=user_id))

    post = await posts.create(
        author_id=user.id,
        image=image,
        text=text,
        date=datetime.now(timezone.utc),
    )
    logger.info("Post created", extra={"user_id": user.id, "post_id": post.id})
