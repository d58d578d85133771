"""Create Comment — appends a user's comment to an existing post.

Invariants:
    - user_id, post_id, text validated synchronously before any IO
    - text is at most COMMENT_MAX_LENGTH chars
    - Resolves to the new comment's id; the comment lands last in post.comments
"""

import asyncio
import logging
from collections.abc import Coroutine
from datetime import datetime, timezone
from typing import Any

from app.core.domain_types import CommentId, PostId, UserId, new_object_id
from app.core.errors import ErrorContext, NotFoundError
from app.core.validate import validate_id, validate_text
from app.infrastructure.repositories import posts, users
from app.models.comment import Comment

logger = logging.getLogger(__name__)

COMMENT_MAX_LENGTH: int = 500


def create_comment(
    user_id: str, post_id: str, text: str,
) -> Coroutine[Any, Any, CommentId]:
    validate_id(user_id, "user_id")
    validate_id(post_id, "post_id")
    validate_text(text, max_length=COMMENT_MAX_LENGTH)

    return _create_comment(
        UserId(user_id.lower()), PostId(post_id.lower()), text,
    )


async def _create_comment(
    user_id: UserId, post_id: PostId, text: str,
) -> CommentId:
    context = ErrorContext(user_id=user_id, post_id=post_id)
    user, post = await asyncio.gather(
        users.find_by_id(user_id), posts.find_by_id(post_id),
    )

    if not user:
        raise NotFoundError("user not found", context)
    if not post:
        raise NotFoundError("post not found", context)

    comment = Comment(
        id=new_object_id(),
        author_id=user.id,
        text=text,
        date=datetime.now(timezone.utc),
    )
    post.comments.append(comment)
    await posts.save(post)

    logger.info(
        "Comment created",
        extra={"user_id": user_id, "post_id": post_id, "comment_id": comment.id},
    )
    return CommentId(comment.id)
