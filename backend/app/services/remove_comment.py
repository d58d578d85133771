"""Remove Comment — deletes a user's own comment from a post.

Invariants:
    - user_id, post_id, comment_id validated synchronously before any IO
    - User and post are fetched concurrently; user absence is reported first
    - Only the comment's author may remove it (OwnershipError otherwise)
    - Exactly the targeted comment is removed; sibling comments keep their order

Design Decisions:
    - Mutate the loaded post and save the aggregate, rather than deleting the
      comment row directly: the post stays the single write path for its comments
"""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from app.core.domain_types import CommentId, PostId, UserId
from app.core.errors import ErrorContext, NotFoundError, OwnershipError
from app.core.validate import validate_id
from app.infrastructure.repositories import posts, users

logger = logging.getLogger(__name__)


def remove_comment(
    user_id: str, post_id: str, comment_id: str,
) -> Coroutine[Any, Any, None]:
    validate_id(user_id, "user_id")
    validate_id(post_id, "post_id")
    validate_id(comment_id, "comment_id")

    return _remove_comment(
        UserId(user_id.lower()),
        PostId(post_id.lower()),
        CommentId(comment_id.lower()),
    )


async def _remove_comment(
    user_id: UserId, post_id: PostId, comment_id: CommentId,
) -> None:
    context = ErrorContext(
        user_id=user_id, post_id=post_id, comment_id=comment_id,
    )
    user, post = await asyncio.gather(
        users.find_by_id(user_id), posts.find_by_id(post_id),
    )

    if not user:
        raise NotFoundError("user not found", context)
    if not post:
        raise NotFoundError("post not found", context)

    comment = post.find_comment(comment_id)
    if not comment:
        raise NotFoundError("comment not found", context)

    if comment.author_id != user_id:
        raise OwnershipError("user is not author of comment", context)

    post.comments.remove(comment)
    await posts.save(post)
    logger.info(
        "Comment removed",
        extra={"user_id": user_id, "post_id": post_id, "comment_id": comment_id},
    )
