"""Get User Name — resolves a target user's display name for a requester.

Invariants:
    - Both ids validated synchronously before any IO
    - Requester is looked up before target; a missing requester wins
"""

from collections.abc import Coroutine
from typing import Any

from app.core.domain_types import UserId
from app.core.errors import ErrorContext, NotFoundError
from app.core.validate import validate_id
from app.infrastructure.repositories import users


def get_user_name(
    requester_id: str, target_id: str,
) -> Coroutine[Any, Any, str]:
    validate_id(requester_id, "requester_id")
    validate_id(target_id, "target_id")

    return _get_user_name(
        UserId(requester_id.lower()), UserId(target_id.lower()),
    )


async def _get_user_name(requester_id: UserId, target_id: UserId) -> str:
    requester = await users.find_by_id(requester_id)
    if not requester:
        raise NotFoundError(
            "user not found", ErrorContext(user_id=requester_id),
        )

    target = await users.find_by_id(target_id)
    if not target:
        raise NotFoundError(
            "target user not found", ErrorContext(user_id=target_id),
        )

    return target.name
