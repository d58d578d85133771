"""Domain Types — identity types and id generation shared by models and logic.

Invariants:
    - UserId, PostId, CommentId wrap 24-char hex strings — never bare str in signatures
    - new_object_id() always returns exactly OBJECT_ID_LENGTH lowercase hex chars
    - Ids generated later in time sort after earlier ones (second resolution)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Timestamp prefix + random suffix mirrors document-database object ids, so ids
      produced elsewhere (imports, fixtures) stay interchangeable
"""

import secrets
import time
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)

OBJECT_ID_LENGTH: int = 24


def new_object_id() -> str:
    """8 hex chars of Unix seconds followed by 16 random hex chars."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"
