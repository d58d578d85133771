"""Input Validation — synchronous argument checks run before any database access.

Invariants:
    - Every check is PURE: raises ValidationError or returns None, never touches IO
    - Type is checked before length, length before format
    - Patterns cover the whole value (fullmatch), trailing newline included
    - Ids are accepted in either hex case; services lowercase them before any lookup
    - Messages name the argument: "invalid <name>", "invalid <name> length",
      "invalid <name> format"

Design Decisions:
    - Plain functions over a schema library: logic functions take primitive
      positional arguments, and callers match on the exact message
    - bool is rejected wherever str is expected (isinstance covers it already)
"""

import re

from app.core.domain_types import OBJECT_ID_LENGTH
from app.core.errors import ValidationError


NAME_MAX_LENGTH: int = 50
USERNAME_PATTERN = re.compile(r"\w{4,20}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PASSWORD_MIN_LENGTH: int = 8
PASSWORD_MAX_LENGTH: int = 64
_HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


def validate_id(value: object, explain: str = "id") -> None:
    """Object id: str, exactly 24 chars, hex."""
    if not isinstance(value, str):
        raise ValidationError(f"invalid {explain}")
    if len(value) != OBJECT_ID_LENGTH:
        raise ValidationError(f"invalid {explain} length")
    if not _HEX_PATTERN.fullmatch(value):
        raise ValidationError(f"invalid {explain} format")


def validate_text(
    value: object, explain: str = "text", max_length: int | None = None,
) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"invalid {explain}")
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"invalid {explain} length")


def validate_image(value: object, explain: str = "image") -> None:
    if not isinstance(value, str):
        raise ValidationError(f"invalid {explain}")


def validate_name(value: object) -> None:
    if not isinstance(value, str):
        raise ValidationError("invalid name")
    if not value.strip() or len(value) > NAME_MAX_LENGTH:
        raise ValidationError("invalid name length")


def validate_email(value: object) -> None:
    if not isinstance(value, str):
        raise ValidationError("invalid email")
    if not EMAIL_PATTERN.fullmatch(value):
        raise ValidationError("invalid email format")


def validate_username(value: object) -> None:
    if not isinstance(value, str):
        raise ValidationError("invalid username")
    if not 4 <= len(value) <= 20:
        raise ValidationError("invalid username length")
    if not USERNAME_PATTERN.fullmatch(value):
        raise ValidationError("invalid username format")


def validate_password(value: object, explain: str = "password") -> None:
    if not isinstance(value, str):
        raise ValidationError(f"invalid {explain}")
    if not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        raise ValidationError(f"invalid {explain} length")
    if any(ch.isspace() for ch in value):
        raise ValidationError(f"invalid {explain} format")


def validate_passwords_match(password: str, password_repeat: str) -> None:
    if password != password_repeat:
        raise ValidationError("passwords do not match")
