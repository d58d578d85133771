"""Input Validation — verifies type, length and format checks and their messages.

Tests:
    - validate_id checks type, then length, then hex format
    - validate_text / validate_image reject non-strings
    - Registration field validators enforce their bounds
"""

import pytest

from app.core.errors import ValidationError
from app.core.validate import (
    validate_email,
    validate_id,
    validate_image,
    validate_name,
    validate_password,
    validate_passwords_match,
    validate_text,
    validate_username,
)


# ─── validate_id ─────────────────────────────────────────────────

def test_validate_id_accepts_24_hex_chars():
    validate_id("0123456789abcdefABCDEF01", "userId")


@pytest.mark.parametrize("value", [None, True, 123, b"012345678901234567890123", ["x"]])
def test_validate_id_rejects_non_string(value):
    with pytest.raises(ValidationError, match=r"^invalid user_id$"):
        validate_id(value, "user_id")


@pytest.mark.parametrize("value", ["", "0123", "0" * 23, "0" * 25])
def test_validate_id_rejects_wrong_length(value):
    with pytest.raises(ValidationError, match=r"^invalid post_id length$"):
        validate_id(value, "post_id")


def test_validate_id_rejects_non_hex():
    with pytest.raises(ValidationError, match=r"^invalid comment_id format$"):
        validate_id("g" * 24, "comment_id")


def test_validate_id_checks_type_before_length():
    with pytest.raises(ValidationError, match=r"^invalid id$"):
        validate_id(1234)


# ─── validate_text / validate_image ──────────────────────────────

def test_validate_text_accepts_empty_string():
    validate_text("")


def test_validate_text_rejects_non_string():
    with pytest.raises(ValidationError, match=r"^invalid text$"):
        validate_text(True)


def test_validate_text_enforces_max_length():
    validate_text("x" * 10, max_length=10)
    with pytest.raises(ValidationError, match=r"^invalid text length$"):
        validate_text("x" * 11, max_length=10)


def test_validate_image_rejects_non_string():
    with pytest.raises(ValidationError, match=r"^invalid image$"):
        validate_image(True)


# ─── registration fields ─────────────────────────────────────────

def test_validate_name_rejects_blank():
    with pytest.raises(ValidationError, match=r"^invalid name length$"):
        validate_name("   ")


def test_validate_email_rejects_missing_domain():
    with pytest.raises(ValidationError, match=r"^invalid email format$"):
        validate_email("coco@loco")


def test_validate_email_accepts_plain_address():
    validate_email("coco@loco.com")


def test_validate_username_rejects_symbols():
    with pytest.raises(ValidationError, match=r"^invalid username format$"):
        validate_username("coco-loco")


def test_validate_password_rejects_spaces():
    with pytest.raises(ValidationError, match=r"^invalid password format$"):
        validate_password("123 123 123")


def test_validate_passwords_match():
    validate_passwords_match("123123123", "123123123")
    with pytest.raises(ValidationError, match=r"^passwords do not match$"):
        validate_passwords_match("123123123", "123123124")


# ─── trailing newline ────────────────────────────────────────────

def test_validate_id_rejects_trailing_newline():
    with pytest.raises(ValidationError, match=r"^invalid user_id format$"):
        validate_id("01234567890123456789012\n", "user_id")


def test_validate_username_rejects_trailing_newline():
    with pytest.raises(ValidationError, match=r"^invalid username format$"):
        validate_username("cocoloco\n")


def test_validate_email_rejects_trailing_newline():
    with pytest.raises(ValidationError, match=r"^invalid email format$"):
        validate_email("coco@loco.com\n")
