"""Create Comment — appends to the post and returns the new comment id."""

import pytest

from app.core.errors import NotFoundError, SystemError, ValidationError
from app.infrastructure.repositories import posts
from app.services.create_comment import COMMENT_MAX_LENGTH, create_comment

MISSING_ID = "012345678901234567890123"


async def test_create_comment_appends_to_post(make_user, make_post):
    user = await make_user()
    post = await make_post(user.id)

    comment_id = await create_comment(user.id, post.id, "hello comment")

    post = await posts.find_by_id(post.id)
    assert [c.id for c in post.comments] == [comment_id]
    assert post.comments[0].author_id == user.id
    assert post.comments[0].text == "hello comment"
    assert len(comment_id) == 24


async def test_create_comment_keeps_existing_comments(make_user, make_post):
    user = await make_user()
    post = await make_post(user.id, comments=[(user.id, "first")])
    first_id = post.comments[0].id

    comment_id = await create_comment(user.id, post.id, "second")

    post = await posts.find_by_id(post.id)
    assert [c.id for c in post.comments] == [first_id, comment_id]


async def test_created_comment_can_be_removed_by_author(make_user, make_post):
    from app.services.remove_comment import remove_comment

    user = await make_user()
    post = await make_post(user.id)
    comment_id = await create_comment(user.id, post.id, "short-lived")

    await remove_comment(user.id, post.id, comment_id)

    post = await posts.find_by_id(post.id)
    assert post.comments == []


async def test_create_comment_fails_on_non_existing_user(db):
    with pytest.raises(NotFoundError, match=r"^user not found$"):
        await create_comment(MISSING_ID, MISSING_ID, "hello")


async def test_create_comment_fails_on_non_existing_post(make_user):
    user = await make_user()

    with pytest.raises(NotFoundError, match=r"^post not found$"):
        await create_comment(user.id, MISSING_ID, "hello")


def test_create_comment_fails_on_non_string_text():
    with pytest.raises(ValidationError, match=r"^invalid text$"):
        create_comment(MISSING_ID, MISSING_ID, ["hello"])


def test_create_comment_fails_on_too_long_text():
    with pytest.raises(ValidationError, match=r"^invalid text length$"):
        create_comment(MISSING_ID, MISSING_ID, "x" * (COMMENT_MAX_LENGTH + 1))


async def test_create_comment_fails_on_save_error(make_user, make_post, fail_session):
    user = await make_user()
    post = await make_post(user.id)
    fail_session("commit", "system error on posts.save")

    with pytest.raises(SystemError, match=r"^system error on posts.save$"):
        await create_comment(user.id, post.id, "hello")
