"""Repositories — collection operations the logic layer builds on."""

from app.infrastructure.repositories import posts, users
from app.models.comment import Comment


async def test_find_by_id_returns_none_for_missing(db):
    assert await users.find_by_id("012345678901234567890123") is None
    assert await posts.find_by_id("012345678901234567890123") is None


async def test_created_user_gets_object_id(make_user):
    user = await make_user()
    assert len(user.id) == 24
    assert (await users.find_by_id(user.id)).username == "cocoloco"


async def test_find_by_id_loads_comments_oldest_first(make_user, make_post):
    user = await make_user()
    post = await make_post(user.id)
    for text in ("a", "b", "c"):
        post = await posts.find_by_id(post.id)
        post.comments.append(Comment(author_id=user.id, text=text, id=text * 24))
        await posts.save(post)

    loaded = await posts.find_by_id(post.id)

    assert [c.text for c in loaded.comments] == ["a", "b", "c"]


async def test_save_persists_appended_comment(make_user, make_post):
    user = await make_user()
    post = await make_post(user.id)
    post = await posts.find_by_id(post.id)

    post.comments.append(Comment(id="a" * 24, author_id=user.id, text="new"))
    await posts.save(post)

    loaded = await posts.find_by_id(post.id)
    assert [c.id for c in loaded.comments] == ["a" * 24]


async def test_delete_many_empties_collections(make_user, make_post):
    user = await make_user()
    await make_post(user.id, comments=[(user.id, "a")])

    await posts.delete_many()
    await users.delete_many()

    assert await posts.find_one() is None
    assert await users.find_by_id(user.id) is None
