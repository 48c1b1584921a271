"""Repository queries: pagination, filtering and eager loading."""

import pytest

from forum_app.models.forum import ForumThread
from forum_app.repositories import (
    PostRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)

from .conftest import make_post, make_reply, make_thread, make_user


@pytest.mark.asyncio
async def test_thread_pagination_counts_whole_set(db):
    author = await make_user(db, "alice")
    for title in ("First", "Second", "Third"):
        await make_thread(db, author, title)

    repo = ThreadRepository(db)
    threads, total = await repo.get_all(page=1, page_size=2)
    assert [t.title for t in threads] == ["First", "Second"]
    assert total == 3

    threads, total = await repo.get_all(page=2, page_size=2)
    assert [t.title for t in threads] == ["Third"]
    assert total == 3


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("page", "page_size", "expected"),
    [
        # SQLite reads a negative OFFSET as 0
        (0, 2, ["First", "Second"]),
        (-1, 2, ["First", "Second"]),
        # LIMIT 0 is an empty page
        (1, 0, []),
        # A negative LIMIT means no limit
        (1, -1, ["First", "Second", "Third"]),
    ],
)
async def test_thread_pagination_is_not_clamped(db, page, page_size, expected):
    author = await make_user(db, "alice")
    for title in ("First", "Second", "Third"):
        await make_thread(db, author, title)

    threads, total = await ThreadRepository(db).get_all(page=page, page_size=page_size)

    assert [t.title for t in threads] == expected
    assert total == 3


@pytest.mark.asyncio
async def test_thread_title_filter(db):
    author = await make_user(db, "alice")
    await make_thread(db, author, "Test Thread")
    await make_thread(db, author, "Another Thread")

    threads, total = await ThreadRepository(db).get_all_by_title("Test", 1, 2)
    assert [t.title for t in threads] == ["Test Thread"]
    assert total == 1


@pytest.mark.asyncio
async def test_thread_title_filter_escapes_wildcards(db):
    author = await make_user(db, "alice")
    await make_thread(db, author, "100% sure")
    await make_thread(db, author, "100 percent")

    threads, total = await ThreadRepository(db).get_all_by_title("0%", 1, 10)
    assert [t.title for t in threads] == ["100% sure"]
    assert total == 1


@pytest.mark.asyncio
async def test_thread_loads_author_and_posts(db):
    author = await make_user(db, "alice")
    thread = await make_thread(db, author)
    await make_post(db, thread, author)
    await make_post(db, thread, author)
    db.expunge_all()

    loaded = await ThreadRepository(db).get_by_id(thread.id)
    assert loaded.author.username == "alice"
    assert len(loaded.posts) == 2


@pytest.mark.asyncio
async def test_add_thread_loads_relationships(db):
    author = await make_user(db, "alice")
    created = await ThreadRepository(db).add(ForumThread(title="New", author_id=author.id))

    assert created.id is not None
    assert created.created is not None
    assert created.author.username == "alice"
    assert created.posts == []


@pytest.mark.asyncio
async def test_posts_by_thread_paginated(db):
    author = await make_user(db, "alice")
    thread = await make_thread(db, author)
    other = await make_thread(db, author, "Other")
    for i in range(3):
        await make_post(db, thread, author, f"post {i}")
    await make_post(db, other, author)

    repo = PostRepository(db)
    posts, total = await repo.get_posts_by_thread_id(thread.id, 2, 2)
    assert [p.content for p in posts] == ["post 2"]
    assert total == 3

    assert len(await repo.get_posts_by_thread_id_no_pagination(thread.id)) == 3


@pytest.mark.asyncio
async def test_delete_missing_ids_is_noop(db):
    await ThreadRepository(db).delete(999)
    await PostRepository(db).delete(999)
    await ReplyRepository(db).delete(999)
    await UserRepository(db).delete(999)


@pytest.mark.asyncio
async def test_replies_by_post(db):
    author = await make_user(db, "alice")
    thread = await make_thread(db, author)
    post = await make_post(db, thread, author)
    await make_reply(db, post, author, "r1")
    await make_reply(db, post, author, "r2")

    replies = await ReplyRepository(db).get_replies_by_post_id(post.id)
    assert [r.content for r in replies] == ["r1", "r2"]
    assert replies[0].author.username == "alice"


@pytest.mark.asyncio
async def test_users_filter_by_name(db):
    await make_user(db, "alice")
    await make_user(db, "alicia")
    await make_user(db, "bob")

    users, total = await UserRepository(db).get_users_by_name("ali", 1, 1)
    assert len(users) == 1
    assert total == 2

    users, total = await UserRepository(db).get_users(1, 10)
    assert total == 3
