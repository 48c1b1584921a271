"""
Entity <-> API model conversion.

Navigation properties are flattened (author -> ``user_name``) and never
copied back onto entities.
"""

from forum_app.models.forum import ForumThread, Post, Reply
from forum_app.models.user import User
from forum_app.schemas.forum import (
    PostCreate,
    PostRead,
    ReplyCreate,
    ReplyRead,
    ThreadCreate,
    ThreadRead,
)
from forum_app.schemas.user import UserRead


def _user_name(author: User | None) -> str | None:
    return author.username if author is not None else None


def thread_to_read(thread: ForumThread) -> ThreadRead:
    return ThreadRead(
        id=thread.id,
        title=thread.title,
        content=thread.content,
        created=thread.created,
        user_name=_user_name(thread.author),
        post_count=len(thread.posts),
    )


def post_to_read(post: Post) -> PostRead:
    return PostRead(
        id=post.id,
        content=post.content,
        created=post.created,
        user_name=_user_name(post.author),
        thread_id=post.thread_id,
    )


def reply_to_read(reply: Reply) -> ReplyRead:
    return ReplyRead(
        id=reply.id,
        content=reply.content,
        created=reply.created,
        user_name=_user_name(reply.author),
        post_id=reply.post_id,
    )


def user_to_read(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        username=user.username,
        email=user.email,
        roles=user.role_names,
    )


def apply_thread(model: ThreadCreate, thread: ForumThread | None = None) -> ForumThread:
    """Copy create/update input onto a (new or existing) thread entity."""
    thread = thread if thread is not None else ForumThread()
    thread.title = model.title
    thread.content = model.content
    return thread


def apply_post(model: PostCreate, post: Post | None = None) -> Post:
    post = post if post is not None else Post()
    post.content = model.content
    return post


def apply_reply(model: ReplyCreate, reply: Reply | None = None) -> Reply:
    reply = reply if reply is not None else Reply()
    reply.content = model.content
    return reply
