"""
Content rules checked before any forum write.
"""

from forum_app.core.errors import ValidationError
from forum_app.models.forum import (
    CONTENT_MAX_LENGTH,
    THREAD_TITLE_MAX_LENGTH,
    ForumThread,
    Post,
    Reply,
)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_thread(thread: ForumThread | None) -> None:
    """Title is required (max 100); content is optional (max 5000)."""
    if thread is None or _is_blank(thread.title):
        raise ValidationError("Thread title cannot be empty.")
    if len(thread.title) > THREAD_TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Thread title cannot exceed {THREAD_TITLE_MAX_LENGTH} characters."
        )
    if thread.content is not None and len(thread.content) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Thread content cannot exceed {CONTENT_MAX_LENGTH} characters."
        )


def validate_post(post: Post | None) -> None:
    if post is None or _is_blank(post.content):
        raise ValidationError("Post content cannot be empty.")
    if len(post.content) > CONTENT_MAX_LENGTH:
        raise ValidationError(f"Post content cannot exceed {CONTENT_MAX_LENGTH} characters.")


def validate_reply(reply: Reply | None) -> None:
    if reply is None or _is_blank(reply.content):
        raise ValidationError("Reply content cannot be empty.")
    if len(reply.content) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Reply content cannot exceed {CONTENT_MAX_LENGTH} characters."
        )
