"""
Forum request/response schemas.

Length and emptiness rules are enforced by the services, not here, so
that a violation surfaces as a domain validation error with a message
naming the field.
"""

from datetime import datetime

from pydantic import BaseModel


# ==================== Requests ====================


class ThreadCreate(BaseModel):
    """Create or overwrite a thread."""

    title: str | None = None
    content: str | None = None


class PostCreate(BaseModel):
    """Create or overwrite a post."""

    content: str | None = None


class ReplyCreate(BaseModel):
    """Create or overwrite a reply."""

    content: str | None = None


# ==================== Responses ====================


class ThreadRead(BaseModel):
    id: int
    title: str
    content: str | None = None
    created: datetime
    user_name: str | None = None
    post_count: int = 0


class PostRead(BaseModel):
    id: int
    content: str
    created: datetime
    user_name: str | None = None
    thread_id: int


class ReplyRead(BaseModel):
    id: int
    content: str
    created: datetime
    user_name: str | None = None
    post_id: int


class ThreadList(BaseModel):
    """Page of threads plus the size of the whole filtered set."""

    threads: list[ThreadRead]
    threads_count: int


class PostList(BaseModel):
    """Page of posts plus the number of posts in the thread."""

    posts: list[PostRead]
    posts_count: int
