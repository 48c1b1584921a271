"""
Forum models for community discussions.

Includes:
- Threads (topics)
- Posts (messages in a thread)
- Replies (messages under a post)

Children reference parents by foreign key only; deleting a parent is
orchestrated by the services, not by database cascades.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum_app.core.database import Base

if TYPE_CHECKING:
    from forum_app.models.user import User

THREAD_TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 5000


class ForumThread(Base):
    """Top-level forum topic."""

    __tablename__ = "forum_threads"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(THREAD_TITLE_MAX_LENGTH))
    content: Mapped[str | None] = mapped_column(Text)
    created: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), index=True
    )

    # Relationships (one-way, no back references)
    author: Mapped["User | None"] = relationship()
    posts: Mapped[list["Post"]] = relationship(passive_deletes=True)

    def __repr__(self) -> str:
        return f"<ForumThread {self.title[:30]}>"


class Post(Base):
    """Message attached to a thread."""

    __tablename__ = "forum_posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text)
    created: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    thread_id: Mapped[int] = mapped_column(ForeignKey("forum_threads.id"), index=True)
    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), index=True
    )

    author: Mapped["User | None"] = relationship()

    def __repr__(self) -> str:
        return f"<Post {self.id} in thread {self.thread_id}>"


class Reply(Base):
    """Message attached to a post."""

    __tablename__ = "forum_replies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text)
    created: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    post_id: Mapped[int] = mapped_column(ForeignKey("forum_posts.id"), index=True)
    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), index=True
    )

    author: Mapped["User | None"] = relationship()

    def __repr__(self) -> str:
        return f"<Reply {self.id} on post {self.post_id}>"
