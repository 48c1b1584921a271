"""
Repositories - data access over an ``AsyncSession``.

Repositories flush but never commit; the caller owns the transaction.
"""

from forum_app.repositories.post import PostRepository, ReplyRepository
from forum_app.repositories.thread import ThreadRepository
from forum_app.repositories.user import RoleRepository, UserRepository

__all__ = [
    "PostRepository",
    "ReplyRepository",
    "RoleRepository",
    "ThreadRepository",
    "UserRepository",
]
