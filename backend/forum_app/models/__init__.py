"""
ORM models.
"""

from forum_app.models.forum import ForumThread, Post, Reply
from forum_app.models.user import Role, RoleName, User, user_roles

__all__ = [
    "ForumThread",
    "Post",
    "Reply",
    "Role",
    "RoleName",
    "User",
    "user_roles",
]
