"""
Ownership rule shared by threads, posts and replies.
"""

from forum_app.models.user import RoleName, User
from forum_app.modules.auth.identity import IdentityManager


async def can_modify(identity: IdentityManager, user: User | None, author_id: int | None) -> bool:
    """
    Admins may modify anything; other users only what they authored.

    Raises:
        ValueError: If no user is given
    """
    if user is None:
        raise ValueError("user must not be None")
    if await identity.is_in_role(user, RoleName.ADMIN):
        return True
    return author_id is not None and author_id == user.id
