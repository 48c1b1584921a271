"""
API-facing data transfer objects.
"""

from forum_app.schemas.forum import (
    PostCreate,
    PostList,
    PostRead,
    ReplyCreate,
    ReplyRead,
    ThreadCreate,
    ThreadList,
    ThreadRead,
)
from forum_app.schemas.user import (
    LoginRequest,
    RegistrationRequest,
    RegistrationResponse,
    TokenResponse,
    UserList,
    UserRead,
)

__all__ = [
    "LoginRequest",
    "PostCreate",
    "PostList",
    "PostRead",
    "RegistrationRequest",
    "RegistrationResponse",
    "ReplyCreate",
    "ReplyRead",
    "ThreadCreate",
    "ThreadList",
    "ThreadRead",
    "TokenResponse",
    "UserList",
    "UserRead",
]
