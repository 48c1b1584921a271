"""
Shared API dependencies: current user resolution and role guards.
"""

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.core.database import get_db
from forum_app.core.security import decode_access_token
from forum_app.models.user import RoleName, User
from forum_app.modules.auth.identity import IdentityManager

bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHORIZED_DETAIL = "authorize please"


def _unauthorized(detail: str = UNAUTHORIZED_DETAIL) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the bearer token to a stored user, or respond 401."""
    if credentials is None:
        raise _unauthorized()

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = int(payload["nameidentifier"])
    except (jwt.InvalidTokenError, KeyError, ValueError) as e:
        logger.debug(f"Rejected bearer token: {e}")
        raise _unauthorized()

    user = await IdentityManager(db).find_by_id(user_id)
    if user is None:
        raise _unauthorized("User not found.")
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Allow only users holding the Admin role."""
    if RoleName.ADMIN.value not in user.role_names:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user
