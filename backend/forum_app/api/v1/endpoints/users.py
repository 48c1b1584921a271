"""
User API Endpoints.

Listing, editing and deleting accounts is reserved to Admins.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.api.deps import get_current_user, require_admin
from forum_app.core.config import settings
from forum_app.core.database import get_db
from forum_app.models.user import User
from forum_app.modules.users.service import UserService
from forum_app.schemas.user import RegistrationRequest, UserList, UserRead

router = APIRouter()


@router.get("", response_model=UserList)
async def get_users(
    user_name: str | None = Query(None, description="Username substring filter"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.users_per_page, ge=1, le=100),
    _admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> UserList:
    """List users, optionally filtered by name; Admin only."""
    users = await UserService(db).get_all_users(user_name, page, page_size)
    if users.users_count == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No users found.")
    return users


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int,
    _user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UserRead:
    """Get user by ID."""
    user = await UserService(db).get_user_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {user_id} not found.",
        )
    return user


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    request: RegistrationRequest,
    _admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> UserRead:
    """Overwrite username/email and optionally reset the password."""
    return await UserService(db).update_user(user_id, request)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    _admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete user account; Admin only."""
    await UserService(db).delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
