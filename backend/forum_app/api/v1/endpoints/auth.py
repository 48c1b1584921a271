"""
Authentication API Endpoints.

Login and registration.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.core.database import get_db
from forum_app.models.user import RoleName
from forum_app.modules.auth.service import STATUS_FAILED, AuthService
from forum_app.schemas.user import (
    LoginRequest,
    RegistrationRequest,
    RegistrationResponse,
    TokenResponse,
)

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    """Exchange username and password for a bearer token."""
    auth = AuthService(db)
    result, token, user_name = await auth.login(request)

    if result == STATUS_FAILED:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=token)

    return TokenResponse(token=token, user_name=user_name)


@router.post(
    "/registration",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegistrationRequest,
    db: AsyncSession = Depends(get_db),
) -> RegistrationResponse:
    """Create a regular user account."""
    auth = AuthService(db)
    result, message = await auth.register(request, RoleName.USER)

    if result == STATUS_FAILED:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)

    return RegistrationResponse(succeeded=True, message="User registered successfully")
