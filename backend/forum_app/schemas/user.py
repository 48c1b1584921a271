"""
Authentication and user schemas.
"""

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Credentials for token issuance."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegistrationRequest(BaseModel):
    """New account, or full overwrite of an existing one."""

    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str | None = None


class TokenResponse(BaseModel):
    token: str
    user_name: str


class RegistrationResponse(BaseModel):
    succeeded: bool
    message: str


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    roles: list[str] = []


class UserList(BaseModel):
    """Page of users plus the size of the whole filtered set."""

    users: list[UserRead]
    users_count: int
