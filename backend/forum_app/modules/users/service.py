"""
User Service - account administration.
"""

from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.core.errors import InternalError, NotFoundError, ValidationError
from forum_app.modules.auth.identity import IdentityManager
from forum_app.modules.forum import mapper
from forum_app.repositories import UserRepository
from forum_app.schemas.user import RegistrationRequest, UserList, UserRead

if TYPE_CHECKING:
    from loguru import Logger


class UserService:
    def __init__(
        self,
        db: AsyncSession,
        identity: IdentityManager | None = None,
        log: "Logger | None" = None,
    ) -> None:
        self.db = db
        self.identity = identity or IdentityManager(db)
        self.log = (log or logger).bind(component="users")
        self.users = UserRepository(db)

    async def get_all_users(
        self,
        user_name: str | None,
        page: int,
        page_size: int,
    ) -> UserList:
        if user_name:
            users, count = await self.users.get_users_by_name(user_name, page, page_size)
        else:
            users, count = await self.users.get_users(page, page_size)
        return UserList(users=[mapper.user_to_read(u) for u in users], users_count=count)

    async def get_user_by_id(self, user_id: int) -> UserRead | None:
        user = await self.users.get_by_id(user_id)
        return mapper.user_to_read(user) if user is not None else None

    async def update_user(self, user_id: int, model: RegistrationRequest) -> UserRead:
        """
        Overwrite username and email; reset the password when one is given.

        Raises:
            NotFoundError: Unknown user id
            ValidationError: Invalid/taken username or rejected password
            InternalError: Password reset token was not accepted
        """
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found.")

        if model.username != user.username:
            errors = self.identity.validate_username(model.username)
            if errors:
                raise ValidationError(", ".join(errors))
            if await self.identity.find_by_username(model.username):
                raise ValidationError(f"Username '{model.username}' is already taken.")

        if model.password:
            errors = self.identity.validate_password(model.password)
            if errors:
                raise ValidationError(f"Failed to update password: {', '.join(errors)}")

            token = await self.identity.generate_password_reset_token(user)
            result = await self.identity.reset_password(user, token, model.password)
            if not result.succeeded:
                # A token issued a moment ago was rejected
                self.log.error(f"Password reset for user ID {user_id} failed: {result.description}")
                raise InternalError(f"Failed to update password: {result.description}")

        user.username = model.username
        user.email = model.email
        updated = await self.users.update(user)
        self.log.info(f"User with ID {user_id} updated.")
        return mapper.user_to_read(updated)

    async def delete_user(self, user_id: int) -> None:
        if await self.users.get_by_id(user_id) is None:
            raise NotFoundError(f"User with ID {user_id} not found.")
        await self.users.delete(user_id)
        self.log.info(f"User with ID {user_id} deleted.")
