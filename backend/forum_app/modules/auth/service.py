"""
Auth Service - registration and login.

Results are ``(status, message, ...)`` tuples rather than exceptions:
status 1 means success, 0 means a rejected request with a reason.
"""

from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.core.security import create_access_token
from forum_app.models.user import RoleName, User
from forum_app.modules.auth.identity import IdentityManager
from forum_app.schemas.user import LoginRequest, RegistrationRequest

if TYPE_CHECKING:
    from loguru import Logger

STATUS_FAILED = 0
STATUS_OK = 1


class AuthService:
    """
    Service handling account registration and token issuance.

    Usage:
        auth = AuthService(db_session)
        status, token, username = await auth.login(LoginRequest(...))
    """

    def __init__(
        self,
        db: AsyncSession,
        identity: IdentityManager | None = None,
        log: "Logger | None" = None,
    ) -> None:
        self.db = db
        self.identity = identity or IdentityManager(db)
        self.log = (log or logger).bind(component="auth")

    async def register(
        self,
        model: RegistrationRequest | None,
        role: RoleName | str = RoleName.USER,
    ) -> tuple[int, str]:
        """
        Create an account and assign it a role.

        The role is created first if it does not exist yet.
        """
        if model is None:
            self.log.warning("User registration attempted with empty model.")
            return STATUS_FAILED, "User is empty"

        if await self.identity.find_by_username(model.username):
            self.log.warning(
                f"User registration failed: User '{model.username}' already exists."
            )
            return STATUS_FAILED, "User with this name already exists"

        user = User(username=model.username, email=model.email, roles=[])
        result = await self.identity.create_user(user, model.password)
        if not result.succeeded:
            self.log.error(f"User registration failed: {result.description}")
            return STATUS_FAILED, f"User registration failed: {result.description}"

        if not await self.identity.role_exists(role):
            await self.identity.create_role(role)
        await self.identity.add_to_role(user, role)

        role_name = role.value if isinstance(role, RoleName) else role
        self.log.info(
            f"User '{model.username}' created successfully and assigned to role '{role_name}'."
        )
        return STATUS_OK, "User created successfully!"

    async def login(self, model: LoginRequest | None) -> tuple[int, str, str | None]:
        """
        Verify credentials and issue a bearer token.

        Returns:
            ``(1, token, username)`` on success,
            ``(0, reason, None)`` otherwise
        """
        if model is None:
            self.log.warning("Login attempted with empty model.")
            return STATUS_FAILED, "User is empty", None

        user = await self.identity.find_by_username(model.username)
        if user is None:
            self.log.warning(f"Login failed: No such username '{model.username}'.")
            return STATUS_FAILED, "No such username", None

        if not await self.identity.check_password(user, model.password):
            self.log.warning(f"Login failed for user '{model.username}': Invalid password.")
            return STATUS_FAILED, "Invalid password", None

        claims = {
            "sub": str(user.id),
            "name": user.username,
            "nameidentifier": str(user.id),
            "email": user.email,
            "role": await self.identity.get_roles(user),
        }
        token = create_access_token(claims)

        self.log.info(f"User '{model.username}' logged in successfully.")
        return STATUS_OK, token, user.username
