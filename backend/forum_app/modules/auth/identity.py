"""
Identity Manager - user accounts, passwords and roles.

Plays the role of the identity provider for the auth and user
services: account creation with username/password policy, password
checks, role membership and password reset tokens.
"""

import hashlib
import string
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.core.config import settings
from forum_app.core.security import PasswordHasher
from forum_app.models.user import Role, RoleName, User
from forum_app.repositories.user import RoleRepository, UserRepository

ALLOWED_USERNAME_CHARACTERS = string.ascii_letters + string.digits + "-._@+"
RESET_TOKEN_PURPOSE = "reset_password"


@dataclass
class IdentityResult:
    """Outcome of an identity operation with human-readable errors."""

    succeeded: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def success(cls) -> "IdentityResult":
        return cls(succeeded=True)

    @classmethod
    def failed(cls, *errors: str) -> "IdentityResult":
        return cls(succeeded=False, errors=list(errors))

    @property
    def description(self) -> str:
        return ", ".join(self.errors)


def _role_name(role: RoleName | str) -> str:
    return role.value if isinstance(role, RoleName) else role


class IdentityManager:
    """
    Account and role operations backed by the users/roles tables.

    Usage:
        identity = IdentityManager(db_session)
        user = await identity.find_by_username("alice")
        if user and await identity.check_password(user, "secret"):
            roles = await identity.get_roles(user)
    """

    def __init__(self, db: AsyncSession, hasher: PasswordHasher | None = None) -> None:
        self.db = db
        self.hasher = hasher or PasswordHasher()
        self.users = UserRepository(db)
        self.roles = RoleRepository(db)

    # ==================== Users ====================

    async def find_by_username(self, username: str | None) -> User | None:
        if not username:
            return None
        return await self.users.get_by_username(username)

    async def find_by_id(self, user_id: int) -> User | None:
        return await self.users.get_by_id(user_id)

    async def create_user(self, user: User, password: str | None) -> IdentityResult:
        """
        Validate and persist a new account.

        Args:
            user: Unsaved user with username and email set
            password: Plain-text password checked against the policy

        Returns:
            Result listing every violated rule on failure
        """
        errors = self.validate_username(user.username)
        if not errors and await self.find_by_username(user.username):
            errors.append(f"Username '{user.username}' is already taken.")
        errors.extend(self.validate_password(password))
        if errors:
            return IdentityResult.failed(*errors)

        user.hashed_password = self.hasher.generate(password)
        await self.users.add(user)
        return IdentityResult.success()

    async def check_password(self, user: User, password: str | None) -> bool:
        if not password:
            return False
        return self.hasher.verify_password(password, user.hashed_password)

    def validate_username(self, username: str | None) -> list[str]:
        if not username or any(c not in ALLOWED_USERNAME_CHARACTERS for c in username):
            return [f"Username '{username or ''}' is invalid, can only contain letters or digits."]
        return []

    def validate_password(self, password: str | None) -> list[str]:
        """Check a password against the configured policy."""
        password = password or ""
        errors = []
        if len(password) < settings.password_required_length:
            errors.append(
                f"Passwords must be at least {settings.password_required_length} characters."
            )
        if settings.password_require_non_alphanumeric and password.isalnum():
            errors.append("Passwords must have at least one non alphanumeric character.")
        if settings.password_require_digit and not any(c.isdigit() for c in password):
            errors.append("Passwords must have at least one digit ('0'-'9').")
        if settings.password_require_lowercase and not any(c.islower() for c in password):
            errors.append("Passwords must have at least one lowercase ('a'-'z').")
        if settings.password_require_uppercase and not any(c.isupper() for c in password):
            errors.append("Passwords must have at least one uppercase ('A'-'Z').")
        return errors

    # ==================== Roles ====================

    async def get_roles(self, user: User) -> list[str]:
        return user.role_names

    async def is_in_role(self, user: User, role: RoleName | str) -> bool:
        return _role_name(role) in user.role_names

    async def role_exists(self, role: RoleName | str) -> bool:
        return await self.roles.get_by_name(_role_name(role)) is not None

    async def create_role(self, role: RoleName | str) -> IdentityResult:
        name = _role_name(role)
        if await self.role_exists(name):
            return IdentityResult.failed(f"Role name '{name}' is already taken.")
        await self.roles.add(Role(name=name))
        return IdentityResult.success()

    async def add_to_role(self, user: User, role: RoleName | str) -> IdentityResult:
        name = _role_name(role)
        if await self.is_in_role(user, name):
            return IdentityResult.failed(f"User already in role '{name}'.")
        existing = await self.roles.get_by_name(name)
        if existing is None:
            return IdentityResult.failed(f"Role {name} does not exist.")
        user.roles.append(existing)
        await self.users.update(user)
        return IdentityResult.success()

    # ==================== Password reset ====================

    @staticmethod
    def _password_stamp(user: User) -> str:
        return hashlib.sha256(user.hashed_password.encode("utf-8")).hexdigest()[:16]

    async def generate_password_reset_token(self, user: User) -> str:
        """Short-lived token, invalidated as soon as the password changes."""
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.password_reset_token_expire_minutes
        )
        payload = {
            "sub": str(user.id),
            "purpose": RESET_TOKEN_PURPOSE,
            "stamp": self._password_stamp(user),
            "exp": expire,
        }
        return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    async def reset_password(
        self,
        user: User,
        token: str,
        new_password: str | None,
    ) -> IdentityResult:
        try:
            payload = jwt.decode(
                token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
            )
        except jwt.InvalidTokenError:
            return IdentityResult.failed("Invalid token.")

        if (
            payload.get("purpose") != RESET_TOKEN_PURPOSE
            or payload.get("sub") != str(user.id)
            or payload.get("stamp") != self._password_stamp(user)
        ):
            return IdentityResult.failed("Invalid token.")

        errors = self.validate_password(new_password)
        if errors:
            return IdentityResult.failed(*errors)

        user.hashed_password = self.hasher.generate(new_password)
        await self.users.update(user)
        return IdentityResult.success()
