"""
Startup seeding of roles and an optional bootstrap Admin account.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.core.config import settings
from forum_app.models.user import RoleName, User
from forum_app.modules.auth.identity import IdentityManager


async def seed_roles(db: AsyncSession) -> None:
    """Make sure every known role exists."""
    identity = IdentityManager(db)
    for role in RoleName:
        if not await identity.role_exists(role):
            await identity.create_role(role)
            logger.info(f"Created role '{role.value}'")


async def seed_admin(db: AsyncSession) -> None:
    """Create the configured Admin account if it is missing."""
    if not settings.admin_username or not settings.admin_password:
        return

    identity = IdentityManager(db)
    if await identity.find_by_username(settings.admin_username):
        return

    admin = User(username=settings.admin_username, email=settings.admin_email, roles=[])
    result = await identity.create_user(admin, settings.admin_password)
    if not result.succeeded:
        logger.error(f"Admin account not created: {result.description}")
        return

    await identity.add_to_role(admin, RoleName.ADMIN)
    logger.info(f"Admin account '{admin.username}' created")
