"""
User and role repositories.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.models.user import Role, User
from forum_app.repositories.base import count, paginate


class UserRepository:
    """Data access for user accounts (roles load with the user)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_users(self, page: int, page_size: int) -> tuple[list[User], int]:
        query = select(User).order_by(User.id)
        result = await self.db.execute(paginate(query, page, page_size))
        return list(result.scalars().all()), await count(self.db, select(User))

    async def get_users_by_name(
        self,
        username: str,
        page: int,
        page_size: int,
    ) -> tuple[list[User], int]:
        """Get one page of users whose name contains ``username``."""
        condition = User.username.contains(username, autoescape=True)
        query = select(User).where(condition).order_by(User.id)
        result = await self.db.execute(paginate(query, page, page_size))
        total = await count(self.db, select(User).where(condition))
        return list(result.scalars().all()), total

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def add(self, user: User) -> User:
        self.db.add(user)
        await self.db.flush()
        return user

    async def update(self, user: User) -> User:
        self.db.add(user)
        await self.db.flush()
        return user

    async def delete(self, user_id: int) -> None:
        """Delete a user and their role links; missing ids are ignored."""
        user = await self.get_by_id(user_id)
        if user is not None:
            await self.db.delete(user)
            await self.db.flush()


class RoleRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_name(self, name: str) -> Role | None:
        result = await self.db.execute(select(Role).where(Role.name == name))
        return result.scalar_one_or_none()

    async def add(self, role: Role) -> Role:
        self.db.add(role)
        await self.db.flush()
        return role
