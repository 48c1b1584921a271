"""
Thread repository.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from forum_app.models.forum import ForumThread
from forum_app.repositories.base import count, paginate


class ThreadRepository:
    """Data access for forum threads, with author and posts eager-loaded."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _base_query(self):
        return (
            select(ForumThread)
            .options(selectinload(ForumThread.author), selectinload(ForumThread.posts))
            .order_by(ForumThread.id)
        )

    async def get_all(
        self,
        page: int,
        page_size: int,
    ) -> tuple[list[ForumThread], int]:
        """Get one page of all threads plus the total thread count."""
        query = self._base_query()
        result = await self.db.execute(paginate(query, page, page_size))
        return list(result.scalars().all()), await count(self.db, select(ForumThread))

    async def get_all_by_title(
        self,
        title: str,
        page: int,
        page_size: int,
    ) -> tuple[list[ForumThread], int]:
        """Get one page of threads whose title contains ``title``."""
        condition = ForumThread.title.contains(title, autoescape=True)
        query = self._base_query().where(condition)
        result = await self.db.execute(paginate(query, page, page_size))
        total = await count(self.db, select(ForumThread).where(condition))
        return list(result.scalars().all()), total

    async def get_by_id(self, thread_id: int) -> ForumThread | None:
        result = await self.db.execute(
            self._base_query().where(ForumThread.id == thread_id)
        )
        return result.scalar_one_or_none()

    async def add(self, thread: ForumThread) -> ForumThread:
        self.db.add(thread)
        await self.db.flush()
        await self.db.refresh(thread, attribute_names=["author", "posts"])
        return thread

    async def update(self, thread: ForumThread) -> ForumThread:
        self.db.add(thread)
        await self.db.flush()
        return thread

    async def delete(self, thread_id: int) -> None:
        """Delete a thread row; missing ids are ignored."""
        await self.db.execute(delete(ForumThread).where(ForumThread.id == thread_id))
