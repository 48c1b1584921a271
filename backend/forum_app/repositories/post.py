"""
Post and reply repositories.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from forum_app.models.forum import Post, Reply
from forum_app.repositories.base import count, paginate


class PostRepository:
    """Data access for posts, with the author eager-loaded."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _by_thread(self, thread_id: int):
        return (
            select(Post)
            .options(selectinload(Post.author))
            .where(Post.thread_id == thread_id)
            .order_by(Post.created, Post.id)
        )

    async def get_posts_by_thread_id(
        self,
        thread_id: int,
        page: int,
        page_size: int,
    ) -> tuple[list[Post], int]:
        """Get one page of a thread's posts plus the thread's post count."""
        result = await self.db.execute(
            paginate(self._by_thread(thread_id), page, page_size)
        )
        total = await count(self.db, select(Post).where(Post.thread_id == thread_id))
        return list(result.scalars().all()), total

    async def get_posts_by_thread_id_no_pagination(self, thread_id: int) -> list[Post]:
        result = await self.db.execute(self._by_thread(thread_id))
        return list(result.scalars().all())

    async def get_by_id(self, post_id: int) -> Post | None:
        result = await self.db.execute(
            select(Post).options(selectinload(Post.author)).where(Post.id == post_id)
        )
        return result.scalar_one_or_none()

    async def add(self, post: Post) -> Post:
        self.db.add(post)
        await self.db.flush()
        await self.db.refresh(post, attribute_names=["author"])
        return post

    async def update(self, post: Post) -> Post:
        self.db.add(post)
        await self.db.flush()
        return post

    async def delete(self, post_id: int) -> None:
        """Delete a post row; missing ids are ignored."""
        await self.db.execute(delete(Post).where(Post.id == post_id))


class ReplyRepository:
    """Data access for replies, with the author eager-loaded."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_replies_by_post_id(self, post_id: int) -> list[Reply]:
        result = await self.db.execute(
            select(Reply)
            .options(selectinload(Reply.author))
            .where(Reply.post_id == post_id)
            .order_by(Reply.created, Reply.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, reply_id: int) -> Reply | None:
        result = await self.db.execute(
            select(Reply).options(selectinload(Reply.author)).where(Reply.id == reply_id)
        )
        return result.scalar_one_or_none()

    async def add(self, reply: Reply) -> Reply:
        self.db.add(reply)
        await self.db.flush()
        await self.db.refresh(reply, attribute_names=["author"])
        return reply

    async def update(self, reply: Reply) -> Reply:
        self.db.add(reply)
        await self.db.flush()
        return reply

    async def delete(self, reply_id: int) -> None:
        """Delete a reply row; missing ids are ignored."""
        await self.db.execute(delete(Reply).where(Reply.id == reply_id))
