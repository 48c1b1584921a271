"""
Thread Service - thread listing, CRUD and cascading delete.
"""

from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.core.errors import NotFoundError
from forum_app.models.forum import ForumThread
from forum_app.models.user import User
from forum_app.modules.auth.identity import IdentityManager
from forum_app.modules.forum import mapper
from forum_app.modules.forum.permissions import can_modify
from forum_app.modules.forum.posts import PostService
from forum_app.modules.forum.validation import validate_thread
from forum_app.repositories import PostRepository, ThreadRepository
from forum_app.schemas.forum import ThreadCreate, ThreadList, ThreadRead

if TYPE_CHECKING:
    from loguru import Logger


class ThreadService:
    """
    Service for managing forum threads.

    Deleting a thread goes through ``PostService.delete_post`` for each of
    its posts, so replies are removed as well. All deletes share the
    caller's transaction.

    Usage:
        threads = ThreadService(db_session)
        page = await threads.get_all_threads(title="python", page=1, page_size=20)
    """

    def __init__(
        self,
        db: AsyncSession,
        identity: IdentityManager | None = None,
        post_service: PostService | None = None,
        log: "Logger | None" = None,
    ) -> None:
        self.db = db
        self.identity = identity or IdentityManager(db)
        self.post_service = post_service or PostService(db, self.identity, log)
        self.log = (log or logger).bind(component="threads")
        self.threads = ThreadRepository(db)
        self.posts = PostRepository(db)

    async def get_all_threads(
        self,
        title: str | None,
        page: int,
        page_size: int,
    ) -> ThreadList:
        """
        Get threads with pagination.

        Args:
            title: Optional substring filter on the title
            page: 1-based page number
            page_size: Threads per page

        Returns:
            The page and the count of all threads matching the filter
        """
        if title:
            threads, count = await self.threads.get_all_by_title(title, page, page_size)
        else:
            threads, count = await self.threads.get_all(page, page_size)
        return ThreadList(
            threads=[mapper.thread_to_read(t) for t in threads],
            threads_count=count,
        )

    async def get_thread_by_id(self, thread_id: int) -> ThreadRead:
        return mapper.thread_to_read(await self._get_thread(thread_id))

    async def create_thread(self, model: ThreadCreate, user_id: int) -> ThreadRead:
        thread = mapper.apply_thread(model)
        validate_thread(thread)
        thread.author_id = user_id

        created = await self.threads.add(thread)
        self.log.info(f"Thread created with ID {created.id}.")
        return mapper.thread_to_read(created)

    async def update_thread(self, thread_id: int, model: ThreadCreate) -> ThreadRead:
        """Overwrite title and content; the author is kept."""
        existing = await self._get_thread(thread_id)
        validate_thread(mapper.apply_thread(model))

        updated = await self.threads.update(mapper.apply_thread(model, existing))
        self.log.info(f"Thread updated with ID {thread_id}.")
        return mapper.thread_to_read(updated)

    async def delete_thread(self, thread_id: int) -> None:
        """Delete a thread after deleting its posts and their replies."""
        await self._get_thread(thread_id)

        posts = await self.posts.get_posts_by_thread_id_no_pagination(thread_id)
        for post in posts:
            await self.post_service.delete_post(post.id)

        await self.threads.delete(thread_id)
        self.log.info(f"Thread deleted with ID {thread_id}.")

    async def can_user_modify_thread(self, user: User | None, thread_id: int) -> bool:
        thread = await self._get_thread(thread_id)
        return await can_modify(self.identity, user, thread.author_id)

    async def _get_thread(self, thread_id: int) -> ForumThread:
        thread = await self.threads.get_by_id(thread_id)
        if thread is None:
            self.log.warning(f"Thread with ID {thread_id} not found.")
            raise NotFoundError(f"Thread with ID {thread_id} not found.")
        return thread
