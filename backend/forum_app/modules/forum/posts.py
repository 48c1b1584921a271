"""
Post Service - posts in a thread and replies to posts.
"""

from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.core.errors import NotFoundError
from forum_app.models.user import User
from forum_app.modules.auth.identity import IdentityManager
from forum_app.modules.forum import mapper
from forum_app.modules.forum.permissions import can_modify
from forum_app.modules.forum.validation import validate_post, validate_reply
from forum_app.repositories import PostRepository, ReplyRepository, ThreadRepository
from forum_app.schemas.forum import PostCreate, PostList, PostRead, ReplyCreate, ReplyRead

if TYPE_CHECKING:
    from loguru import Logger


class PostService:
    """
    Service for managing posts and their replies.

    Usage:
        posts = PostService(db_session)
        page = await posts.get_posts_by_thread_id(thread_id, page=1, page_size=10)
    """

    def __init__(
        self,
        db: AsyncSession,
        identity: IdentityManager | None = None,
        log: "Logger | None" = None,
    ) -> None:
        self.db = db
        self.identity = identity or IdentityManager(db)
        self.log = (log or logger).bind(component="posts")
        self.threads = ThreadRepository(db)
        self.posts = PostRepository(db)
        self.replies = ReplyRepository(db)

    # ==================== Posts ====================

    async def get_posts_by_thread_id(
        self,
        thread_id: int,
        page: int,
        page_size: int,
    ) -> PostList:
        """
        Get one page of a thread's posts.

        Raises:
            NotFoundError: If the page holds no posts
        """
        self.log.info(f"Getting posts for thread ID: {thread_id}")
        posts, posts_count = await self.posts.get_posts_by_thread_id(
            thread_id, page, page_size
        )
        if not posts:
            self.log.warning(f"No posts found for thread ID: {thread_id}")
            raise NotFoundError(f"Posts with this thread ID {thread_id} not found.")

        self.log.info(f"Retrieved {len(posts)} posts for thread ID: {thread_id}")
        return PostList(posts=[mapper.post_to_read(p) for p in posts], posts_count=posts_count)

    async def add_post(self, thread_id: int, user_id: int, model: PostCreate) -> PostRead:
        self.log.info(f"Adding new post to thread ID: {thread_id} by user ID: {user_id}")
        post = mapper.apply_post(model)
        validate_post(post)

        if await self.threads.get_by_id(thread_id) is None:
            self.log.warning(f"Thread with ID {thread_id} not found.")
            raise NotFoundError(f"Thread with ID {thread_id} not found.")

        post.thread_id = thread_id
        post.author_id = user_id
        created = await self.posts.add(post)
        self.log.info(f"Post created with ID: {created.id}")
        return mapper.post_to_read(created)

    async def update_post(self, post_id: int, model: PostCreate) -> PostRead:
        """Overwrite a post's content; author and thread are kept."""
        self.log.info(f"Updating post with ID: {post_id}")
        existing = await self._get_post(post_id)
        validate_post(mapper.apply_post(model))

        updated = await self.posts.update(mapper.apply_post(model, existing))
        self.log.info(f"Post with ID: {post_id} updated.")
        return mapper.post_to_read(updated)

    async def delete_post(self, post_id: int) -> None:
        """Delete a post after deleting every reply under it."""
        await self._get_post(post_id)

        replies = await self.replies.get_replies_by_post_id(post_id)
        for reply in replies:
            await self.replies.delete(reply.id)

        await self.posts.delete(post_id)
        self.log.info(f"Post deleted with ID {post_id}.")

    async def can_user_modify_post(self, user: User | None, post_id: int) -> bool:
        post = await self._get_post(post_id)
        return await can_modify(self.identity, user, post.author_id)

    async def ensure_post_in_thread(self, thread_id: int, post_id: int) -> None:
        """
        Check that a post belongs to the thread named in the route.

        Raises:
            NotFoundError: If the post is missing or lives in another thread
        """
        post = await self._get_post(post_id)
        if post.thread_id != thread_id:
            self.log.warning(f"Post with ID {post_id} is not in thread ID {thread_id}.")
            raise NotFoundError(f"Post with ID {post_id} not found in thread {thread_id}.")

    async def _get_post(self, post_id: int):
        post = await self.posts.get_by_id(post_id)
        if post is None:
            self.log.warning(f"Post with ID {post_id} not found.")
            raise NotFoundError(f"Post with ID {post_id} not found.")
        return post

    # ==================== Replies ====================

    async def get_replies_by_post_id(self, post_id: int) -> list[ReplyRead]:
        replies = await self.replies.get_replies_by_post_id(post_id)
        if not replies:
            self.log.warning(f"Replies with this post ID {post_id} not found.")
        else:
            self.log.info(f"Retrieved {len(replies)} replies for post ID: {post_id}")
        return [mapper.reply_to_read(r) for r in replies]

    async def add_reply(self, post_id: int, user_id: int, model: ReplyCreate) -> ReplyRead:
        reply = mapper.apply_reply(model)
        validate_reply(reply)
        await self._get_post(post_id)

        reply.post_id = post_id
        reply.author_id = user_id
        created = await self.replies.add(reply)
        self.log.info(f"Reply created for post ID: {post_id} by user ID: {user_id}")
        return mapper.reply_to_read(created)

    async def update_reply(self, reply_id: int, model: ReplyCreate) -> ReplyRead:
        existing = await self._get_reply(reply_id)
        validate_reply(mapper.apply_reply(model))

        updated = await self.replies.update(mapper.apply_reply(model, existing))
        self.log.info(f"Reply with ID: {reply_id} updated.")
        return mapper.reply_to_read(updated)

    async def delete_reply(self, reply_id: int) -> None:
        await self._get_reply(reply_id)
        await self.replies.delete(reply_id)
        self.log.info(f"Reply with ID: {reply_id} deleted.")

    async def can_user_modify_reply(self, user: User | None, reply_id: int) -> bool:
        reply = await self._get_reply(reply_id)
        return await can_modify(self.identity, user, reply.author_id)

    async def ensure_reply_in_post(self, post_id: int, reply_id: int) -> None:
        reply = await self._get_reply(reply_id)
        if reply.post_id != post_id:
            self.log.warning(f"Reply with ID {reply_id} is not under post ID {post_id}.")
            raise NotFoundError(f"Reply with ID {reply_id} not found under post {post_id}.")

    async def _get_reply(self, reply_id: int):
        reply = await self.replies.get_by_id(reply_id)
        if reply is None:
            self.log.warning(f"Reply with ID: {reply_id} not found.")
            raise NotFoundError(f"Reply with ID {reply_id} not found.")
        return reply
