"""
Post and Reply API Endpoints.

Nested under a thread: /threads/{thread_id}/posts[/{post_id}/replies].
A post or reply addressed through the wrong parent is reported as 404.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.api.deps import get_current_user
from forum_app.core.config import settings
from forum_app.core.database import get_db
from forum_app.core.errors import AuthorizationDenied
from forum_app.models.user import User
from forum_app.modules.forum.posts import PostService
from forum_app.schemas.forum import PostCreate, PostList, PostRead, ReplyCreate, ReplyRead

router = APIRouter()


def _posts_url(thread_id: int) -> str:
    return f"{settings.api_v1_prefix}/threads/{thread_id}/posts"


# ==================== Posts ====================


@router.get("", response_model=PostList)
async def get_posts(
    thread_id: int,
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.forum_posts_per_page, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> PostList:
    """Get posts in thread."""
    return await PostService(db).get_posts_by_thread_id(thread_id, page, page_size)


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_post(
    thread_id: int,
    request: PostCreate,
    response: Response,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> PostRead:
    """Create new post in thread."""
    post = await PostService(db).add_post(thread_id, current_user.id, request)
    response.headers["Location"] = f"{_posts_url(thread_id)}/{post.id}"
    return post


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_post(
    thread_id: int,
    post_id: int,
    request: PostCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Edit post content; author or Admin only."""
    posts = PostService(db)
    await posts.ensure_post_in_thread(thread_id, post_id)
    if not await posts.can_user_modify_post(current_user, post_id):
        raise AuthorizationDenied()

    await posts.update_post(post_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    thread_id: int,
    post_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a post and its replies."""
    posts = PostService(db)
    await posts.ensure_post_in_thread(thread_id, post_id)
    if not await posts.can_user_modify_post(current_user, post_id):
        raise AuthorizationDenied()

    await posts.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== Replies ====================


@router.get("/{post_id}/replies", response_model=list[ReplyRead])
async def get_replies(
    thread_id: int,
    post_id: int,
    db: AsyncSession = Depends(get_db),
) -> list[ReplyRead]:
    """Get replies to post."""
    posts = PostService(db)
    await posts.ensure_post_in_thread(thread_id, post_id)
    return await posts.get_replies_by_post_id(post_id)


@router.post(
    "/{post_id}/replies",
    response_model=ReplyRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    thread_id: int,
    post_id: int,
    request: ReplyCreate,
    response: Response,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> ReplyRead:
    """Reply to post."""
    posts = PostService(db)
    await posts.ensure_post_in_thread(thread_id, post_id)
    reply = await posts.add_reply(post_id, current_user.id, request)
    response.headers["Location"] = f"{_posts_url(thread_id)}/{post_id}/replies/{reply.id}"
    return reply


@router.put("/{post_id}/replies/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_reply(
    thread_id: int,
    post_id: int,
    reply_id: int,
    request: ReplyCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Edit reply content; author or Admin only."""
    posts = PostService(db)
    await posts.ensure_post_in_thread(thread_id, post_id)
    await posts.ensure_reply_in_post(post_id, reply_id)
    if not await posts.can_user_modify_reply(current_user, reply_id):
        raise AuthorizationDenied()

    await posts.update_reply(reply_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}/replies/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reply(
    thread_id: int,
    post_id: int,
    reply_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete reply; author or Admin only."""
    posts = PostService(db)
    await posts.ensure_post_in_thread(thread_id, post_id)
    await posts.ensure_reply_in_post(post_id, reply_id)
    if not await posts.can_user_modify_reply(current_user, reply_id):
        raise AuthorizationDenied()

    await posts.delete_reply(reply_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
