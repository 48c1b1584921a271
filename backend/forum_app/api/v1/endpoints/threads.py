"""
Thread API Endpoints.

Reads are public; writes require a bearer token and ownership
(or the Admin role).
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from forum_app.api.deps import get_current_user
from forum_app.core.config import settings
from forum_app.core.database import get_db
from forum_app.core.errors import AuthorizationDenied
from forum_app.models.user import User
from forum_app.modules.forum.threads import ThreadService
from forum_app.schemas.forum import ThreadCreate, ThreadList, ThreadRead

router = APIRouter()


@router.get("", response_model=ThreadList)
async def get_threads(
    title: str | None = Query(None, description="Title substring filter"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.forum_threads_per_page, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> ThreadList:
    """Get threads with pagination and the total matching count."""
    return await ThreadService(db).get_all_threads(title, page, page_size)


@router.get("/{thread_id}", response_model=ThreadRead)
async def get_thread(
    thread_id: int,
    db: AsyncSession = Depends(get_db),
) -> ThreadRead:
    """Get thread by ID."""
    return await ThreadService(db).get_thread_by_id(thread_id)


@router.post("", response_model=ThreadRead, status_code=status.HTTP_201_CREATED)
async def create_thread(
    request: ThreadCreate,
    response: Response,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> ThreadRead:
    """Create new thread authored by the caller."""
    thread = await ThreadService(db).create_thread(request, current_user.id)
    response.headers["Location"] = f"{settings.api_v1_prefix}/threads/{thread.id}"
    return thread


@router.put("/{thread_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_thread(
    thread_id: int,
    request: ThreadCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Edit thread title and content; author or Admin only."""
    threads = ThreadService(db)
    if not await threads.can_user_modify_thread(current_user, thread_id):
        raise AuthorizationDenied()

    await threads.update_thread(thread_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{thread_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_thread(
    thread_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a thread with all of its posts and replies."""
    threads = ThreadService(db)
    if not await threads.can_user_modify_thread(current_user, thread_id):
        raise AuthorizationDenied()

    await threads.delete_thread(thread_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
