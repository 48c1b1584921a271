"""
API Version 1 Router.

Combines all API endpoints under /api/v1 prefix.
"""

from fastapi import APIRouter

from forum_app.api.v1.endpoints import auth, posts, threads, users

router = APIRouter()

# Include endpoint routers
router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(threads.router, prefix="/threads", tags=["Threads"])
router.include_router(posts.router, prefix="/threads/{thread_id}/posts", tags=["Posts"])
router.include_router(users.router, prefix="/users", tags=["Users"])
