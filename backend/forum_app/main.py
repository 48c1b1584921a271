"""
Forum Backend Application.

FastAPI application serving threads, posts, replies, authentication
and user administration.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from loguru import logger

from forum_app.api.v1 import router as api_v1_router
from forum_app.core.config import settings
from forum_app.core.database import async_session_maker, close_db, init_db
from forum_app.core.errors import ErrorKind, ForumError
from forum_app.core.logging import setup_logging
from forum_app.modules.auth.seed import seed_admin, seed_roles

ERROR_STATUS = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    setup_logging()
    logger.info("Starting Forum Backend...")

    await init_db()
    async with async_session_maker() as session:
        await seed_roles(session)
        await seed_admin(session)
        await session.commit()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down Forum Backend...")
    await close_db()
    logger.info("Shutdown complete")


async def forum_error_handler(request: Request, exc: ForumError) -> ORJSONResponse:
    """Translate domain errors into HTTP responses."""
    code = ERROR_STATUS[exc.kind]
    if exc.kind is ErrorKind.FORBIDDEN:
        return ORJSONResponse(status_code=code, content={"detail": "Forbidden"})
    if exc.kind is ErrorKind.INTERNAL:
        logger.opt(exception=exc).error(f"{request.method} {request.url.path} failed")
        return ORJSONResponse(status_code=code, content={"detail": "Internal server error"})
    return ORJSONResponse(status_code=code, content={"detail": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Log unexpected failures; the client only gets a generic message."""
    logger.opt(exception=exc).error(f"{request.method} {request.url.path} failed")
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
        Forum Backend Platform

        ## Features

        - **Threads**: topics with title search and pagination
        - **Posts & Replies**: discussions under each thread
        - **Auth**: registration and JWT bearer login
        - **Users**: account administration for Admins
        """,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ForumError, forum_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include API router
    app.include_router(api_v1_router, prefix=settings.api_v1_prefix)

    @app.get("/health", tags=["System"])
    async def health_check() -> dict:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    @app.get("/", tags=["System"])
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "api": settings.api_v1_prefix,
        }

    return app


app = create_app()
