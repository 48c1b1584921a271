"""Pytest configuration and shared fixtures."""
# ruff: noqa: E402

import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from forum_app.core.database import create_engine, create_session_maker, get_db, init_db
from forum_app.core.security import create_access_token
from forum_app.main import create_app
from forum_app.models.forum import ForumThread, Post, Reply
from forum_app.models.user import RoleName, User
from forum_app.modules.auth.identity import IdentityManager
from forum_app.modules.auth.seed import seed_roles

PASSWORD = "Passw0rd!"


# ==================== Database ====================


@pytest_asyncio.fixture
async def session_maker():
    engine = create_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_db(engine)
    maker = create_session_maker(engine)
    async with maker() as session:
        await seed_roles(session)
        await session.commit()
    yield maker
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


# ==================== Factories ====================


async def make_user(
    db: AsyncSession,
    username: str,
    role: RoleName = RoleName.USER,
    password: str = PASSWORD,
) -> User:
    """Create a user through the identity manager and give it a role."""
    identity = IdentityManager(db)
    user = User(username=username, email=f"{username}@example.com", roles=[])
    result = await identity.create_user(user, password)
    assert result.succeeded, result.errors
    await identity.add_to_role(user, role)
    return user


async def make_thread(db: AsyncSession, author: User, title: str = "Test Thread") -> ForumThread:
    thread = ForumThread(title=title, content="content", author_id=author.id)
    db.add(thread)
    await db.flush()
    return thread


async def make_post(db: AsyncSession, thread: ForumThread, author: User, content: str = "post") -> Post:
    post = Post(content=content, thread_id=thread.id, author_id=author.id)
    db.add(post)
    await db.flush()
    return post


async def make_reply(db: AsyncSession, post: Post, author: User, content: str = "reply") -> Reply:
    reply = Reply(content=content, post_id=post.id, author_id=author.id)
    db.add(reply)
    await db.flush()
    return reply


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(
        {
            "sub": str(user.id),
            "name": user.username,
            "nameidentifier": str(user.id),
            "email": user.email,
            "role": user.role_names,
        }
    )
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def alice(db) -> User:
    user = await make_user(db, "alice")
    await db.commit()
    return user


@pytest_asyncio.fixture
async def bob(db) -> User:
    user = await make_user(db, "bob")
    await db.commit()
    return user


@pytest_asyncio.fixture
async def admin(db) -> User:
    user = await make_user(db, "admin", RoleName.ADMIN)
    await db.commit()
    return user


# ==================== HTTP ====================


@pytest.fixture
def app(session_maker):
    application = create_app()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
