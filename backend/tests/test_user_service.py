"""UserService: listing, update with password reset, delete."""

import pytest

from forum_app.core.errors import ErrorKind, InternalError, NotFoundError, ValidationError
from forum_app.modules.auth.identity import IdentityManager, IdentityResult
from forum_app.modules.users.service import UserService
from forum_app.schemas.user import RegistrationRequest

from .conftest import PASSWORD, make_user


@pytest.mark.asyncio
async def test_get_all_users_with_filter(db):
    for name in ("alice", "alicia", "bob"):
        await make_user(db, name)
    service = UserService(db)

    everyone = await service.get_all_users(None, page=1, page_size=2)
    assert len(everyone.users) == 2
    assert everyone.users_count == 3

    filtered = await service.get_all_users("ali", page=1, page_size=10)
    assert sorted(u.username for u in filtered.users) == ["alice", "alicia"]
    assert filtered.users_count == 2
    assert filtered.users[0].roles == ["User"]


@pytest.mark.asyncio
async def test_get_user_by_id(db):
    user = await make_user(db, "alice")
    service = UserService(db)

    found = await service.get_user_by_id(user.id)
    assert found.username == "alice"
    assert await service.get_user_by_id(user.id + 1) is None


@pytest.mark.asyncio
async def test_update_user_overwrites_fields_and_password(db):
    user = await make_user(db, "alice")

    updated = await UserService(db).update_user(
        user.id,
        RegistrationRequest(username="alice2", email="new@example.com", password="Fresh-Pass1"),
    )

    assert updated.username == "alice2"
    assert updated.email == "new@example.com"
    identity = IdentityManager(db)
    stored = await identity.find_by_username("alice2")
    assert await identity.check_password(stored, "Fresh-Pass1")
    assert not await identity.check_password(stored, PASSWORD)


@pytest.mark.asyncio
async def test_update_user_without_password_keeps_it(db):
    user = await make_user(db, "alice")

    await UserService(db).update_user(
        user.id, RegistrationRequest(username="alice", email="a@example.com")
    )

    assert await IdentityManager(db).check_password(user, PASSWORD)


@pytest.mark.asyncio
async def test_update_user_weak_password(db):
    user = await make_user(db, "alice")

    with pytest.raises(ValidationError, match="Failed to update password: "):
        await UserService(db).update_user(
            user.id, RegistrationRequest(username="alice", email="a@example.com", password="weak")
        )


@pytest.mark.asyncio
async def test_update_user_taken_name(db):
    user = await make_user(db, "alice")
    await make_user(db, "bob")

    with pytest.raises(ValidationError, match="Username 'bob' is already taken."):
        await UserService(db).update_user(
            user.id, RegistrationRequest(username="bob", email="a@example.com")
        )


@pytest.mark.asyncio
async def test_update_missing_user(db):
    with pytest.raises(NotFoundError, match="User with ID 9 not found."):
        await UserService(db).update_user(
            9, RegistrationRequest(username="x", email="x@example.com")
        )


@pytest.mark.asyncio
async def test_delete_user(db):
    user = await make_user(db, "alice")
    service = UserService(db)

    await service.delete_user(user.id)

    assert await service.get_user_by_id(user.id) is None
    with pytest.raises(NotFoundError):
        await service.delete_user(user.id)


@pytest.mark.asyncio
async def test_update_user_rejected_reset_token_is_internal(db, monkeypatch):
    user = await make_user(db, "alice")
    service = UserService(db)

    async def reject(*args, **kwargs):
        return IdentityResult.failed("Invalid token.")

    monkeypatch.setattr(service.identity, "reset_password", reject)

    with pytest.raises(InternalError) as exc_info:
        await service.update_user(
            user.id,
            RegistrationRequest(username="alice", email="a@example.com", password="Fresh-Pass1"),
        )
    assert exc_info.value.kind is ErrorKind.INTERNAL
    assert await service.identity.check_password(user, PASSWORD)
