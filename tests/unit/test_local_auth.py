from unittest.mock import AsyncMock

import pytest

from infonest.domain.auth import SignupData
from infonest.domain.role import Role
from infonest.exceptions import InvalidCredentialsError
from infonest.infrastructure.auth.local_auth import LocalAuthService
from tests.conftest import TEST_PASSWORD


def make_auth(user_service, token_service, store):
    return LocalAuthService(user_service, token_service, store, token_key="auth_token")


@pytest.mark.asyncio
async def test_signup_starts_session(user_service, token_service, store):
    auth = make_auth(user_service, token_service, store)
    user = await auth.signup(SignupData("sam@campus.edu", TEST_PASSWORD, "Sam Student"))

    assert user.role is Role.STUDENT
    assert await store.get("auth_token") is not None
    restored = await auth.get_current_user()
    assert restored == user


@pytest.mark.asyncio
async def test_login_bad_password_keeps_store_empty(user_service, token_service, store):
    auth = make_auth(user_service, token_service, store)
    await user_service.create_user(SignupData("sam@campus.edu", TEST_PASSWORD, "Sam Student"))

    with pytest.raises(InvalidCredentialsError):
        await auth.login("sam@campus.edu", "wrong-pass1")
    assert await store.get("auth_token") is None
    assert await auth.get_current_user() is None


@pytest.mark.asyncio
async def test_logout_revokes_and_clears(user_service, token_service, store):
    auth = make_auth(user_service, token_service, store)
    await user_service.create_user(SignupData("sam@campus.edu", TEST_PASSWORD, "Sam Student"))
    await auth.login("sam@campus.edu", TEST_PASSWORD)
    token = await store.get("auth_token")

    await auth.logout()
    await auth.logout()

    assert await store.get("auth_token") is None
    assert await store.get(f"revoked:{token_service.get_token_hash(token)}") == "1"
    assert await auth.get_current_user() is None


@pytest.mark.asyncio
async def test_login_right_after_logout_restores(user_service, token_service, store):
    auth = make_auth(user_service, token_service, store)
    user = await auth.signup(SignupData("sam@campus.edu", TEST_PASSWORD, "Sam Student"))
    await auth.logout()
    await auth.login("sam@campus.edu", TEST_PASSWORD)

    assert await auth.get_current_user() == user


@pytest.mark.asyncio
async def test_garbage_token_restores_nothing(user_service, token_service, store):
    auth = make_auth(user_service, token_service, store)
    await store.set("auth_token", "not-a-jwt")
    assert await auth.get_current_user() is None


@pytest.mark.asyncio
async def test_logout_store_failure_is_not_raised(user_service, token_service):
    broken = AsyncMock()
    broken.get = AsyncMock(side_effect=ConnectionError("store down"))
    auth = make_auth(user_service, token_service, broken)
    await auth.logout()
