import asyncio

import pytest

from glowboard.core.exceptions import AuthenticationError, GatewayError
from glowboard.core.identity import Identity
from glowboard.schemas.user import UserCreate
from glowboard.services.gateways import UserGateway

OWNER = Identity(email="owner@glowboard.test", display_name="Olivia Owner")
STAFF = Identity(email="sam@glowboard.test", display_name="Sam Staff")


@pytest.mark.asyncio
async def test_first_user_becomes_admin(store, make_identity_provider):
    """Test that only the first auto-created user is an admin"""
    owner = await UserGateway(store, make_identity_provider(OWNER)).me()
    staff = await UserGateway(store, make_identity_provider(STAFF)).login()

    assert owner.is_admin is True
    assert owner.full_name == "Olivia Owner"
    assert owner.location == "Flatiron"
    assert staff.is_admin is False


@pytest.mark.asyncio
async def test_me_returns_existing_user(store, make_identity_provider):
    """Test that an existing user is not created twice"""
    gateway = UserGateway(store, make_identity_provider(OWNER))

    first = await gateway.me()
    second = await gateway.me()

    assert first.id == second.id
    assert len(await gateway.list()) == 1


@pytest.mark.asyncio
async def test_concurrent_first_sign_ins(store, make_identity_provider):
    """Test that simultaneous first sign-ins produce exactly one admin"""
    lock = asyncio.Lock()
    gateways = [
        UserGateway(store, make_identity_provider(identity), bootstrap_lock=lock)
        for identity in (OWNER, STAFF)
    ]

    users = await asyncio.gather(*(gateway.me() for gateway in gateways))

    assert sorted(user.is_admin for user in users) == [False, True]


@pytest.mark.asyncio
async def test_me_without_identity(store, make_identity_provider):
    """Test that no signed-in identity is an authentication error"""
    with pytest.raises(AuthenticationError, match="Not authenticated"):
        await UserGateway(store, make_identity_provider(None)).me()


@pytest.mark.asyncio
@pytest.mark.parametrize("code,message", [
    ("auth/popup-blocked", "Popup was blocked. Please allow popups for this site and try again."),
    ("auth/popup-closed-by-user", "Login was cancelled. Please try again."),
    ("auth/internal-error", "Login failed: Something broke"),
])
async def test_login_errors_are_classified(store, make_identity_provider, provider_error, code, message):
    """Test the user-facing login failure messages"""
    provider = make_identity_provider(sign_in_error=provider_error(code, "Something broke"))

    with pytest.raises(AuthenticationError) as exc_info:
        await UserGateway(store, provider).login()

    assert str(exc_info.value) == message
    assert exc_info.value.code == code


@pytest.mark.asyncio
async def test_logout_failure(store, make_identity_provider):
    """Test that sign-out failures are reported generically"""
    provider = make_identity_provider(OWNER, sign_out_error=RuntimeError("socket closed"))

    with pytest.raises(AuthenticationError, match="Failed to logout"):
        await UserGateway(store, provider).logout()


@pytest.mark.asyncio
async def test_promote_to_admin(store, make_identity_provider):
    """Test promotion by email, which is idempotent"""
    gateway = UserGateway(store, make_identity_provider(None))
    await gateway.create(UserCreate(email="sam@glowboard.test", location="UWS"))

    promoted = await gateway.promote_to_admin("sam@glowboard.test")
    again = await gateway.promote_to_admin("sam@glowboard.test")

    assert promoted.is_admin is True
    assert again.id == promoted.id


@pytest.mark.asyncio
async def test_promote_unknown_user(store, make_identity_provider):
    """Test that promoting an unknown email fails generically"""
    with pytest.raises(GatewayError, match="Failed to promote user to admin"):
        await UserGateway(store, make_identity_provider(None)).promote_to_admin("ghost@glowboard.test")


@pytest.mark.asyncio
async def test_is_first_user_on_store_failure(failing_store, make_identity_provider):
    """Test that a failing store never reports a first user"""
    assert await UserGateway(failing_store, make_identity_provider(None)).is_first_user() is False
