"""Auth Service: registration uniqueness and credential checks."""

import pytest

from place_reviews.core.errors import AuthError, ConflictError
from place_reviews.services.auth import authenticate_user, register_user


async def test_register_then_authenticate(test_db):
    user = await register_user(test_db, "Alice", "+15551230000", "correct-horse")
    assert user.id is not None
    assert user.password_hash != "correct-horse"

    authed = await authenticate_user(test_db, "+15551230000", "correct-horse")
    assert authed.id == user.id


async def test_duplicate_phone_conflicts(test_db):
    await register_user(test_db, "Alice", "+15551230000", "correct-horse")
    with pytest.raises(ConflictError, match="already registered"):
        await register_user(test_db, "Impostor", "+15551230000", "another-pass")


async def test_wrong_password_rejected(test_db):
    await register_user(test_db, "Alice", "+15551230000", "correct-horse")
    with pytest.raises(AuthError, match="Invalid phone or password"):
        await authenticate_user(test_db, "+15551230000", "wrong-horse")


async def test_unknown_phone_rejected_with_same_message(test_db):
    with pytest.raises(AuthError, match="Invalid phone or password"):
        await authenticate_user(test_db, "+19999999999", "whatever")
