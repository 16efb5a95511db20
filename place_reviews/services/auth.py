"""Auth Service: registration and phone/password login.

Invariants:
    - Duplicate phone is detected by uq_users_phone and reported as ConflictError
    - Unknown phone and wrong password produce the same AuthError message
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.core.enforce_review import check_text_present
from place_reviews.core.errors import AuthError, ConflictError
from place_reviews.infrastructure.security import hash_password, verify_password
from place_reviews.models.user import User
from place_reviews.services.identity_store import UserStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid phone or password"


async def register_user(
    db: AsyncSession, name: str, phone: str, password: str,
) -> User:
    name = check_text_present(name, "name")
    phone = check_text_present(phone, "phone")
    try:
        user = await UserStore(db).create(name, phone, hash_password(password))
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Phone number already registered")
    logger.info("User registered", extra={"user_id": user.id})
    return user


async def authenticate_user(db: AsyncSession, phone: str, password: str) -> User:
    user = await UserStore(db).get_by_phone(phone.strip())
    if not user or not verify_password(password, user.password_hash):
        raise AuthError(INVALID_CREDENTIALS_MESSAGE)
    return user
