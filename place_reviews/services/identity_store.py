"""Identity Store: users keyed by unique phone number.

Invariants:
    - create() flushes inside the caller's transaction; the caller commits
    - A duplicate phone surfaces as IntegrityError from uq_users_phone
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.models.user import User


class UserStore:
    """User persistence."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str, phone: str, password_hash: str) -> User:
        user = User(name=name, phone=phone, password_hash=password_hash)
        self.db.add(user)
        await self.db.flush()
        return user

    async def get_by_phone(self, phone: str) -> User | None:
        result = await self.db.execute(select(User).where(User.phone == phone))
        return result.scalar_one_or_none()
