"""Review Store: reviews keyed by unique (user_id, place_id).

Invariants:
    - create() flushes inside the caller's transaction, so uq_reviews_user_place is
      checked by the database before commit
    - is_duplicate_review tells a uq_reviews_user_place violation apart from other
      integrity failures
    - list_for_place_with_authors exposes the author's display name only
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.models.review import Review
from place_reviews.models.user import User

# PostgreSQL reports the constraint name, SQLite the constrained columns
_DUPLICATE_REVIEW_MARKERS = (
    "uq_reviews_user_place",
    "reviews.user_id, reviews.place_id",
)


def is_duplicate_review(exc: IntegrityError) -> bool:
    """True when the violation is uq_reviews_user_place, not another constraint."""
    message = str(exc.orig)
    return any(marker in message for marker in _DUPLICATE_REVIEW_MARKERS)


class ReviewStore:
    """Review persistence and joined reads."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, user_id: int, place_id: int, rating: int, text: str,
    ) -> Review:
        review = Review(
            user_id=user_id, place_id=place_id, rating=rating, text=text,
        )
        self.db.add(review)
        await self.db.flush()
        return review

    async def list_for_place_with_authors(self, place_id: int) -> list[dict]:
        result = await self.db.execute(
            select(Review, User.name)
            .join(User, User.id == Review.user_id)
            .where(Review.place_id == place_id)
        )
        return [
            {
                "id": review.id,
                "user_id": review.user_id,
                "rating": review.rating,
                "text": review.text,
                "created_at": review.created_at,
                "user_name": user_name,
            }
            for review, user_name in result.all()
        ]
