"""Review Submission: find-or-create the place and insert the review in one transaction.

Invariants:
    - Rating and text are re-checked here even after request validation
    - Place creation and review insert commit together or not at all
    - Duplicate (user, place) is detected by uq_reviews_user_place, never by a pre-check,
      and reported as ConflictError after rolling back; any other integrity failure
      (e.g. a foreign key to a missing user) is a DatabaseError
    - A lost place-creation race rolls back and retries up to max_attempts, re-fetching
      the place the winner created; exhausting retries is a ConflictError
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.core.enforce_review import check_rating_valid, check_text_present
from place_reviews.core.domain_types import UserId
from place_reviews.core.errors import ConflictError, DatabaseError, ErrorContext
from place_reviews.models.review import Review
from place_reviews.services.place_store import PlaceStore
from place_reviews.services.review_store import ReviewStore, is_duplicate_review

logger = logging.getLogger(__name__)

DUPLICATE_REVIEW_MESSAGE = "You have already reviewed this place"


@dataclass
class ReviewSubmission:
    review: Review
    place_created: bool


async def submit_review(
    db: AsyncSession,
    user_id: UserId,
    place_name: str,
    address: str,
    rating: int,
    text: str,
    max_attempts: int = 3,
) -> ReviewSubmission:
    """Create a review for (place_name, address), creating the place if needed."""
    rating = check_rating_valid(rating)
    text = check_text_present(text, "text")
    place_name = check_text_present(place_name, "placeName")
    address = check_text_present(address, "address")

    places = PlaceStore(db)
    reviews = ReviewStore(db)

    for attempt in range(1, max_attempts + 1):
        try:
            lookup = await places.find_or_create(place_name, address)
        except IntegrityError:
            await db.rollback()
            logger.info(
                "Place creation raced, retrying",
                extra={"user_id": user_id, "attempt": attempt},
            )
            continue

        # rollback() expires the place row; read its id while it is loaded
        place_id = lookup.place.id
        try:
            review = await reviews.create(
                user_id=user_id, place_id=place_id, rating=rating, text=text,
            )
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            context = ErrorContext(user_id=user_id, place_id=place_id)
            if is_duplicate_review(e):
                raise ConflictError(DUPLICATE_REVIEW_MESSAGE, context)
            logger.error(f"Review insert rejected: {e.orig}", extra={"user_id": user_id})
            raise DatabaseError("Review insert rejected", "insert", context)

        logger.info(
            "Review created",
            extra={"user_id": user_id, "place_id": review.place_id, "review_id": review.id},
        )
        return ReviewSubmission(review=review, place_created=lookup.created)

    raise ConflictError(
        "Place could not be resolved due to concurrent updates, please retry",
        ErrorContext(user_id=user_id, debug_info={"attempts": max_attempts}),
    )
