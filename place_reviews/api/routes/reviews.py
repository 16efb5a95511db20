"""Review Routes: POST /reviews (atomic find-or-create place + review insert).

Invariants:
    - 201 with the created review; 409 on duplicate (user, place); 400 on invalid rating
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.api.dependencies import get_current_user_id
from place_reviews.config import get_settings, Settings
from place_reviews.infrastructure.database import get_db
from place_reviews.schemas.review import ReviewCreate, ReviewResponse
from place_reviews.services.review_submission import submit_review

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post(
    "", response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_review(
    body: ReviewCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Submit a review, creating the place on first mention."""
    submission = await submit_review(
        db,
        user_id=user_id,
        place_name=body.place_name,
        address=body.address,
        rating=body.rating,
        text=body.text,
        max_attempts=settings.place_create_max_attempts,
    )
    review = submission.review
    return ReviewResponse(
        id=review.id,
        rating=review.rating,
        text=review.text,
        user_id=review.user_id,
        place_id=review.place_id,
        created_at=review.created_at,
        place_created=submission.place_created,
    )
