"""Review Schemas: submission request and created-review response.

Invariants:
    - rating is only type-checked here (strict int); range is enforced by core.enforce_review
"""

from datetime import datetime

from pydantic import Field, StrictInt

from place_reviews.schemas.base import CamelModel


class ReviewCreate(CamelModel):
    place_name: str = Field(max_length=200)
    address: str = Field(max_length=500)
    rating: StrictInt
    text: str = Field(max_length=5000)


class ReviewResponse(CamelModel):
    id: int
    rating: int
    text: str
    user_id: int
    place_id: int
    created_at: datetime
    place_created: bool = False
