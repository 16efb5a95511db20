"""Place Schemas: search results and place detail."""

from datetime import datetime

from place_reviews.schemas.base import CamelModel


class PlaceSearchResult(CamelModel):
    id: int
    name: str
    average_rating: float


class PlaceSearchResponse(CamelModel):
    count: int
    results: list[PlaceSearchResult]


class PlaceReviewEntry(CamelModel):
    id: int
    rating: int
    text: str
    created_at: datetime
    user_name: str


class PlaceDetailResponse(CamelModel):
    id: int
    name: str
    address: str
    average_rating: float
    reviews_count: int
    reviews: list[PlaceReviewEntry]
