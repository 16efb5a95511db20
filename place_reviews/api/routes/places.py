"""Place Routes: search and detail.

Invariants:
    - /places/search is declared before /places/{place_id} so "search" is never parsed as an id
    - minRating is type-checked here; range is re-checked by the service
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.api.dependencies import get_current_user_id
from place_reviews.infrastructure.database import get_db
from place_reviews.schemas.place import PlaceSearchResponse, PlaceDetailResponse
from place_reviews.services.place_queries import search_places, get_place_detail

router = APIRouter(prefix="/places", tags=["places"])


@router.get("/search", response_model=PlaceSearchResponse)
async def search(
    name: str | None = Query(None, max_length=200),
    min_rating: int | None = Query(None, alias="minRating"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Search places by name and minimum average rating."""
    return await search_places(db, name=name, min_rating=min_rating)


@router.get("/{place_id}", response_model=PlaceDetailResponse)
async def get_place(
    place_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Place detail with the caller's own review first."""
    return await get_place_detail(db, place_id, viewer_id=user_id)
