"""Place Queries: read-only search and detail built on the shared rating summary.

Invariants:
    - Both queries compute averages with core.rating_summary.summarize_ratings
    - Detail raises NotFoundError for unknown ids
    - Detail reviews: viewer's own first, then newest first; no phone or password hash
"""

from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.core.enforce_review import check_rating_valid
from place_reviews.core.domain_types import PlaceId, UserId
from place_reviews.core.errors import NotFoundError, ErrorContext
from place_reviews.core.rating_summary import summarize_ratings
from place_reviews.core.review_ordering import order_reviews_for_viewer
from place_reviews.core.search_ranking import build_search_results, normalize_name_query
from place_reviews.services.place_store import PlaceStore
from place_reviews.services.review_store import ReviewStore


async def search_places(
    db: AsyncSession, name: str | None = None, min_rating: int | None = None,
) -> dict:
    """Places matching name (exact before partial) with average >= min_rating."""
    if min_rating is not None:
        check_rating_valid(min_rating, "minRating")
    query = normalize_name_query(name)

    candidates = await PlaceStore(db).search_candidates(query)
    results = build_search_results(candidates, query, min_rating)
    return {"count": len(results), "results": results}


async def get_place_detail(
    db: AsyncSession, place_id: PlaceId, viewer_id: UserId | None = None,
) -> dict:
    """Place with its rating summary and ordered reviews."""
    place = await PlaceStore(db).get(place_id)
    if not place:
        raise NotFoundError(
            "Place", place_id, ErrorContext(user_id=viewer_id, place_id=place_id),
        )

    reviews = await ReviewStore(db).list_for_place_with_authors(place.id)
    summary = summarize_ratings(r["rating"] for r in reviews)

    return {
        "id": place.id,
        "name": place.name,
        "address": place.address,
        "average_rating": summary.average,
        "reviews_count": summary.count,
        "reviews": order_reviews_for_viewer(reviews, viewer_id),
    }
