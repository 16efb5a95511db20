"""Place Store: places keyed by unique (name, address), with explicit find-or-create.

Invariants:
    - find_or_create returns PlaceLookup(created, place) so the side effect stays visible
    - A lost creation race surfaces as IntegrityError from uq_places_name_address;
      the caller rolls back and retries (see services/review_submission.py)
    - search_candidates matches names case-insensitively as a substring, % and _ literal
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.models.place import Place
from place_reviews.models.review import Review

logger = logging.getLogger(__name__)


@dataclass
class PlaceLookup:
    created: bool
    place: Place


class PlaceStore:
    """Place persistence and candidate queries."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, place_id: int) -> Place | None:
        return await self.db.get(Place, place_id)

    async def get_by_name_address(self, name: str, address: str) -> Place | None:
        result = await self.db.execute(
            select(Place)
            .where(Place.name == name)
            .where(Place.address == address)
        )
        return result.scalar_one_or_none()

    async def find_or_create(self, name: str, address: str) -> PlaceLookup:
        """Exact (name, address) lookup; inserts and flushes when absent."""
        place = await self.get_by_name_address(name, address)
        if place:
            return PlaceLookup(created=False, place=place)

        place = Place(name=name, address=address)
        self.db.add(place)
        await self.db.flush()
        logger.info("Place created", extra={"place_id": place.id})
        return PlaceLookup(created=True, place=place)

    async def search_candidates(
        self, name: str | None = None,
    ) -> list[tuple[int, str, list[int]]]:
        """(id, name, ratings) for every place matching the name filter, id ascending."""
        query = (
            select(Place.id, Place.name, Review.rating)
            .outerjoin(Review, Review.place_id == Place.id)
            .order_by(Place.id)
        )
        if name:
            query = query.where(
                func.lower(Place.name).contains(name.lower(), autoescape=True),
            )

        result = await self.db.execute(query)
        candidates: dict[int, tuple[int, str, list[int]]] = {}
        for place_id, place_name, rating in result.all():
            entry = candidates.setdefault(place_id, (place_id, place_name, []))
            if rating is not None:
                entry[2].append(rating)
        return list(candidates.values())
