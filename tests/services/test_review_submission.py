"""Review Submission: find-or-create place and atomic review insert.

Tests cover:
    - every rating 1..5 succeeds for a fresh (user, place)
    - second review for the same (user, place) raises ConflictError
    - existing places are reused; new places are created exactly once
    - a failed review insert rolls back the place it created
    - only a uq_reviews_user_place violation is a conflict
    - a lost place-creation race is retried against the winner's row
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from place_reviews.core.errors import ConflictError, DatabaseError, ValidationError
from place_reviews.models.place import Place
from place_reviews.models.review import Review
from place_reviews.services.place_store import PlaceStore
from place_reviews.services.review_store import ReviewStore, is_duplicate_review
from place_reviews.services.review_submission import (
    DUPLICATE_REVIEW_MESSAGE,
    submit_review,
)
from tests.services.seed import add_place, add_user


async def _count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
async def test_every_valid_rating_succeeds(test_db, alice, rating):
    submission = await submit_review(
        test_db, alice.id, "Blue Bottle", "1 Main St", rating, "Nice",
    )
    assert submission.review.id is not None
    assert submission.review.rating == rating
    assert submission.place_created is True


async def test_returns_review_with_resolved_place(test_db, alice):
    place = await add_place(test_db, "Blue Bottle", "1 Main St")
    submission = await submit_review(
        test_db, alice.id, "Blue Bottle", "1 Main St", 4, "Solid espresso",
    )
    assert submission.place_created is False
    assert submission.review.place_id == place.id
    assert submission.review.user_id == alice.id
    assert submission.review.text == "Solid espresso"
    assert submission.review.created_at is not None


async def test_same_name_different_address_is_a_new_place(test_db, alice):
    await submit_review(test_db, alice.id, "Blue Bottle", "1 Main St", 4, "A")
    second = await submit_review(test_db, alice.id, "Blue Bottle", "9 Oak Ave", 5, "B")
    assert second.place_created is True
    assert await _count(test_db, Place) == 2


async def test_second_review_same_user_and_place_conflicts(test_db, alice):
    await submit_review(test_db, alice.id, "Blue Bottle", "1 Main St", 4, "First")
    with pytest.raises(ConflictError) as exc_info:
        await submit_review(test_db, alice.id, "Blue Bottle", "1 Main St", 2, "Second")
    assert exc_info.value.message == DUPLICATE_REVIEW_MESSAGE
    assert await _count(test_db, Review) == 1


async def test_different_users_can_review_same_place(test_db, alice, bob):
    await submit_review(test_db, alice.id, "Blue Bottle", "1 Main St", 4, "A")
    await submit_review(test_db, bob.id, "Blue Bottle", "1 Main St", 2, "B")
    assert await _count(test_db, Place) == 1
    assert await _count(test_db, Review) == 2


@pytest.mark.parametrize("rating", [0, 6, -3])
async def test_out_of_range_rating_rejected_before_writing(test_db, alice, rating):
    with pytest.raises(ValidationError):
        await submit_review(test_db, alice.id, "Blue Bottle", "1 Main St", rating, "x")
    assert await _count(test_db, Place) == 0


async def test_blank_text_rejected(test_db, alice):
    with pytest.raises(ValidationError) as exc_info:
        await submit_review(test_db, alice.id, "Blue Bottle", "1 Main St", 3, "   ")
    assert exc_info.value.field == "text"


async def test_place_name_and_address_are_stripped(test_db, alice):
    place = await add_place(test_db, "Blue Bottle", "1 Main St")
    submission = await submit_review(
        test_db, alice.id, "  Blue Bottle ", " 1 Main St  ", 5, "x",
    )
    assert submission.review.place_id == place.id


def _failing_create(message: str):
    async def _create(self, **kwargs):
        raise IntegrityError("INSERT INTO reviews", {}, Exception(message))
    return _create


async def test_failed_review_insert_rolls_back_new_place(test_db, alice, monkeypatch):
    monkeypatch.setattr(
        ReviewStore, "create",
        _failing_create("UNIQUE constraint failed: reviews.user_id, reviews.place_id"),
    )

    with pytest.raises(ConflictError):
        await submit_review(test_db, alice.id, "Ghost Cafe", "404 Nowhere", 3, "x")
    assert await _count(test_db, Place) == 0


async def test_conflict_context_names_the_place(test_db, alice):
    user_id = alice.id
    first = await submit_review(test_db, user_id, "Blue Bottle", "1 Main St", 4, "First")
    place_id = first.review.place_id
    with pytest.raises(ConflictError) as exc_info:
        await submit_review(test_db, user_id, "Blue Bottle", "1 Main St", 2, "Again")
    assert exc_info.value.context.user_id == user_id
    assert exc_info.value.context.place_id == place_id


async def test_non_duplicate_integrity_failure_is_not_a_conflict(test_db, alice, monkeypatch):
    monkeypatch.setattr(
        ReviewStore, "create", _failing_create("FOREIGN KEY constraint failed"),
    )

    with pytest.raises(DatabaseError) as exc_info:
        await submit_review(test_db, alice.id, "Ghost Cafe", "404 Nowhere", 3, "x")
    assert exc_info.value.http_status == 500
    assert await _count(test_db, Place) == 0


async def test_lost_place_race_retries_against_existing_row(test_db, alice, monkeypatch):
    existing_id = (await add_place(test_db, "Race Cafe", "1 Fast Ln")).id
    original_lookup = PlaceStore.get_by_name_address
    calls = {"n": 0}

    async def _stale_first_lookup(self, name, address):
        calls["n"] += 1
        if calls["n"] == 1:
            return None  # another request inserted the place after this lookup
        return await original_lookup(self, name, address)

    monkeypatch.setattr(PlaceStore, "get_by_name_address", _stale_first_lookup)

    submission = await submit_review(test_db, alice.id, "Race Cafe", "1 Fast Ln", 5, "x")
    assert calls["n"] == 2
    assert submission.place_created is False
    assert submission.review.place_id == existing_id
    assert await _count(test_db, Place) == 1


async def test_exhausted_place_retries_raise_conflict(test_db, alice, monkeypatch):
    await add_place(test_db, "Race Cafe", "1 Fast Ln")

    async def _always_stale(self, name, address):
        return None

    monkeypatch.setattr(PlaceStore, "get_by_name_address", _always_stale)

    with pytest.raises(ConflictError):
        await submit_review(
            test_db, alice.id, "Race Cafe", "1 Fast Ln", 5, "x", max_attempts=2,
        )
    assert await _count(test_db, Place) == 1
    assert await _count(test_db, Review) == 0


async def test_place_store_find_or_create_is_tagged(test_db):
    store = PlaceStore(test_db)
    first = await store.find_or_create("Cafe", "1 Main St")
    await test_db.commit()
    second = await store.find_or_create("Cafe", "1 Main St")
    assert first.created is True
    assert second.created is False
    assert first.place.id == second.place.id


async def test_seeded_user_without_reviews(test_db):
    user = await add_user(test_db, "Dana", "+15550000009")
    submission = await submit_review(test_db, user.id, "Cafe", "1 Main St", 3, "fine")
    assert submission.review.user_id == user.id


@pytest.mark.parametrize("message, duplicate", [
    ("UNIQUE constraint failed: reviews.user_id, reviews.place_id", True),
    ('duplicate key value violates unique constraint "uq_reviews_user_place"', True),
    ("FOREIGN KEY constraint failed", False),
    ('insert on table "reviews" violates foreign key constraint "reviews_user_id_fkey"', False),
])
def test_is_duplicate_review(message, duplicate):
    exc = IntegrityError("INSERT INTO reviews", {}, Exception(message))
    assert is_duplicate_review(exc) is duplicate
