"""Domain Types: identity aliases and rating bounds shared across layers.

Invariants:
    - UserId, PlaceId wrap integer surrogate keys
    - MIN_RATING/MAX_RATING are the single source of truth for the rating range
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PlaceId = NewType("PlaceId", int)


# ─── Value Bounds ────────────────────────────────────────────────

MIN_RATING: int = 1
MAX_RATING: int = 5
