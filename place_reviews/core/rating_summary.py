"""Rating Summary: the one aggregation used by both search and place detail.

Invariants:
    - Empty input yields average 0.0 and count 0
    - Average is the arithmetic mean rounded half-up to 2 decimals
    - Pure: recomputed from live ratings on every call, nothing cached
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable


_TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class RatingSummary:
    average: float
    count: int


def summarize_ratings(ratings: Iterable[int]) -> RatingSummary:
    """Mean and count of a place's ratings. Pure, no IO."""
    values = list(ratings)
    if not values:
        return RatingSummary(average=0.0, count=0)
    mean = Decimal(sum(values)) / Decimal(len(values))
    average = float(mean.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
    return RatingSummary(average=average, count=len(values))
