"""Review Rule Enforcement: domain checks re-applied after request validation.

Invariants:
    - Rating must be an int (bool rejected) within MIN_RATING..MAX_RATING
    - Text fields must be non-empty after stripping
    - Every violation raises ValidationError naming the offending field
"""

from place_reviews.core.domain_types import MIN_RATING, MAX_RATING
from place_reviews.core.errors import ValidationError


def check_rating_valid(rating: object, field: str = "rating") -> int:
    """Return rating unchanged, or raise ValidationError when out of range."""
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError(
            f"{field} must be an integer between {MIN_RATING} and {MAX_RATING}",
            field,
        )
    if rating < MIN_RATING or rating > MAX_RATING:
        raise ValidationError(
            f"{field} must be between {MIN_RATING} and {MAX_RATING}, got {rating}",
            field,
        )
    return rating


def check_text_present(value: str | None, field: str) -> str:
    """Return the stripped value, or raise ValidationError when blank."""
    stripped = (value or "").strip()
    if not stripped:
        raise ValidationError(f"{field} cannot be empty", field)
    return stripped
